"""Dynamic chat commands and scheduled messages for a twitchio bot, managed over HTTP."""

from .plugin import CommandsExtensionPlugin

__all__ = ["CommandsExtensionPlugin"]

__version__ = "1.0.0"
