"""Exception types raised across the extension."""

from __future__ import annotations


class CommandsExtensionError(Exception):
    """Base class for all extension errors."""


class ValidationError(CommandsExtensionError):
    """Missing or malformed request fields, or a non-numeric id."""


class ConstraintError(CommandsExtensionError):
    """A store constraint rejected the write (duplicate name)."""


class RegistrationError(CommandsExtensionError):
    """The host runtime refused a command or job registration."""


class TransportError(CommandsExtensionError):
    """The web server listener could not be started."""
