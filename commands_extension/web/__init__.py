"""Web UI and management API server."""

from .server import WebServer

__all__ = ["WebServer"]
