"""Core modules for the commands extension."""

from .config import Settings, get_settings
from .database import DatabaseManager
from .errors import (
    CommandsExtensionError,
    ConstraintError,
    RegistrationError,
    TransportError,
    ValidationError,
)
from .guards import CooldownTracker, has_role
from .logging import setup_logging
from .runtime import HostRuntime
from .scheduler import JobScheduler

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Setup functions
    "setup_logging",
    # Database
    "DatabaseManager",
    # Errors
    "CommandsExtensionError",
    "ConstraintError",
    "RegistrationError",
    "TransportError",
    "ValidationError",
    # Runtime
    "HostRuntime",
    "JobScheduler",
    # Guards
    "CooldownTracker",
    "has_role",
]
