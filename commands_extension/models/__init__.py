"""Data models for custom commands and scheduled tasks."""

from .command import CustomCommand, DynamicCommand, Role
from .task import ScheduledMessage, ScheduledTask

__all__ = [
    "CustomCommand",
    "DynamicCommand",
    "Role",
    "ScheduledMessage",
    "ScheduledTask",
]
