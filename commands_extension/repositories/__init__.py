"""Repository layer for the extension store."""

from .command import CustomCommandRepository
from .task import ScheduledTaskRepository

__all__ = [
    "CustomCommandRepository",
    "ScheduledTaskRepository",
]
