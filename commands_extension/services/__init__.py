"""Management API service layer."""

from .command_service import CommandService
from .task_service import TaskService

__all__ = [
    "CommandService",
    "TaskService",
]
