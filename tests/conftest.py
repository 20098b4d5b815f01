"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from aiohttp.test_utils import TestClient, TestServer

from commands_extension.bridge import RegistrationBridge
from commands_extension.core.database import DatabaseManager
from commands_extension.core.errors import RegistrationError
from commands_extension.models.command import DynamicCommand
from commands_extension.models.task import ScheduledMessage
from commands_extension.reload import CommandReloader, TaskScheduler
from commands_extension.repositories import CustomCommandRepository, ScheduledTaskRepository
from commands_extension.services import CommandService, TaskService
from commands_extension.web import WebServer


class FakeRuntime:
    """Recording host runtime.

    Rejects duplicate registrations the way a real command table would, and
    any name listed in ``reject``.
    """

    def __init__(self, reject: set[str] | None = None) -> None:
        self.commands: dict[str, DynamicCommand] = {}
        self.jobs: dict[str, tuple[int, ScheduledMessage]] = {}
        self.reject = reject or set()

    def register_command(self, name: str, handler: DynamicCommand) -> None:
        if name in self.reject:
            raise RegistrationError(f"rejected {name}")
        if name in self.commands:
            raise RegistrationError(f"duplicate command {name}")
        self.commands[name] = handler

    def unregister_command(self, name: str) -> None:
        self.commands.pop(name, None)

    def schedule_job(self, name: str, interval_minutes: int, action: ScheduledMessage) -> None:
        if name in self.reject:
            raise RegistrationError(f"rejected {name}")
        if name in self.jobs:
            raise RegistrationError(f"duplicate job {name}")
        self.jobs[name] = (interval_minutes, action)

    def remove_scheduled_job(self, name: str) -> None:
        if name not in self.jobs:
            raise LookupError(name)
        del self.jobs[name]


@pytest.fixture
def runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def bridge(runtime: FakeRuntime) -> RegistrationBridge:
    return RegistrationBridge(runtime)


@pytest.fixture
async def db(tmp_path: Path) -> AsyncIterator[DatabaseManager]:
    manager = DatabaseManager(tmp_path / "PluginData" / "test.db")
    await manager.connect()
    yield manager
    await manager.disconnect()


@pytest.fixture
def command_repo(db: DatabaseManager) -> CustomCommandRepository:
    return CustomCommandRepository(db.connection)


@pytest.fixture
def task_repo(db: DatabaseManager) -> ScheduledTaskRepository:
    return ScheduledTaskRepository(db.connection)


@pytest.fixture
def reloader(command_repo: CustomCommandRepository, bridge: RegistrationBridge) -> CommandReloader:
    return CommandReloader(command_repo, bridge)


@pytest.fixture
def task_scheduler(task_repo: ScheduledTaskRepository, bridge: RegistrationBridge) -> TaskScheduler:
    return TaskScheduler(task_repo, bridge)


@pytest.fixture
def command_service(
    command_repo: CustomCommandRepository, reloader: CommandReloader
) -> CommandService:
    return CommandService(command_repo, reloader)


@pytest.fixture
def task_service(task_repo: ScheduledTaskRepository, task_scheduler: TaskScheduler) -> TaskService:
    return TaskService(task_repo, task_scheduler)


@pytest.fixture
async def client(
    command_service: CommandService, task_service: TaskService
) -> AsyncIterator[TestClient[Any, Any]]:
    """Test client against a real WebServer app."""
    server = WebServer(command_service, task_service)
    test_server = TestServer(server.app)
    client = TestClient(test_server)
    await client.start_server()
    yield client
    await client.close()
