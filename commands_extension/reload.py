"""Reload controllers: re-derive the live sets from the store.

Each entity kind has one asyncio.Lock. ``apply()`` holds it across
"mutate store -> reload" so concurrent API calls of the same kind never
interleave their writes and syncs.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TypeVar

from rich.markup import escape

from commands_extension.bridge import RegistrationBridge
from commands_extension.repositories.command import CustomCommandRepository
from commands_extension.repositories.task import ScheduledTaskRepository

T = TypeVar("T")

LOGGER = logging.getLogger("CommandsExtension")
TASK_LOGGER = logging.getLogger("TaskScheduler")


class CommandReloader:
    def __init__(self, repo: CustomCommandRepository, bridge: RegistrationBridge) -> None:
        self.repo = repo
        self.bridge = bridge
        self._lock = asyncio.Lock()

    async def reload_commands(self) -> bool:
        """Unregister all live commands and register the enabled rows."""
        async with self._lock:
            return await self._reload()

    async def apply(self, mutation: Callable[[], Awaitable[T]]) -> T:
        """Run a store mutation, then reload, as one atomic region.

        If the mutation raises, nothing is reloaded and the error propagates.
        Reload failures are only logged: the write already committed.
        """
        async with self._lock:
            result = await mutation()
            await self._reload()
            return result

    async def shutdown(self) -> None:
        async with self._lock:
            self.bridge.drain_commands()

    async def _reload(self) -> bool:
        try:
            rows = await self.repo.list_enabled()
            self.bridge.sync_commands(rows)
        except Exception as e:
            LOGGER.error(f"Failed to reload commands: {escape(str(e))}")
            return False
        LOGGER.info("Commands reloaded successfully")
        return True


class TaskState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class TaskScheduler:
    """Scheduled task lifecycle: Stopped -> start() -> Running -> stop() -> Stopped."""

    def __init__(self, repo: ScheduledTaskRepository, bridge: RegistrationBridge) -> None:
        self.repo = repo
        self.bridge = bridge
        self.state = TaskState.STOPPED
        self._lock = asyncio.Lock()

    async def start(self) -> bool:
        """Load enabled tasks and register them as jobs."""
        async with self._lock:
            return await self._start()

    async def stop(self) -> None:
        """Remove every registered job."""
        async with self._lock:
            self._stop()

    async def reload_tasks(self) -> bool:
        """stop() then start(); always ends Running."""
        async with self._lock:
            return await self._reload()

    async def apply(self, mutation: Callable[[], Awaitable[T]]) -> T:
        """Run a store mutation, then reload tasks, as one atomic region."""
        async with self._lock:
            result = await mutation()
            await self._reload()
            return result

    async def _start(self) -> bool:
        try:
            rows = await self.repo.list_enabled()
            self.bridge.sync_tasks(rows)
            return True
        except Exception as e:
            TASK_LOGGER.error(f"Failed to load scheduled tasks: {escape(str(e))}")
            return False
        finally:
            self.state = TaskState.RUNNING

    def _stop(self) -> None:
        self.bridge.drain_tasks()
        self.state = TaskState.STOPPED

    async def _reload(self) -> bool:
        self._stop()
        ok = await self._start()
        if ok:
            TASK_LOGGER.info("Scheduled tasks reloaded")
        return ok
