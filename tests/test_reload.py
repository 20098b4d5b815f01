"""Tests for the reload controllers."""

from __future__ import annotations

import pytest

from commands_extension.bridge import RegistrationBridge
from commands_extension.core.errors import ConstraintError
from commands_extension.reload import CommandReloader, TaskScheduler, TaskState
from commands_extension.repositories import CustomCommandRepository, ScheduledTaskRepository

from .conftest import FakeRuntime


class TestCommandReloader:
    async def test_reload_registers_enabled_rows_only(
        self,
        command_repo: CustomCommandRepository,
        reloader: CommandReloader,
        bridge: RegistrationBridge,
    ) -> None:
        await command_repo.insert("hello", "Hi!")
        await command_repo.insert("off", "nope", enabled=False)

        assert await reloader.reload_commands() is True
        assert bridge.live_commands == {"hello"}

    async def test_apply_reloads_after_mutation(
        self,
        command_repo: CustomCommandRepository,
        reloader: CommandReloader,
        bridge: RegistrationBridge,
    ) -> None:
        new_id = await reloader.apply(lambda: command_repo.insert("hello", "Hi!"))

        assert isinstance(new_id, int)
        assert bridge.live_commands == {"hello"}

    async def test_failed_mutation_skips_reload(
        self,
        command_repo: CustomCommandRepository,
        reloader: CommandReloader,
        runtime: FakeRuntime,
    ) -> None:
        await reloader.apply(lambda: command_repo.insert("hello", "Hi!"))
        before = dict(runtime.commands)

        with pytest.raises(ConstraintError):
            await reloader.apply(lambda: command_repo.insert("hello", "again"))

        assert runtime.commands == before
        assert runtime.commands["hello"].response == "Hi!"

    async def test_reload_failure_is_reported_not_raised(
        self,
        command_repo: CustomCommandRepository,
        reloader: CommandReloader,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def _broken() -> list:
            raise RuntimeError("db gone")

        monkeypatch.setattr(command_repo, "list_enabled", _broken)

        assert await reloader.reload_commands() is False
        # The mutation still succeeds and returns its result
        new_id = await reloader.apply(lambda: command_repo.insert("hello", "Hi!"))
        assert await command_repo.get(new_id) is not None

    async def test_shutdown_drains(
        self,
        command_repo: CustomCommandRepository,
        reloader: CommandReloader,
        runtime: FakeRuntime,
    ) -> None:
        await reloader.apply(lambda: command_repo.insert("hello", "Hi!"))
        await reloader.shutdown()
        assert runtime.commands == {}


class TestTaskScheduler:
    async def test_lifecycle(
        self,
        task_repo: ScheduledTaskRepository,
        task_scheduler: TaskScheduler,
        runtime: FakeRuntime,
    ) -> None:
        await task_repo.insert("promo", "Follow!", 10)
        assert task_scheduler.state is TaskState.STOPPED

        assert await task_scheduler.start() is True
        assert task_scheduler.state is TaskState.RUNNING
        assert set(runtime.jobs) == {"promo"}

        await task_scheduler.stop()
        assert task_scheduler.state is TaskState.STOPPED
        assert runtime.jobs == {}

    async def test_reload_picks_up_changes(
        self,
        task_repo: ScheduledTaskRepository,
        task_scheduler: TaskScheduler,
        runtime: FakeRuntime,
    ) -> None:
        await task_scheduler.start()
        await task_repo.insert("promo", "Follow!", 10)
        await task_repo.insert("paused", "zzz", 5, enabled=False)

        assert await task_scheduler.reload_tasks() is True

        assert task_scheduler.state is TaskState.RUNNING
        assert set(runtime.jobs) == {"promo"}

    async def test_start_failure_still_ends_running(
        self,
        task_repo: ScheduledTaskRepository,
        task_scheduler: TaskScheduler,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def _broken() -> list:
            raise RuntimeError("db gone")

        monkeypatch.setattr(task_repo, "list_enabled", _broken)

        assert await task_scheduler.start() is False
        assert task_scheduler.state is TaskState.RUNNING

    async def test_apply_failed_mutation_keeps_jobs(
        self,
        task_repo: ScheduledTaskRepository,
        task_scheduler: TaskScheduler,
        runtime: FakeRuntime,
    ) -> None:
        await task_scheduler.apply(lambda: task_repo.insert("promo", "Follow!", 10))

        with pytest.raises(ConstraintError):
            await task_scheduler.apply(lambda: task_repo.insert("promo", "dup", 1))

        assert runtime.jobs["promo"][0] == 10
