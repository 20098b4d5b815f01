"""Tests for the twitchio host runtime adapter."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from commands_extension.core import twitch_runtime
from commands_extension.core.errors import RegistrationError
from commands_extension.core.guards import CooldownTracker
from commands_extension.core.scheduler import JobScheduler
from commands_extension.core.twitch_runtime import TwitchRuntime, run_dynamic_command
from commands_extension.models.command import DynamicCommand, Role
from commands_extension.models.task import ScheduledMessage


def _make_ctx(user_id: str = "100", **roles: bool) -> MagicMock:
    base = {"broadcaster": False, "moderator": False, "vip": False, "subscriber": False}
    base.update(roles)
    ctx = MagicMock()
    ctx.chatter = SimpleNamespace(id=user_id, **base)
    ctx.send = AsyncMock()
    return ctx


def _make_bot() -> MagicMock:
    bot = MagicMock()
    bot.owner_id = "42"
    bot.bot_id = "99"
    return bot


class TestRunDynamicCommand:
    async def test_sends_response_verbatim(self) -> None:
        ctx = _make_ctx()
        cmd = DynamicCommand('He said "hi"', Role.EVERYONE, 0, 0)

        assert await run_dynamic_command(ctx, "quote", cmd, CooldownTracker()) is True
        ctx.send.assert_awaited_once_with('He said "hi"')

    async def test_role_gate(self) -> None:
        ctx = _make_ctx(subscriber=True)
        cmd = DynamicCommand("mods only", Role.MODERATOR, 0, 0)

        assert await run_dynamic_command(ctx, "mod", cmd, CooldownTracker()) is False
        ctx.send.assert_not_awaited()

    async def test_user_cooldown_blocks_second_use(self) -> None:
        tracker = CooldownTracker()
        cmd = DynamicCommand("hi", Role.EVERYONE, 5, 0)

        first, second, other = _make_ctx("1"), _make_ctx("1"), _make_ctx("2")
        assert await run_dynamic_command(first, "hello", cmd, tracker) is True
        assert await run_dynamic_command(second, "hello", cmd, tracker) is False
        assert await run_dynamic_command(other, "hello", cmd, tracker) is True


class TestTwitchRuntime:
    def test_broadcaster_defaults_to_owner(self) -> None:
        runtime = TwitchRuntime(_make_bot())
        assert runtime.broadcaster_id == "42"
        assert TwitchRuntime(_make_bot(), broadcaster_id="7").broadcaster_id == "7"

    def test_register_command_adds_twitchio_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        command_cls = MagicMock()
        monkeypatch.setattr(twitch_runtime.commands, "Command", command_cls)
        bot = _make_bot()
        runtime = TwitchRuntime(bot)

        runtime.register_command("hello", DynamicCommand("Hi!"))

        assert command_cls.call_args.kwargs["name"] == "hello"
        bot.add_command.assert_called_once_with(command_cls.return_value)

    def test_register_rejection_becomes_registration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(twitch_runtime.commands, "Command", MagicMock())
        bot = _make_bot()
        bot.add_command.side_effect = ValueError("already exists")
        runtime = TwitchRuntime(bot)

        with pytest.raises(RegistrationError):
            runtime.register_command("hello", DynamicCommand("Hi!"))

    def test_unregister_removes_command(self) -> None:
        bot = _make_bot()
        runtime = TwitchRuntime(bot)
        runtime.unregister_command("hello")
        bot.remove_command.assert_called_once_with("hello")

    async def test_send_message_targets_broadcaster(self) -> None:
        bot = _make_bot()
        broadcaster = MagicMock()
        broadcaster.send_message = AsyncMock()
        bot.create_partialuser.return_value = broadcaster
        runtime = TwitchRuntime(bot, broadcaster_id="7")

        await runtime.send_message("Follow!")

        bot.create_partialuser.assert_called_once_with(user_id="7")
        broadcaster.send_message.assert_awaited_once_with(
            message="Follow!", sender="99", token_for="99"
        )

    async def test_schedule_and_remove_job(self) -> None:
        runtime = TwitchRuntime(_make_bot(), scheduler=JobScheduler())

        runtime.schedule_job("promo", 10, ScheduledMessage("Follow!"))
        assert runtime.scheduler.job_names == {"promo"}

        runtime.remove_scheduled_job("promo")
        assert runtime.scheduler.job_names == set()
        with pytest.raises(LookupError):
            runtime.remove_scheduled_job("promo")
        await runtime.close()
