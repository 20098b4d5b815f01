"""twitchio implementation of the host runtime."""

from __future__ import annotations

import logging

from rich.markup import escape
from twitchio.ext import commands

from commands_extension.core.errors import RegistrationError
from commands_extension.core.guards import CooldownTracker, has_role
from commands_extension.core.scheduler import JobScheduler
from commands_extension.models.command import DynamicCommand
from commands_extension.models.task import ScheduledMessage

LOGGER = logging.getLogger("TwitchRuntime")


async def run_dynamic_command(
    ctx: commands.Context,
    name: str,
    command: DynamicCommand,
    cooldowns: CooldownTracker,
) -> bool:
    """Execute a custom command for ``ctx``. Returns True if a reply was sent."""
    chatter = ctx.chatter
    if not has_role(chatter, command.required_role):
        return False

    user_id = str(chatter.id)
    if cooldowns.is_on_cooldown(name, user_id, command):
        return False

    cooldowns.record(name, user_id)
    await ctx.send(command.response)
    LOGGER.info(f"Custom command: !{escape(name)} -> text response")
    return True


class TwitchRuntime:
    """Registers dynamic commands on a twitchio bot and runs interval jobs.

    Scheduled messages go to ``broadcaster_id`` (the bot owner if empty).
    """

    def __init__(
        self,
        bot: commands.Bot,
        *,
        broadcaster_id: str = "",
        scheduler: JobScheduler | None = None,
    ) -> None:
        self.bot = bot
        self.broadcaster_id = broadcaster_id or str(bot.owner_id)
        self.scheduler = scheduler or JobScheduler()
        self.cooldowns = CooldownTracker()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register_command(self, name: str, handler: DynamicCommand) -> None:
        async def _callback(ctx: commands.Context) -> None:
            await run_dynamic_command(ctx, name, handler, self.cooldowns)

        try:
            self.bot.add_command(commands.Command(_callback, name=name))
        except Exception as e:
            raise RegistrationError(f"Command '{name}' rejected: {e}") from e

    def unregister_command(self, name: str) -> None:
        self.bot.remove_command(name)
        self.cooldowns.clear(name)

    # ------------------------------------------------------------------
    # Scheduled jobs
    # ------------------------------------------------------------------

    def schedule_job(self, name: str, interval_minutes: int, action: ScheduledMessage) -> None:
        async def _fire() -> None:
            await self.send_message(action.message)
            LOGGER.info(f"Scheduled task '{escape(name)}' fired")

        self.scheduler.schedule(name, interval_minutes, _fire)

    def remove_scheduled_job(self, name: str) -> None:
        self.scheduler.remove(name)

    async def send_message(self, message: str) -> None:
        broadcaster = self.bot.create_partialuser(user_id=self.broadcaster_id)
        await broadcaster.send_message(
            message=message,
            sender=self.bot.bot_id,
            token_for=self.bot.bot_id,
        )

    async def close(self) -> None:
        await self.scheduler.close()
