"""Host runtime interface: what the extension needs from the bot."""

from __future__ import annotations

from typing import Protocol

from commands_extension.models.command import DynamicCommand
from commands_extension.models.task import ScheduledMessage


class HostRuntime(Protocol):
    """Registration entry points of the host bot.

    All calls are synchronous. ``register_command`` and ``schedule_job``
    raise on rejection; ``remove_scheduled_job`` raises LookupError for an
    unknown job.
    """

    def register_command(self, name: str, handler: DynamicCommand) -> None: ...

    def unregister_command(self, name: str) -> None: ...

    def schedule_job(self, name: str, interval_minutes: int, action: ScheduledMessage) -> None: ...

    def remove_scheduled_job(self, name: str) -> None: ...
