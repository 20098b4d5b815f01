"""Command guards: role check and per-user / global cooldown tracking."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from commands_extension.models.command import DynamicCommand, Role

LOGGER = logging.getLogger("CommandGuard")


class _Chatter(Protocol):
    broadcaster: bool
    moderator: bool
    vip: bool
    subscriber: bool


def chatter_role(chatter: _Chatter) -> Role:
    """Highest role the chatter holds."""
    if chatter.broadcaster:
        return Role.BROADCASTER
    if chatter.moderator:
        return Role.MODERATOR
    if chatter.vip:
        return Role.VIP
    if chatter.subscriber:
        return Role.SUBSCRIBER
    return Role.EVERYONE


def has_role(chatter: _Chatter, min_role: Role) -> bool:
    """Check if chatter meets the minimum role requirement."""
    if min_role is Role.EVERYONE:
        return True
    return chatter_role(chatter).level >= min_role.level


class CooldownTracker:
    """In-memory cooldown timestamps (reset on bot restart).

    Global cooldowns are keyed by command name, user cooldowns by
    ``(command name, user id)``.
    """

    def __init__(self) -> None:
        self._global: dict[str, datetime] = {}
        self._per_user: dict[tuple[str, str], datetime] = {}

    def is_on_cooldown(
        self,
        command_name: str,
        user_id: str,
        command: DynamicCommand,
        now: datetime | None = None,
    ) -> bool:
        now = now or datetime.now()

        if command.global_cooldown_seconds > 0:
            last = self._global.get(command_name)
            if last and (now - last).total_seconds() < command.global_cooldown_seconds:
                return True

        if command.user_cooldown_seconds > 0:
            last = self._per_user.get((command_name, user_id))
            if last and (now - last).total_seconds() < command.user_cooldown_seconds:
                return True

        return False

    def record(self, command_name: str, user_id: str, now: datetime | None = None) -> None:
        """Record cooldown timestamps after successful command execution."""
        now = now or datetime.now()
        self._global[command_name] = now
        self._per_user[(command_name, user_id)] = now

    def clear(self, command_name: str) -> None:
        """Forget all timestamps for a command (it was unregistered)."""
        self._global.pop(command_name, None)
        for key in [k for k in self._per_user if k[0] == command_name]:
            del self._per_user[key]
