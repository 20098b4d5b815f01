"""Data models for the custom_commands table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Minimum chatter role, lowest to highest privilege."""

    EVERYONE = "Everyone"
    SUBSCRIBER = "Subscriber"
    VIP = "VIP"
    MODERATOR = "Moderator"
    BROADCASTER = "Broadcaster"

    @classmethod
    def parse(cls, value: str | None) -> Role:
        """Case-insensitive lookup; anything unrecognised is EVERYONE."""
        if isinstance(value, Role):
            return value
        if not value:
            return cls.EVERYONE
        return _ROLES_BY_KEY.get(value.strip().lower(), cls.EVERYONE)

    @property
    def level(self) -> int:
        return _ROLE_ORDER.index(self)


_ROLE_ORDER = list(Role)
_ROLES_BY_KEY = {role.value.lower(): role for role in Role}


@dataclass
class CustomCommand:
    """Custom command record."""

    id: int
    name: str
    response: str
    required_role: Role = Role.EVERYONE
    user_cooldown_seconds: int = 5
    global_cooldown_seconds: int = 0
    enabled: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DynamicCommand:
    """What the host runtime needs to execute one custom command.

    Sends ``response`` verbatim once the role and cooldown checks pass.
    """

    response: str
    required_role: Role = Role.EVERYONE
    user_cooldown_seconds: int = 5
    global_cooldown_seconds: int = 0

    @classmethod
    def from_record(cls, command: CustomCommand) -> DynamicCommand:
        return cls(
            response=command.response,
            required_role=Role.parse(command.required_role),
            user_cooldown_seconds=command.user_cooldown_seconds,
            global_cooldown_seconds=command.global_cooldown_seconds,
        )
