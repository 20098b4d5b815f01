"""Request / response models for the management API.

JSON field names are camelCase (``commandName``, ``intervalMinutes``); the
Python attributes are snake_case.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from commands_extension.core.errors import ValidationError
from commands_extension.models.command import CustomCommand, Role
from commands_extension.models.task import ScheduledTask

ModelT = TypeVar("ModelT", bound=BaseModel)

# SQLite INTEGER is a signed 64-bit value
MAX_STORE_INT = 2**63 - 1
MAX_INTERVAL_MINUTES = 2**31 - 1


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be empty")
    return v


# ============================================
# Request Models
# ============================================


class CommandCreate(_ApiModel):
    command_name: str
    response: str = Field(min_length=1)
    required_role: Role = Role.EVERYONE
    user_cooldown: int = Field(default=5, ge=0, le=MAX_STORE_INT)
    global_cooldown: int = Field(default=0, ge=0, le=MAX_STORE_INT)
    is_enabled: bool = True

    @field_validator("command_name")
    @classmethod
    def validate_command_name(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("required_role", mode="before")
    @classmethod
    def normalize_role(cls, v: Any) -> Role:
        """Unknown or missing roles become Everyone"""
        return Role.parse(v if isinstance(v, str) else None)


class TaskCreate(_ApiModel):
    task_name: str
    message: str = Field(min_length=1)
    interval_minutes: int = Field(gt=0, le=MAX_INTERVAL_MINUTES)
    is_enabled: bool = True

    @field_validator("task_name")
    @classmethod
    def validate_task_name(cls, v: str) -> str:
        return _strip_required(v)


# ============================================
# Response Models
# ============================================


class CommandItem(_ApiModel):
    id: int
    command_name: str
    response: str
    required_role: Role
    user_cooldown: int
    global_cooldown: int
    is_enabled: bool

    @classmethod
    def from_record(cls, command: CustomCommand) -> CommandItem:
        return cls(
            id=command.id,
            command_name=command.name,
            response=command.response,
            required_role=command.required_role,
            user_cooldown=command.user_cooldown_seconds,
            global_cooldown=command.global_cooldown_seconds,
            is_enabled=command.enabled,
        )


class TaskItem(_ApiModel):
    id: int
    task_name: str
    message: str
    interval_minutes: int
    is_enabled: bool

    @classmethod
    def from_record(cls, task: ScheduledTask) -> TaskItem:
        return cls(
            id=task.id,
            task_name=task.name,
            message=task.message,
            interval_minutes=task.interval_minutes,
            is_enabled=task.enabled,
        )


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a decoded JSON body. Raises ValidationError with a readable message."""
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(details) from None


def parse_id(raw_id: str) -> int:
    """Parse a path id segment. Raises ValidationError unless it is a storable id."""
    value = raw_id.strip() if isinstance(raw_id, str) else ""
    # Length check first: int() refuses very long digit strings
    if not (value.isascii() and value.isdigit()) or len(value) > 19 or int(value) > MAX_STORE_INT:
        raise ValidationError(f"Invalid id: {raw_id!r}")
    return int(value)
