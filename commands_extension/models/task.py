"""Scheduled task model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ScheduledTask:
    id: int
    name: str
    message: str
    interval_minutes: int
    enabled: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ScheduledMessage:
    """Job action: send ``message`` verbatim to the configured channel."""

    message: str
