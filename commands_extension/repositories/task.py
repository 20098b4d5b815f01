"""Repository for the scheduled_tasks table."""

from __future__ import annotations

import sqlite3

import aiosqlite

from commands_extension.core.errors import ConstraintError
from commands_extension.models.task import ScheduledTask
from commands_extension.repositories.command import _parse_timestamp, _utcnow

_COLUMNS = "id, task_name, message, interval_minutes, is_enabled, created_at, updated_at"


def _to_task(row: aiosqlite.Row) -> ScheduledTask:
    return ScheduledTask(
        id=row["id"],
        name=row["task_name"],
        message=row["message"],
        interval_minutes=row["interval_minutes"],
        enabled=bool(row["is_enabled"]),
        created_at=_parse_timestamp(row["created_at"]),
        updated_at=_parse_timestamp(row["updated_at"]),
    )


class ScheduledTaskRepository:
    def __init__(self, conn: aiosqlite.Connection) -> None:
        self.conn = conn

    async def list_enabled(self) -> list[ScheduledTask]:
        """Return all enabled tasks, ordered by id."""
        async with self.conn.execute(
            f"SELECT {_COLUMNS} FROM scheduled_tasks WHERE is_enabled = 1 ORDER BY id"
        ) as cursor:
            rows = await cursor.fetchall()
        return [_to_task(row) for row in rows]

    async def list_all(self) -> list[ScheduledTask]:
        """Return all tasks (enabled + disabled), ordered by id."""
        async with self.conn.execute(
            f"SELECT {_COLUMNS} FROM scheduled_tasks ORDER BY id"
        ) as cursor:
            rows = await cursor.fetchall()
        return [_to_task(row) for row in rows]

    async def insert(
        self,
        name: str,
        message: str,
        interval_minutes: int,
        *,
        enabled: bool = True,
    ) -> int:
        """Insert a task and return its id. Raises ConstraintError on a duplicate name."""
        now = _utcnow()
        try:
            async with self.conn.execute(
                """
                INSERT INTO scheduled_tasks
                    (task_name, message, interval_minutes, is_enabled, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (name, message, interval_minutes, int(enabled), now, now),
            ) as cursor:
                return cursor.lastrowid
        except sqlite3.IntegrityError as e:
            raise ConstraintError(f"Task '{name}' already exists") from e

    async def delete(self, task_id: int) -> bool:
        """Delete a task. Returns True if a row was removed."""
        async with self.conn.execute(
            "DELETE FROM scheduled_tasks WHERE id = ?", (task_id,)
        ) as cursor:
            return cursor.rowcount > 0
