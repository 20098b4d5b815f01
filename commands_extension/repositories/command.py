"""Repository for the custom_commands table."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone

import aiosqlite

from commands_extension.core.errors import ConstraintError
from commands_extension.models.command import CustomCommand, Role

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, command_name, response, required_role, user_cooldown_seconds, "
    "global_cooldown_seconds, is_enabled, created_at, updated_at"
)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _to_command(row: aiosqlite.Row) -> CustomCommand:
    return CustomCommand(
        id=row["id"],
        name=row["command_name"],
        response=row["response"],
        required_role=Role.parse(row["required_role"]),
        user_cooldown_seconds=row["user_cooldown_seconds"],
        global_cooldown_seconds=row["global_cooldown_seconds"],
        enabled=bool(row["is_enabled"]),
        created_at=_parse_timestamp(row["created_at"]),
        updated_at=_parse_timestamp(row["updated_at"]),
    )


class CustomCommandRepository:
    """Pure SQL operations for custom_commands."""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self.conn = conn

    async def list_enabled(self) -> list[CustomCommand]:
        """Return all enabled commands, ordered by id."""
        async with self.conn.execute(
            f"SELECT {_COLUMNS} FROM custom_commands WHERE is_enabled = 1 ORDER BY id"
        ) as cursor:
            rows = await cursor.fetchall()
        return [_to_command(row) for row in rows]

    async def list_all(self) -> list[CustomCommand]:
        """Return all commands (enabled + disabled), ordered by id."""
        async with self.conn.execute(
            f"SELECT {_COLUMNS} FROM custom_commands ORDER BY id"
        ) as cursor:
            rows = await cursor.fetchall()
        return [_to_command(row) for row in rows]

    async def get(self, command_id: int) -> CustomCommand | None:
        async with self.conn.execute(
            f"SELECT {_COLUMNS} FROM custom_commands WHERE id = ?", (command_id,)
        ) as cursor:
            row = await cursor.fetchone()
        return _to_command(row) if row else None

    async def insert(
        self,
        name: str,
        response: str,
        *,
        required_role: Role = Role.EVERYONE,
        user_cooldown_seconds: int = 5,
        global_cooldown_seconds: int = 0,
        enabled: bool = True,
    ) -> int:
        """Insert a command and return its id.

        Raises ConstraintError if a command with the same name exists.
        """
        now = _utcnow()
        try:
            async with self.conn.execute(
                """
                INSERT INTO custom_commands
                    (command_name, response, required_role, user_cooldown_seconds,
                     global_cooldown_seconds, is_enabled, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    name,
                    response,
                    Role.parse(required_role).value,
                    user_cooldown_seconds,
                    global_cooldown_seconds,
                    int(enabled),
                    now,
                    now,
                ),
            ) as cursor:
                command_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            raise ConstraintError(f"Command '{name}' already exists") from e
        logger.debug(f"Inserted command {name} (id={command_id})")
        return command_id

    async def delete(self, command_id: int) -> bool:
        """Delete a command. Returns True if a row was removed."""
        async with self.conn.execute(
            "DELETE FROM custom_commands WHERE id = ?", (command_id,)
        ) as cursor:
            return cursor.rowcount > 0
