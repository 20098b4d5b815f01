"""SQLite connection management for the extension store.

The database lives in a single file (``PluginData/commandextensionsplugin.db``
by default). The connection runs in autocommit mode: every write is a single
statement and commits on its own.
"""

from __future__ import annotations

import logging
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS custom_commands (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        command_name TEXT NOT NULL UNIQUE,
        response TEXT NOT NULL,
        required_role TEXT NOT NULL DEFAULT 'Everyone',
        user_cooldown_seconds INTEGER NOT NULL DEFAULT 5,
        global_cooldown_seconds INTEGER NOT NULL DEFAULT 0,
        is_enabled INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS scheduled_tasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        task_name TEXT NOT NULL UNIQUE,
        message TEXT NOT NULL,
        interval_minutes INTEGER NOT NULL,
        is_enabled INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
)


class DatabaseManager:
    """Manages the SQLite connection lifecycle and schema."""

    def __init__(self, database_path: str | Path):
        self.database_path = Path(database_path)
        self._conn: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        """Open the database file and create tables if they are missing."""
        if self._conn is not None:
            logger.warning("Database already connected")
            return

        self.database_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = await aiosqlite.connect(self.database_path, isolation_level=None)
            self._conn.row_factory = aiosqlite.Row
            await self.init_schema()
            logger.info(f"Database ready: {self.database_path}")
        except Exception as e:
            logger.exception(f"Failed to open database {self.database_path}: {e}")
            if self._conn is not None:
                await self._conn.close()
                self._conn = None
            raise

    async def init_schema(self) -> None:
        """Create the custom_commands and scheduled_tasks tables (idempotent)."""
        for statement in SCHEMA:
            await self.connection.execute(statement)

    async def disconnect(self) -> None:
        """Close the database connection."""
        if self._conn is None:
            return

        try:
            await self._conn.close()
            logger.info("Database closed")
        except Exception as e:
            logger.exception(f"Error closing database: {e}")
        finally:
            self._conn = None

    async def check_health(self) -> bool:
        """Test if the connection can actually execute a query."""
        if self._conn is None:
            return False
        try:
            async with self._conn.execute("SELECT 1") as cursor:
                await cursor.fetchone()
            return True
        except Exception:
            return False

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the open connection. Raises if not connected."""
        if self._conn is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._conn
