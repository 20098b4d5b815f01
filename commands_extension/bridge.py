"""Registration bridge: store rows -> live host-runtime registrations.

The live set is a derived mirror of the store. Every sync drains all
tracked registrations first and then registers the given rows, so the
tracked set afterwards is exactly the names that registered in this call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.markup import escape

from commands_extension.core.runtime import HostRuntime
from commands_extension.models.command import CustomCommand, DynamicCommand
from commands_extension.models.task import ScheduledMessage, ScheduledTask

LOGGER = logging.getLogger("RegistrationBridge")


class RegistrationBridge:
    def __init__(self, runtime: HostRuntime) -> None:
        self.runtime = runtime
        self._live_commands: set[str] = set()
        self._live_tasks: set[str] = set()

    @property
    def live_commands(self) -> frozenset[str]:
        return frozenset(self._live_commands)

    @property
    def live_tasks(self) -> frozenset[str]:
        return frozenset(self._live_tasks)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def drain_commands(self) -> None:
        """Unregister every tracked command and clear the tracked set."""
        for name in self._live_commands:
            try:
                self.runtime.unregister_command(name)
            except Exception as e:
                LOGGER.warning(f"Unregister !{escape(name)} failed: {escape(str(e))}")
        self._live_commands.clear()

    def sync_commands(self, rows: Iterable[CustomCommand]) -> int:
        """Replace the live command set with ``rows``. Returns the number registered."""
        self.drain_commands()

        for row in rows:
            try:
                self.runtime.register_command(row.name, DynamicCommand.from_record(row))
            except Exception as e:
                LOGGER.error(f"Skipping command !{escape(row.name)}: {escape(str(e))}")
                continue
            self._live_commands.add(row.name)

        LOGGER.info(f"Registered {len(self._live_commands)} custom command(s)")
        return len(self._live_commands)

    # ------------------------------------------------------------------
    # Scheduled tasks
    # ------------------------------------------------------------------

    def drain_tasks(self) -> None:
        """Remove every tracked job; jobs the runtime no longer knows are ignored."""
        for name in self._live_tasks:
            try:
                self.runtime.remove_scheduled_job(name)
            except Exception:
                # Already gone (reload race)
                pass
        self._live_tasks.clear()

    def sync_tasks(self, rows: Iterable[ScheduledTask]) -> int:
        """Replace the live job set with ``rows``. Returns the number scheduled."""
        self.drain_tasks()

        for row in rows:
            try:
                self.runtime.schedule_job(
                    row.name, row.interval_minutes, ScheduledMessage(row.message)
                )
            except Exception as e:
                LOGGER.error(f"Skipping scheduled task '{escape(row.name)}': {escape(str(e))}")
                continue
            self._live_tasks.add(row.name)

        if self._live_tasks:
            LOGGER.info(f"Loaded {len(self._live_tasks)} scheduled task(s)")
        return len(self._live_tasks)
