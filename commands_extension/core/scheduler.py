"""Interval job scheduler: one asyncio task per named job."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from rich.markup import escape

from commands_extension.core.errors import RegistrationError

LOGGER = logging.getLogger("JobScheduler")

JobCallback = Callable[[], Awaitable[None]]


class JobScheduler:
    """Runs each job every ``interval_minutes``, first firing after one interval.

    ``seconds_per_minute`` scales the interval (tests use a tiny value).
    """

    def __init__(self, *, seconds_per_minute: float = 60.0) -> None:
        self._seconds_per_minute = seconds_per_minute
        self._jobs: dict[str, asyncio.Task] = {}

    @property
    def job_names(self) -> set[str]:
        return {name for name, task in self._jobs.items() if not task.done()}

    def schedule(self, name: str, interval_minutes: int, callback: JobCallback) -> None:
        """Start a job. Raises RegistrationError for a duplicate name or bad interval."""
        if interval_minutes <= 0:
            raise RegistrationError(f"Job '{name}': interval must be positive")
        existing = self._jobs.get(name)
        if existing is not None and not existing.done():
            raise RegistrationError(f"Job '{name}' is already scheduled")

        self._jobs[name] = asyncio.create_task(
            self._run(name, interval_minutes * self._seconds_per_minute, callback),
            name=f"job:{name}",
        )
        LOGGER.debug(f"Job '{escape(name)}' scheduled every {interval_minutes} min")

    def remove(self, name: str) -> None:
        """Cancel a job. Raises LookupError if no job has that name."""
        task = self._jobs.pop(name, None)
        if task is None:
            raise LookupError(f"No scheduled job named '{name}'")
        task.cancel()

    async def close(self) -> None:
        """Cancel every job and wait for them to finish."""
        tasks = list(self._jobs.values())
        self._jobs.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, name: str, delay: float, callback: JobCallback) -> None:
        while True:
            await asyncio.sleep(delay)
            try:
                await callback()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                LOGGER.error(f"Job '{escape(name)}' failed: {type(e).__name__}: {escape(str(e))}")
