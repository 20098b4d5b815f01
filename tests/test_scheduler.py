"""Tests for the asyncio interval job scheduler."""

from __future__ import annotations

import asyncio

import pytest

from commands_extension.core.errors import RegistrationError
from commands_extension.core.scheduler import JobScheduler


async def test_job_fires_repeatedly() -> None:
    scheduler = JobScheduler(seconds_per_minute=0.01)
    fired: list[str] = []

    async def _callback() -> None:
        fired.append("promo")

    scheduler.schedule("promo", 1, _callback)
    await asyncio.sleep(0.2)
    await scheduler.close()

    assert len(fired) >= 2


async def test_job_waits_one_interval_before_first_fire() -> None:
    scheduler = JobScheduler(seconds_per_minute=10)
    fired: list[str] = []

    async def _callback() -> None:
        fired.append("x")

    scheduler.schedule("slow", 1, _callback)
    await asyncio.sleep(0.05)
    await scheduler.close()
    assert fired == []


async def test_duplicate_name_rejected() -> None:
    scheduler = JobScheduler()

    async def _noop() -> None:
        return None

    scheduler.schedule("promo", 5, _noop)
    with pytest.raises(RegistrationError):
        scheduler.schedule("promo", 5, _noop)
    assert scheduler.job_names == {"promo"}
    await scheduler.close()


async def test_non_positive_interval_rejected() -> None:
    scheduler = JobScheduler()

    async def _noop() -> None:
        return None

    with pytest.raises(RegistrationError):
        scheduler.schedule("bad", 0, _noop)
    assert scheduler.job_names == set()


async def test_remove_unknown_raises_lookup_error() -> None:
    scheduler = JobScheduler()
    with pytest.raises(LookupError):
        scheduler.remove("missing")


async def test_remove_then_reschedule() -> None:
    scheduler = JobScheduler()

    async def _noop() -> None:
        return None

    scheduler.schedule("promo", 5, _noop)
    scheduler.remove("promo")
    scheduler.schedule("promo", 10, _noop)
    assert scheduler.job_names == {"promo"}
    await scheduler.close()
    assert scheduler.job_names == set()


async def test_failing_callback_keeps_job_alive() -> None:
    scheduler = JobScheduler(seconds_per_minute=0.01)
    calls: list[int] = []

    async def _flaky() -> None:
        calls.append(1)
        raise RuntimeError("send failed")

    scheduler.schedule("flaky", 1, _flaky)
    await asyncio.sleep(0.2)
    assert "flaky" in scheduler.job_names
    await scheduler.close()
    assert len(calls) >= 2
