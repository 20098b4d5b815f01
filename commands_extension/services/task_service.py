"""Task service: list/create/delete scheduled tasks, then reload."""

from __future__ import annotations

import logging
from typing import Any

from rich.markup import escape

from commands_extension.reload import TaskScheduler
from commands_extension.repositories.task import ScheduledTaskRepository
from commands_extension.services.schemas import TaskCreate, TaskItem, parse_id, parse_payload

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: ScheduledTaskRepository, scheduler: TaskScheduler) -> None:
        self.repo = repo
        self.scheduler = scheduler

    async def list_tasks(self) -> list[dict]:
        tasks = await self.repo.list_all()
        return [TaskItem.from_record(task).model_dump(mode="json", by_alias=True) for task in tasks]

    async def create_task(self, payload: Any) -> int:
        body = parse_payload(TaskCreate, payload)
        task_id = await self.scheduler.apply(
            lambda: self.repo.insert(
                body.task_name,
                body.message,
                body.interval_minutes,
                enabled=body.is_enabled,
            )
        )
        logger.info(f"Created scheduled task '{escape(body.task_name)}' (id={task_id})")
        return task_id

    async def delete_task(self, raw_id: str) -> bool:
        task_id = parse_id(raw_id)
        deleted = await self.scheduler.apply(lambda: self.repo.delete(task_id))
        if deleted:
            logger.info(f"Deleted scheduled task id={task_id}")
        return deleted
