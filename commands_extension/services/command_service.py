"""Command service: list/create/delete custom commands, then reload."""

from __future__ import annotations

import logging
from typing import Any

from rich.markup import escape

from commands_extension.models.command import CustomCommand
from commands_extension.reload import CommandReloader
from commands_extension.repositories.command import CustomCommandRepository
from commands_extension.services.schemas import (
    CommandCreate,
    CommandItem,
    parse_id,
    parse_payload,
)

logger = logging.getLogger(__name__)


class CommandService:
    """API-facing custom command operations."""

    def __init__(self, repo: CustomCommandRepository, reloader: CommandReloader) -> None:
        self.repo = repo
        self.reloader = reloader

    async def list_commands(self) -> list[dict]:
        commands = await self.repo.list_all()
        return [CommandItem.from_record(cmd).model_dump(mode="json", by_alias=True) for cmd in commands]

    async def create_command(self, payload: Any) -> int:
        """Insert a command and reload. Returns the new id.

        Raises ValidationError for a bad payload and ConstraintError for a
        duplicate name; neither triggers a reload.
        """
        body = parse_payload(CommandCreate, payload)
        command_id = await self.reloader.apply(
            lambda: self.repo.insert(
                body.command_name,
                body.response,
                required_role=body.required_role,
                user_cooldown_seconds=body.user_cooldown,
                global_cooldown_seconds=body.global_cooldown,
                enabled=body.is_enabled,
            )
        )
        logger.info(f"Created custom command !{escape(body.command_name)} (id={command_id})")
        return command_id

    async def delete_command(self, raw_id: str) -> bool:
        """Delete a command by id and reload. Deleting a missing id is not an error."""
        command_id = parse_id(raw_id)

        async def _delete() -> CustomCommand | None:
            command = await self.repo.get(command_id)
            if command is None:
                return None
            await self.repo.delete(command_id)
            return command

        deleted = await self.reloader.apply(_delete)
        if deleted is None:
            logger.debug(f"Delete of unknown command id={command_id} ignored")
            return False
        logger.info(f"Deleted custom command !{escape(deleted.name)} (id={command_id})")
        return True
