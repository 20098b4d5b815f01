"""Commands extension plugin: wires the store, live registrations and web UI.

Lets an operator create and delete custom chat commands and scheduled
messages from a browser without restarting the bot.
"""

from __future__ import annotations

import logging

from rich.markup import escape

from commands_extension.bridge import RegistrationBridge
from commands_extension.core.config import Settings, get_settings
from commands_extension.core.database import DatabaseManager
from commands_extension.core.runtime import HostRuntime
from commands_extension.reload import CommandReloader, TaskScheduler
from commands_extension.repositories import CustomCommandRepository, ScheduledTaskRepository
from commands_extension.services import CommandService, TaskService
from commands_extension.web import WebServer

LOGGER = logging.getLogger("CommandsExtension")


class CommandsExtensionPlugin:
    name = "CommandsExtension"
    version = "1.0.0"

    def __init__(self, runtime: HostRuntime, settings: Settings | None = None) -> None:
        self.runtime = runtime
        self.settings = settings or get_settings()
        self.db = DatabaseManager(self.settings.database_path)
        self.bridge = RegistrationBridge(runtime)

        self.reloader: CommandReloader | None = None
        self.task_scheduler: TaskScheduler | None = None
        self.command_service: CommandService | None = None
        self.task_service: TaskService | None = None
        self.web_server: WebServer | None = None

    async def initialize(self) -> bool:
        """Open the store, register live commands and tasks, start the web UI.

        Failures are logged and reported as False; the host bot keeps running.
        """
        try:
            await self.db.connect()
            if not await self.db.check_health():
                raise RuntimeError(f"Database {self.db.database_path} is not responding")
            command_repo = CustomCommandRepository(self.db.connection)
            task_repo = ScheduledTaskRepository(self.db.connection)

            self.reloader = CommandReloader(command_repo, self.bridge)
            self.task_scheduler = TaskScheduler(task_repo, self.bridge)
            await self.reloader.reload_commands()
            await self.task_scheduler.start()

            self.command_service = CommandService(command_repo, self.reloader)
            self.task_service = TaskService(task_repo, self.task_scheduler)
            self.web_server = WebServer(
                self.command_service,
                self.task_service,
                host=self.settings.web_server_host,
                port=self.settings.web_server_port,
            )
            await self.web_server.start()
        except Exception as e:
            LOGGER.error(f"Failed to initialize: {escape(str(e))}")
            return False

        LOGGER.info(f"{self.name} plugin initialized successfully!")
        LOGGER.info(f"Web UI: {self.settings.web_ui_url}")
        return True

    async def shutdown(self) -> None:
        """Stop the web UI, retract live jobs and commands, close the store."""
        LOGGER.info(f"{self.name} plugin shutting down...")
        try:
            if self.web_server is not None:
                await self.web_server.stop()
            if self.task_scheduler is not None:
                await self.task_scheduler.stop()
            if self.reloader is not None:
                await self.reloader.shutdown()
        except Exception as e:
            LOGGER.error(f"Error during shutdown: {escape(str(e))}")
        finally:
            await self.db.disconnect()
