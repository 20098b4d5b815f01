"""HTTP server for the web UI and management API"""

import logging
from typing import Any

from aiohttp import web
from rich.markup import escape

from commands_extension.core.errors import ConstraintError, TransportError, ValidationError
from commands_extension.services import CommandService, TaskService
from commands_extension.web.ui import INDEX_HTML

logger = logging.getLogger("CommandsExtension.Web")

_SUCCESS = {"success": True}


@web.middleware
async def error_middleware(request: web.Request, handler: Any) -> web.StreamResponse:
    """Map every failure to a JSON error body; the listener never sees an exception."""
    try:
        return await handler(request)
    except web.HTTPException as e:
        # Unknown path or known path with the wrong method
        if e.status in (404, 405):
            return web.json_response({"error": "Not found"}, status=404)
        return web.json_response({"error": e.reason}, status=e.status)
    except ValidationError as e:
        return web.json_response({"error": str(e)}, status=400)
    except ConstraintError as e:
        return web.json_response({"error": str(e)}, status=409)
    except Exception as e:
        logger.exception(
            f"Error handling {request.method} {escape(request.path)}: {escape(str(e))}"
        )
        return web.json_response({"error": str(e)}, status=500)


async def _read_json(request: web.Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON") from None


class WebServer:
    """Serves the UI and routes API calls to the command/task services"""

    def __init__(
        self,
        commands: CommandService,
        tasks: TaskService,
        host: str = "localhost",
        port: int = 5000,
    ):
        self.commands = commands
        self.tasks = tasks
        self.host = host
        self.port = port
        self.app = web.Application(middlewares=[error_middleware])
        self.runner: web.AppRunner | None = None
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Configure HTTP routes"""
        self.app.router.add_get("/", self.handle_index)
        self.app.router.add_get("/api/commands", self.handle_list_commands)
        self.app.router.add_post("/api/commands", self.handle_create_command)
        self.app.router.add_delete("/api/commands/{command_id}", self.handle_delete_command)
        self.app.router.add_get("/api/tasks", self.handle_list_tasks)
        self.app.router.add_post("/api/tasks", self.handle_create_task)
        self.app.router.add_delete("/api/tasks/{task_id}", self.handle_delete_task)

    @property
    def is_running(self) -> bool:
        return self.runner is not None

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def handle_index(self, request: web.Request) -> web.Response:
        return web.Response(text=INDEX_HTML, content_type="text/html")

    async def handle_list_commands(self, request: web.Request) -> web.Response:
        return web.json_response(await self.commands.list_commands())

    async def handle_create_command(self, request: web.Request) -> web.Response:
        await self.commands.create_command(await _read_json(request))
        return web.json_response(_SUCCESS)

    async def handle_delete_command(self, request: web.Request) -> web.Response:
        await self.commands.delete_command(request.match_info["command_id"])
        return web.json_response(_SUCCESS)

    async def handle_list_tasks(self, request: web.Request) -> web.Response:
        return web.json_response(await self.tasks.list_tasks())

    async def handle_create_task(self, request: web.Request) -> web.Response:
        await self.tasks.create_task(await _read_json(request))
        return web.json_response(_SUCCESS)

    async def handle_delete_task(self, request: web.Request) -> web.Response:
        await self.tasks.delete_task(request.match_info["task_id"])
        return web.json_response(_SUCCESS)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Bind the listener. Raises TransportError if the port cannot be bound."""
        if self.runner is not None:
            logger.warning("Web server already running")
            return

        runner = web.AppRunner(self.app, access_log=None)
        await runner.setup()
        site = web.TCPSite(runner, self.host, self.port)
        try:
            await site.start()
        except OSError as e:
            await runner.cleanup()
            raise TransportError(f"Cannot listen on {self.host}:{self.port}: {e}") from e

        self.runner = runner
        logger.info(f"Web UI started at http://{self.host}:{self.port}/")

    async def stop(self) -> None:
        """Close the listener and wait for in-flight requests"""
        if self.runner is None:
            return
        runner, self.runner = self.runner, None
        try:
            await runner.cleanup()
            logger.info("Web server stopped")
        except Exception as e:
            logger.exception(f"Error stopping web server: {e}")
