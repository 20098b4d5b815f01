"""Run a minimal twitchio bot hosting the commands extension.

    python -m commands_extension

Requires CLIENT_ID, CLIENT_SECRET, BOT_ID and OWNER_ID. User tokens are
loaded from twitchio's token file (``.tio.tokens.json``).
"""

import asyncio
import logging

from twitchio import eventsub
from twitchio.ext import commands

from commands_extension.core.config import Settings, get_settings
from commands_extension.core.logging import setup_logging

LOGGER = logging.getLogger("Bot")


class Bot(commands.Bot):
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        super().__init__(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            bot_id=settings.bot_id,
            owner_id=settings.owner_id,
            prefix="!",
        )

    async def setup_hook(self) -> None:
        await self.load_module("commands_extension.component")

        broadcaster_id = self.settings.broadcaster_id or self.settings.owner_id
        subscription = eventsub.ChatMessageSubscription(
            broadcaster_user_id=broadcaster_id, user_id=self.settings.bot_id
        )
        await self.subscribe_websocket(payload=subscription)

    async def event_ready(self) -> None:
        LOGGER.info("Successfully logged in as: %s", self.bot_id)


def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    required = {
        "CLIENT_ID": settings.client_id,
        "CLIENT_SECRET": settings.client_secret,
        "BOT_ID": settings.bot_id,
        "OWNER_ID": settings.owner_id,
    }
    missing = [key for key, value in required.items() if not value]
    if missing:
        LOGGER.error(f"Missing required environment variables: {', '.join(missing)}")
        raise SystemExit(1)

    async def runner() -> None:
        async with Bot(settings) as bot:
            await bot.start()

    try:
        asyncio.run(runner())
    except KeyboardInterrupt:
        LOGGER.warning("Shutting down due to KeyboardInterrupt")


if __name__ == "__main__":
    main()
