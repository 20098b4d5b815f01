"""twitchio module entry point.

Load with ``await bot.load_module("commands_extension.component")``.
"""

import logging

from twitchio.ext import commands

from commands_extension.core.config import get_settings
from commands_extension.core.twitch_runtime import TwitchRuntime
from commands_extension.plugin import CommandsExtensionPlugin

LOGGER = logging.getLogger("CommandsExtension")


class CommandsExtensionComponent(commands.Component):
    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot
        settings = get_settings()
        self.runtime = TwitchRuntime(bot, broadcaster_id=settings.broadcaster_id)
        self.plugin = CommandsExtensionPlugin(self.runtime, settings)

    async def component_load(self) -> None:
        await self.plugin.initialize()

    async def component_teardown(self) -> None:
        await self.plugin.shutdown()
        await self.runtime.close()


async def setup(bot: commands.Bot) -> None:
    await bot.add_component(CommandsExtensionComponent(bot))
    LOGGER.info("CommandsExtension component loaded")


async def teardown(bot: commands.Bot) -> None:
    LOGGER.info("CommandsExtension component unloaded")
