import logging
from dotenv import load_dotenv
import discord
from discord.ext import commands
import asyncio
from datetime import timedelta
from typing import Optional

from woodbot.config import Settings, load_settings
from woodbot.core.edit_tracker import EditTracker
from woodbot.core.loader import load_feature_extensions
from woodbot.core.registry import register_globally
from woodbot.errors import MissingTokenError
from woodbot.prefix import get_command_prefix
from woodbot.state import BotData

logger = logging.getLogger("woodbot")


class WoodBot(commands.Bot):
    """commands.Bot carrying the shared BotData and settings."""

    def __init__(self, settings: Settings, **kwargs):
        super().__init__(**kwargs)
        self.settings = settings
        self.data = BotData()
        self.edit_tracker: Optional[EditTracker] = None
        if settings.edit_tracking_seconds > 0:
            self.edit_tracker = EditTracker.for_timespan(
                timedelta(seconds=settings.edit_tracking_seconds)
            )

    async def setup_hook(self):
        await load_feature_extensions(self)
        await register_globally(self)

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        if isinstance(error, commands.CommandNotFound):
            logger.debug("Unknown command: %s", error)
            return
        logger.error(
            "Command %s failed",
            ctx.command.qualified_name if ctx.command else "?",
            exc_info=error,
        )


def create_bot(settings: Settings) -> WoodBot:
    intents = discord.Intents.default()
    intents.message_content = True
    bot = WoodBot(
        settings,
        command_prefix=get_command_prefix,
        intents=intents,
        case_insensitive=settings.case_insensitive,
        # Only hello, wood and prefix are exposed
        help_command=None,
    )
    return bot


async def main_async():
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    if not settings.token:
        logger.error("DISCORD_TOKEN is not set in .env.")
        raise MissingTokenError("'DISCORD_TOKEN' was not found")

    bot = create_bot(settings)

    @bot.event
    async def on_ready():
        logger.info("Logged in as %s (ID: %s)", bot.user, bot.user.id)

    async with bot:
        await bot.start(settings.token)


def main():
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
