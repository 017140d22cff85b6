import logging
from typing import Sequence

from discord.ext import commands

logger = logging.getLogger("woodbot.loader")

# Loaded in order; add new feature cogs here.
FEATURE_EXTENSIONS = (
    "woodbot.features.greetings.cog",
    "woodbot.features.prefix.cog",
    "woodbot.features.edit_tracking.cog",
)


async def load_feature_extensions(
    bot: commands.Bot, extensions: Sequence[str] = FEATURE_EXTENSIONS
) -> None:
    """Load every feature extension. A failing extension aborts startup."""
    for name in extensions:
        try:
            await bot.load_extension(name)
        except commands.ExtensionError:
            logger.exception("Failed to load extension %s", name)
            raise
        logger.info("Loaded extension %s", name)
