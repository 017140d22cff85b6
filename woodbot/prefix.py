import logging
from typing import List, Optional

import discord
from discord.ext import commands

logger = logging.getLogger("woodbot.prefix")


def resolve_dynamic_prefix(bot: commands.Bot, message: discord.Message) -> Optional[str]:
    """Return the prefix for ``message``.

    Unless ``use_shared_prefix`` is enabled this is always the configured
    default; the value written by the ``prefix`` command is only consulted
    when the setting is on.
    """
    settings = bot.settings
    if settings.use_shared_prefix:
        stored = bot.data.prefix.get_prefix()
        if stored is not None:
            return stored
    return settings.default_prefix


def get_command_prefix(bot: commands.Bot, message: discord.Message) -> List[str]:
    """``command_prefix`` callable handed to discord.py."""
    prefix = resolve_dynamic_prefix(bot, message)
    prefixes = [] if prefix is None else [prefix]
    logger.debug("Resolved prefixes %r for message %s", prefixes, message.id)
    if bot.settings.mention_as_prefix:
        return commands.when_mentioned_or(*prefixes)(bot, message)
    return prefixes
