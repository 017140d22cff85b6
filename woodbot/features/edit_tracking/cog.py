import logging

import discord
from discord.ext import commands

logger = logging.getLogger("woodbot.edit_tracking")


class EditTrackingCog(commands.Cog):
    """Re-runs commands from messages edited inside the tracking window."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_message_edit(self, before: discord.Message, after: discord.Message):
        tracker = getattr(self.bot, "edit_tracker", None)
        if tracker is None or not tracker.should_reprocess(before, after):
            return
        logger.debug("Reprocessing edited message %s", after.id)
        await self.bot.process_commands(after)


async def setup(bot: commands.Bot):
    await bot.add_cog(EditTrackingCog(bot))
