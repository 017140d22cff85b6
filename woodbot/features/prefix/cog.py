import logging

import discord
from discord.ext import commands

logger = logging.getLogger("woodbot.prefix_cog")


class PrefixCog(commands.Cog):
    """Writes the shared command prefix override."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.hybrid_command(name="prefix")
    async def set_prefix(self, ctx: commands.Context, prefix: str):
        """Set the command prefix override."""
        ctx.bot.data.prefix.set_prefix(prefix)
        logger.info("Prefix override set to %r by %s", prefix, ctx.author)
        # Slash invocations must be answered or Discord reports a failure.
        # Prefix invocations ignore ephemeral, so the echo is public.
        await ctx.send(
            f"Prefix set to {discord.utils.escape_markdown(prefix)}.",
            ephemeral=True,
            allowed_mentions=discord.AllowedMentions.none(),
        )


async def setup(bot: commands.Bot):
    await bot.add_cog(PrefixCog(bot))
