from discord.ext import commands


class GreetingsCog(commands.Cog):
    """Static echo commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.hybrid_command(name="hello")
    async def hello(self, ctx: commands.Context):
        """Responds with "world!"."""
        await ctx.send("world!")

    @commands.hybrid_command(name="wood")
    async def wood(self, ctx: commands.Context):
        """Also responds with "world!"."""
        await ctx.send("world!")


async def setup(bot: commands.Bot):
    await bot.add_cog(GreetingsCog(bot))
