"""Command descriptor table and global slash-command registration."""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, List, Optional

from discord.ext import commands

logger = logging.getLogger("woodbot.registry")


@dataclass(frozen=True)
class CommandDescriptor:
    """One published command: its name, invocation kinds and handler.

    Commands are declared by the feature cogs; this table is read back from
    the bot after loading and is what gets reported at registration time.
    """
    name: str
    description: str
    slash: bool
    prefix: bool
    callback: Optional[Callable[..., Coroutine[Any, Any, Any]]] = None

    @property
    def kinds(self) -> str:
        kinds = []
        if self.slash:
            kinds.append("slash")
        if self.prefix:
            kinds.append("prefix")
        return "+".join(kinds)


def describe_commands(bot: commands.Bot) -> List[CommandDescriptor]:
    """Build the descriptor table from the prefix commands and the app command tree."""
    table = {}
    for command in bot.commands:
        is_hybrid = isinstance(command, (commands.HybridCommand, commands.HybridGroup))
        table[command.name] = CommandDescriptor(
            name=command.name,
            description=command.short_doc or command.description or "",
            slash=is_hybrid and command.app_command is not None,
            prefix=True,
            callback=command.callback,
        )
    for app_command in bot.tree.get_commands():
        if app_command.name not in table:
            table[app_command.name] = CommandDescriptor(
                name=app_command.name,
                description=app_command.description,
                slash=True,
                prefix=False,
                callback=getattr(app_command, "callback", None),
            )
    return sorted(table.values(), key=lambda d: d.name)


async def register_globally(bot: commands.Bot) -> List[CommandDescriptor]:
    """Publish the slash commands to Discord. Failures propagate to the caller."""
    table = describe_commands(bot)
    synced = await bot.tree.sync()
    logger.info("Registered %d application commands globally", len(synced))
    for descriptor in table:
        logger.info("  %s (%s): %s", descriptor.name, descriptor.kinds, descriptor.description)
    return table
