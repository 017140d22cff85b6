from unittest.mock import AsyncMock, MagicMock

import pytest

from woodbot.config import Settings
from woodbot.state import BotData


@pytest.fixture
def settings():
    return Settings(token="test-token")


@pytest.fixture
def bot_stub(settings):
    """Stand-in for WoodBot with just the attributes commands and hooks use."""
    bot = MagicMock()
    bot.settings = settings
    bot.data = BotData()
    bot.user.id = 42
    bot.process_commands = AsyncMock()
    return bot


@pytest.fixture
def ctx(bot_stub):
    ctx = MagicMock()
    ctx.bot = bot_stub
    ctx.send = AsyncMock()
    return ctx
