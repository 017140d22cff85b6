class WoodBotError(Exception):
    """Base class for errors raised by WoodBot itself."""


class ConfigError(WoodBotError):
    """A setting in the environment could not be parsed."""


class MissingTokenError(ConfigError):
    """DISCORD_TOKEN is not set; the bot cannot log in."""


class PrefixLockPoisoned(WoodBotError):
    """A previous holder of the prefix lock failed mid-update."""
