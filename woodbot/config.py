import logging
import os
from dataclasses import dataclass

from woodbot.errors import ConfigError

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Bot settings loaded from environment variables."""
    token: str
    default_prefix: str = "my_prefix"
    use_shared_prefix: bool = False
    edit_tracking_seconds: int = 3600
    case_insensitive: bool = True
    mention_as_prefix: bool = True
    log_level: str = "INFO"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, "").strip().upper() or default
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        token=os.getenv("DISCORD_TOKEN", "").strip(),
        default_prefix=os.getenv("WOODBOT_DEFAULT_PREFIX", "my_prefix"),
        use_shared_prefix=_env_bool("WOODBOT_USE_SHARED_PREFIX", False),
        edit_tracking_seconds=_env_int("WOODBOT_EDIT_TRACKING_SECONDS", 3600),
        case_insensitive=_env_bool("WOODBOT_CASE_INSENSITIVE", True),
        mention_as_prefix=_env_bool("WOODBOT_MENTION_AS_PREFIX", True),
        log_level=_env_log_level("WOODBOT_LOG_LEVEL", "INFO"),
    )
