"""Shared application state handed to every command invocation.

Command handlers reach it through ``ctx.bot.data``; the prefix hook reads it
through ``bot.data``. There is exactly one ``BotData`` per bot and nothing
else keeps a copy of the prefix.
"""
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from woodbot.errors import PrefixLockPoisoned


class PrefixState:
    """Lock-guarded optional command prefix override.

    Reads and writes replace or return the whole value under the lock, so a
    reader sees either the previous value or the new one. If anything raises
    while the lock is held the state is poisoned and every later access
    raises ``PrefixLockPoisoned``.
    """

    def __init__(self, value: Optional[str] = None):
        self._lock = threading.Lock()
        self._value = value
        self._poisoned = False

    @contextmanager
    def _guard(self) -> Iterator[None]:
        with self._lock:
            if self._poisoned:
                raise PrefixLockPoisoned("prefix lock was poisoned by an earlier failure")
            try:
                yield
            except BaseException:
                self._poisoned = True
                raise

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def get_prefix(self) -> Optional[str]:
        with self._guard():
            return self._value

    def set_prefix(self, new_value: str) -> None:
        # Stored verbatim: empty strings and whitespace are valid prefixes.
        with self._guard():
            self._value = new_value


@dataclass
class BotData:
    """User data stored on the bot and shared by all command invocations."""
    prefix: PrefixState = field(default_factory=PrefixState)
