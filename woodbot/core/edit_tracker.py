from datetime import datetime, timedelta
from typing import Optional

import discord


class EditTracker:
    """Decides whether an edited message should be run again as a command."""

    def __init__(self, max_duration: timedelta):
        self.max_duration = max_duration

    @classmethod
    def for_timespan(cls, duration: timedelta) -> "EditTracker":
        return cls(duration)

    def should_reprocess(
        self,
        before: discord.Message,
        after: discord.Message,
        now: Optional[datetime] = None,
    ) -> bool:
        if after.author.bot:
            return False
        # Embed unfurls also fire edit events with unchanged content
        if before.content == after.content:
            return False
        now = now or discord.utils.utcnow()
        return now - after.created_at <= self.max_duration
