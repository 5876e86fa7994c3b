"""Summary counters derived from a user's saved scripts."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from app.modules.scripts import ScriptRepository

from .models import UserStats

WEEKLY_WINDOW = timedelta(days=7)
SUCCESS_RATE_BASE = 85
SUCCESS_RATE_STEP = 2
SUCCESS_RATE_CAP = 95


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def success_rate_for(total_scripts: int) -> int:
    """Synthetic quality score: grows with volume, capped, zero without scripts."""
    if total_scripts <= 0:
        return 0
    return min(SUCCESS_RATE_CAP, SUCCESS_RATE_BASE + SUCCESS_RATE_STEP * total_scripts)


class AnalyticsService:
    def __init__(self, repository: ScriptRepository, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._repository = repository
        self._clock = clock

    async def stats_for(self, user_id: str, now: Optional[datetime] = None) -> UserStats:
        scripts = await self._repository.list_by_user(user_id)
        window_start = (now or self._clock()) - WEEKLY_WINDOW

        weekly = sum(1 for script in scripts if script.created_at is not None and script.created_at >= window_start)
        favorites = sum(1 for script in scripts if script.is_favorite == 1)
        return UserStats(
            total_scripts=len(scripts),
            weekly_scripts=weekly,
            favorite_scripts=favorites,
            success_rate=success_rate_for(len(scripts)),
        )
