"""Tests for per-user summary counters."""

import pytest

from app.infrastructure.memory import InMemoryScriptRepository
from app.modules.analytics import AnalyticsService, success_rate_for
from app.modules.scripts import ScriptCreateInput


def _input(user_id="user-a", is_favorite=0):
    return ScriptCreateInput(
        user_id=user_id,
        title="t",
        niche="n",
        content_type="c",
        tone="t",
        length="l",
        hook="h",
        body="b",
        cta="c",
        is_favorite=is_favorite,
    )


@pytest.fixture
def repository(clock):
    return InMemoryScriptRepository(clock=clock)


@pytest.fixture
def analytics(repository, clock):
    return AnalyticsService(repository, clock=clock)


async def test_user_without_scripts_has_zero_success_rate(analytics):
    stats = await analytics.stats_for("user-a")

    assert (stats.total_scripts, stats.weekly_scripts, stats.favorite_scripts, stats.success_rate) == (0, 0, 0, 0)


async def test_three_old_scripts(analytics, repository, clock):
    for _ in range(3):
        await repository.create(_input())
    clock.advance(days=10)

    stats = await analytics.stats_for("user-a")

    assert stats.total_scripts == 3
    assert stats.weekly_scripts == 0
    assert stats.favorite_scripts == 0
    assert stats.success_rate == 91


async def test_weekly_window_has_inclusive_lower_bound(analytics, repository, clock):
    await repository.create(_input())
    clock.advance(days=7)
    await repository.create(_input())

    stats = await analytics.stats_for("user-a")

    assert stats.weekly_scripts == 2

    clock.advance(microseconds=1)
    assert (await analytics.stats_for("user-a")).weekly_scripts == 1


async def test_favorites_and_other_users_counted_separately(analytics, repository):
    await repository.create(_input(is_favorite=1))
    await repository.create(_input())
    await repository.create(_input(user_id="user-b", is_favorite=1))

    stats = await analytics.stats_for("user-a")

    assert stats.total_scripts == 2
    assert stats.favorite_scripts == 1


@pytest.mark.parametrize(
    "total, expected",
    [(0, 0), (1, 87), (3, 91), (5, 95), (6, 95), (40, 95)],
)
def test_success_rate_formula(total, expected):
    assert success_rate_for(total) == expected
