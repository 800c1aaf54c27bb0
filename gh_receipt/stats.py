"""
Functions for deriving receipt statistics from fetched GitHub data.
"""

from __future__ import annotations

import random
from collections import Counter
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from .consts import (
    BYTES_PER_MB,
    COUPON_ALPHABET,
    COUPON_LENGTH,
    FAMOUS_DEVS,
    FOLLOWER_WEIGHT,
    FORTUNE_MESSAGES,
    RECENT_DAYS,
    STAR_WEIGHT,
    TOP_LANGUAGES,
    WEEKDAYS,
)
from .models import DerivedStats
from .utils import round_half_up, weekday_index

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import RepositorySummary, UserProfile


def aggregate(
    user: UserProfile,
    repos: Sequence[RepositorySummary],
    now: datetime | None = None,
    rng: random.Random | None = None,
    recent_commits: int | None = None,
) -> DerivedStats:
    """
    Derive every displayed statistic from a user and their repositories.

    Args:
        user:           Looked-up profile.
        repos:          User's repositories, most recently pushed first.
        now:            Reference time for the recency window.
                        Defaults to current UTC time.
        rng:            Source for the decorative fields.
                        Defaults to the module-level generator.
        recent_commits: Commit-search result, when one was requested.

    Return:
        DerivedStats: Totals, rankings, score and decorative fields.

    """

    if now is None:
        now = datetime.now(tz=UTC)
    if rng is None:
        rng = random.Random()

    total_stars: int = calc_stargazers(repos)
    total_size: int = sum(repo.size for repo in repos)

    return DerivedStats(
        total_repos=len(repos),
        total_stars=total_stars,
        total_forks=sum(repo.forks for repo in repos),
        total_size=total_size,
        total_size_mb=round_half_up(total_size / BYTES_PER_MB),
        most_active_day=most_active_day(repos),
        top_languages=top_languages(repos),
        recent_activity=count_recent_pushes(repos, now),
        contribution_score=contribution_score(total_stars, user.followers),
        cashier=rng.choice(FAMOUS_DEVS),
        fortune=rng.choice(FORTUNE_MESSAGES),
        coupon_code=coupon_code(rng),
        recent_commits=recent_commits,
    )


def calc_stargazers(repos: Sequence[RepositorySummary]) -> int:
    """
    Sum the stargazers of the given repositories.

    Args:
        repos: User's repositories.

    Return:
        int: Total stargazer count.

    """

    return sum(repo.stars for repo in repos)


def contribution_score(total_stars: int, followers: int) -> int:
    return total_stars * STAR_WEIGHT + followers * FOLLOWER_WEIGHT


def most_active_day(repos: Sequence[RepositorySummary]) -> str:
    """
    Find the weekday on which the most repositories were last pushed to.

    Ties go to the earliest day of a Sunday-first week, so a user
    without pushes gets "Sunday".

    Args:
        repos: User's repositories.

    Return:
        str: Weekday name.

    """

    day_count: list[int] = [0] * len(WEEKDAYS)
    for repo in repos:
        if repo.pushed_at is not None:
            day_count[weekday_index(repo.pushed_at)] += 1

    return WEEKDAYS[day_count.index(max(day_count))]


def top_languages(
    repos: Sequence[RepositorySummary], limit: int = TOP_LANGUAGES
) -> tuple[str, ...]:
    """
    Rank primary languages by how many repositories use them.

    Args:
        repos: User's repositories.
        limit: Maximum number of languages returned.

    Return:
        tuple[str, ...]: Most common languages; equal counts keep the
                         order in which the languages were first seen.

    """

    counts: Counter[str] = Counter(
        repo.language for repo in repos if repo.language is not None
    )
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)

    return tuple(lang for lang, _ in ranked[:limit])


def count_recent_pushes(
    repos: Sequence[RepositorySummary], now: datetime, days: int = RECENT_DAYS
) -> int:
    """
    Count repositories pushed to within the last `days` days.

    Args:
        repos: User's repositories.
        now:   End of the window.
        days:  Window length.

    Return:
        int: Repositories with a push strictly after `now - days`.

    """

    cutoff: datetime = now - timedelta(days=days)
    return sum(
        1 for repo in repos if repo.pushed_at is not None and repo.pushed_at > cutoff
    )


def coupon_code(rng: random.Random) -> str:
    return "".join(rng.choice(COUPON_ALPHABET) for _ in range(COUPON_LENGTH))
