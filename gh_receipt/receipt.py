"""
Assemble the receipt for one lookup.
"""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .commits import get_recent_commits
from .consts import AUTH_CODE_RANGE, ORDER_NUMBER_RANGE
from .models import Receipt
from .repos import lookup_account
from .stats import aggregate

if TYPE_CHECKING:
    from github import Github

logger = logging.getLogger(__name__)


async def generate_receipt(
    client: Github,
    login: str,
    with_commits: bool = False,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> Receipt:
    """
    Fetch a user's data and derive a fresh receipt from it.

    Args:
        client:       GitHub client.
        login:        User's handle.
        with_commits: Also search for commits from the last 30 days.
        now:          Issue time. Defaults to current UTC time.
        rng:          Source for the decorative fields.

    Return:
        Receipt: New receipt; nothing from earlier lookups is reused.

    Raises:
        ValueError:        If `login` is blank.
        LookupFailedError: If the profile or repositories can't be fetched.

    """

    if now is None:
        now = datetime.now(tz=UTC)
    if rng is None:
        rng = random.Random()

    user, repos = await lookup_account(client, login)

    recent_commits: int | None = None
    if with_commits:
        recent_commits = await asyncio.to_thread(
            get_recent_commits, client, user.login, now
        )

    stats = aggregate(user, repos, now=now, rng=rng, recent_commits=recent_commits)
    logger.info(
        "Derived stats for %r: %d repos, %d stars, score %d",
        user.login,
        stats.total_repos,
        stats.total_stars,
        stats.contribution_score,
    )

    return Receipt(
        user=user,
        stats=stats,
        issued_at=now,
        order_number=rng.randrange(ORDER_NUMBER_RANGE),
        auth_code=rng.randrange(AUTH_CODE_RANGE),
    )
