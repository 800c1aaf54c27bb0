"""
Functions for counting a user's recent commits.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from github.GithubException import GithubException
from requests import RequestException

from .consts import RECENT_DAYS

if TYPE_CHECKING:
    from github import Github

logger = logging.getLogger(__name__)


def build_commit_query(login: str, now: datetime, days: int = RECENT_DAYS) -> str:
    """
    Build the commit search query for a user's recent window.

    Args:
        login: User's handle.
        now:   End of the window.
        days:  Window length.

    Return:
        str: Search qualifiers for `search/commits`.

    """

    since: datetime = now - timedelta(days=days)
    return f"author:{login} author-date:>={since:%Y-%m-%d}"


def get_recent_commits(
    client: Github, login: str, now: datetime | None = None
) -> int | None:
    """
    Count commits the user authored in the last `RECENT_DAYS` days.

    Uses the commit search endpoint, which only sees public, indexed
    commits, so the count is an estimate.

    Args:
        client: GitHub client.
        login:  User's handle.
        now:    End of the window. Defaults to current UTC time.

    Return:
        int | None: Commit count, or `None` if the search failed.

    """

    if now is None:
        now = datetime.now(tz=UTC)

    try:
        return client.search_commits(build_commit_query(login, now)).totalCount
    except (GithubException, RequestException) as e:
        logger.warning("Could not search commits for %r: %s", login, e)
        return None
