"""
Functions for fetching a user's profile and repositories.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from github import Github
from github.Auth import Token
from github.GithubException import GithubException
from github.PaginatedList import PaginatedList
from github.Repository import Repository
from requests import RequestException

from .consts import ACCESS_TOKEN, REPO_LIMIT
from .models import RepositorySummary, UserProfile

if TYPE_CHECKING:
    from github.NamedUser import NamedUser

logger = logging.getLogger(__name__)


class LookupFailedError(Exception):
    """
    A user's data could not be fetched.

    Covers unknown users, HTTP errors, malformed responses and
    network failures alike.
    """

    def __init__(self, login: str, reason: str = "") -> None:
        self.login = login
        msg = f"Lookup failed for {login!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


def get_client(token: str | None = ACCESS_TOKEN) -> Github:
    """
    Create a GitHub client, authenticated when a token is available.

    Args:
        token: Bearer token. Anonymous requests are made without one.

    Return:
        Github: Client returning up to `REPO_LIMIT` items per page.

    """

    if token:
        return Github(auth=Token(token=token), per_page=REPO_LIMIT)

    logger.warning("No GitHub token configured; rate limits will be lower.")
    return Github(per_page=REPO_LIMIT)


def validate_login(login: str) -> str:
    """
    Reject blank usernames before any request is made.

    Args:
        login: Username as typed.

    Return:
        str: `login` without surrounding whitespace.

    Raises:
        ValueError: If nothing but whitespace was given.

    """

    login = login.strip()
    if not login:
        msg = "A GitHub username is required."
        raise ValueError(msg)

    return login


def fetch_user(client: Github, login: str) -> UserProfile:
    """
    Fetch a user's public profile.

    Args:
        client: GitHub client.
        login:  User's handle.

    Return:
        UserProfile: Fetched profile.

    Raises:
        LookupFailedError: If the request fails for any reason.

    """

    try:
        user: NamedUser = client.get_user(login)  # type: ignore[reportAssignmentType]
        profile = UserProfile.from_github(user)
    except (GithubException, RequestException) as e:
        logger.error("Error fetching user %r: %s", login, e)
        raise LookupFailedError(login, str(e)) from e

    logger.debug("Fetched profile for %r", login)
    return profile


def fetch_repos(client: Github, login: str) -> list[RepositorySummary]:
    """
    Fetch a user's most recently pushed repositories.

    Lists `/users/{login}/repos` directly, without resolving the user
    first. Only the first page is requested, so at most `REPO_LIMIT`
    repositories are returned.

    Args:
        client: GitHub client.
        login:  User's handle.

    Return:
        list[RepositorySummary]: Repositories, most recently pushed first.

    Raises:
        LookupFailedError: If the request fails for any reason.

    """

    try:
        listing: PaginatedList[Repository] = PaginatedList(
            Repository,
            client.requester,
            f"/users/{login}/repos",
            {"sort": "pushed", "direction": "desc"},
        )
        repos = [RepositorySummary.from_github(repo) for repo in listing.get_page(0)]
    except (GithubException, RequestException) as e:
        logger.error("Error fetching repositories for %r: %s", login, e)
        raise LookupFailedError(login, str(e)) from e

    logger.debug("Fetched %d repositories for %r", len(repos), login)
    return repos


async def lookup_account(
    client: Github, login: str
) -> tuple[UserProfile, list[RepositorySummary]]:
    """
    Fetch a user's profile and repositories concurrently.

    PyGithub blocks, so each fetch runs in a worker thread. Both must
    succeed; there are no partial results and no retries.

    Args:
        client: GitHub client.
        login:  User's handle.

    Return:
        (UserProfile, list[RepositorySummary]): Profile and repositories.

    Raises:
        ValueError:        If `login` is blank.
        LookupFailedError: If either fetch fails.

    """

    login = validate_login(login)

    user, repos = await asyncio.gather(
        asyncio.to_thread(fetch_user, client, login),
        asyncio.to_thread(fetch_repos, client, login),
    )

    return user, repos
