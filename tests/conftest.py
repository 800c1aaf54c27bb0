"""
Shared fixtures: mocked GitHub API, stand-ins and model factories.
"""

from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest
import responses
from responses import matchers

from gh_receipt.models import RepositorySummary, UserProfile
from gh_receipt.repos import get_client

if TYPE_CHECKING:
    from collections.abc import Iterator

    from github import Github

# 2024-01-07 is a Sunday
SUNDAY = datetime(2024, 1, 7, 12, 0, tzinfo=UTC)
NOW = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)
CREATED = datetime(2015, 6, 1, tzinfo=UTC)


def make_user(**overrides: Any) -> UserProfile:
    fields: dict[str, Any] = {
        "login": "octocat",
        "name": "The Octocat",
        "followers": 10,
        "following": 2,
        "location": "San Francisco",
        "created_at": CREATED,
    }
    fields.update(overrides)
    return UserProfile(**fields)


def make_repo(**overrides: Any) -> RepositorySummary:
    fields: dict[str, Any] = {
        "name": "hello-world",
        "stars": 0,
        "forks": 0,
        "size": 0,
        "language": None,
        "pushed_at": SUNDAY,
        "created_at": CREATED,
    }
    fields.update(overrides)
    return RepositorySummary(**fields)


API_URL = "https://api.github.com"
# PyGithub sends requests with an explicit default port.
MOCK_URL = "https://api.github.com:443"
REPOS_QUERY = {"sort": "pushed", "direction": "desc", "per_page": "100"}


def user_json(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "login": "octocat",
        "id": 583231,
        "url": f"{API_URL}/users/octocat",
        "name": "The Octocat",
        "followers": 10,
        "following": 2,
        "location": None,
        "created_at": "2015-06-01T00:00:00Z",
        "public_repos": 2,
        "public_gists": 1,
    }
    fields.update(overrides)
    return fields


def repo_json(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "name": "hello-world",
        "url": f"{API_URL}/repos/octocat/hello-world",
        "stargazers_count": 0,
        "forks_count": 0,
        "size": 0,
        "language": None,
        "pushed_at": "2024-01-07T12:00:00Z",
        "created_at": "2015-06-01T00:00:00Z",
    }
    fields.update(overrides)
    return fields


def serve_user(
    api: responses.RequestsMock,
    login: str = "octocat",
    status: int = 200,
    payload: dict[str, Any] | None = None,
    error: Exception | None = None,
) -> None:
    url = f"{MOCK_URL}/users/{login}"
    if error is not None:
        api.add(responses.GET, url, body=error)
    elif status != 200:
        api.add(responses.GET, url, json={"message": "Not Found"}, status=status)
    else:
        api.add(responses.GET, url, json=payload or user_json(login=login))


def serve_repos(
    api: responses.RequestsMock,
    repos: list[dict[str, Any]] | None = None,
    login: str = "octocat",
    status: int = 200,
    error: Exception | None = None,
) -> None:
    url = f"{MOCK_URL}/users/{login}/repos"
    match = [matchers.query_param_matcher(REPOS_QUERY)]
    if error is not None:
        api.add(responses.GET, url, body=error, match=match)
    elif status != 200:
        api.add(
            responses.GET, url, json={"message": "Not Found"}, status=status, match=match
        )
    else:
        api.add(responses.GET, url, json=repos or [], match=match)


def serve_commit_search(api: responses.RequestsMock, total: int) -> None:
    api.add(
        responses.GET,
        f"{MOCK_URL}/search/commits",
        json={"total_count": total, "incomplete_results": False, "items": []},
    )


@pytest.fixture
def github_api() -> Iterator[responses.RequestsMock]:
    """
    Intercept every HTTP request PyGithub makes.

    Unregistered URLs raise `requests.ConnectionError`.
    """

    with responses.RequestsMock(assert_all_requests_are_fired=False) as api:
        yield api


@pytest.fixture
def client() -> Github:
    return get_client("ghp_test")


@pytest.fixture
def octocat_api(github_api: responses.RequestsMock) -> responses.RequestsMock:
    serve_user(github_api)
    serve_repos(
        github_api,
        [
            repo_json(name="a", stargazers_count=5, forks_count=1, language="Go"),
            repo_json(name="b", stargazers_count=3, forks_count=0, language="Rust"),
        ],
    )
    return github_api


class FakeSearch:
    """
    Stand-in for `github.Github` exposing only commit search.
    """

    def __init__(self, commit_count: int | Exception = 0) -> None:
        self.commit_count = commit_count
        self.queries: list[str] = []

    def search_commits(self, query: str) -> SimpleNamespace:
        self.queries.append(query)
        if isinstance(self.commit_count, Exception):
            raise self.commit_count
        return SimpleNamespace(totalCount=self.commit_count)
