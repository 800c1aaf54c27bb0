"""
Immutable values passed between fetching, aggregation and rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from github.NamedUser import NamedUser
    from github.Repository import Repository


@dataclass(frozen=True)
class UserProfile:
    """
    Public profile of the looked-up account.
    """

    login: str
    name: str | None
    followers: int
    following: int
    location: str | None
    created_at: datetime
    public_repos: int = 0
    public_gists: int = 0

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @classmethod
    def from_github(cls, user: NamedUser) -> UserProfile:
        """
        Convert a fetched PyGithub user.

        Args:
            user: Completed `NamedUser` object.

        Return:
            UserProfile: Profile with absent counts coerced to zero.

        """

        return cls(
            login=user.login,
            name=user.name or None,
            followers=user.followers or 0,
            following=user.following or 0,
            location=user.location or None,
            created_at=user.created_at,
            public_repos=user.public_repos or 0,
            public_gists=user.public_gists or 0,
        )


@dataclass(frozen=True)
class RepositorySummary:
    """
    The few repository fields the statistics are derived from.
    """

    name: str
    stars: int
    forks: int
    size: int
    language: str | None
    pushed_at: datetime | None
    created_at: datetime

    @classmethod
    def from_github(cls, repo: Repository) -> RepositorySummary:
        """
        Convert a PyGithub repository.

        Args:
            repo: Repository listed for the user.

        Return:
            RepositorySummary: Summary of `repo`.

        """

        return cls(
            name=repo.name,
            stars=repo.stargazers_count or 0,
            forks=repo.forks_count or 0,
            size=repo.size or 0,
            language=repo.language or None,
            pushed_at=repo.pushed_at,
            created_at=repo.created_at,
        )


@dataclass(frozen=True)
class DerivedStats:
    """
    Statistics shown on one receipt.

    Recomputed for every lookup. `cashier`, `fortune` and `coupon_code`
    are decorative draws with no meaning beyond their fixed sets.
    """

    total_repos: int
    total_stars: int
    total_forks: int
    total_size: int
    total_size_mb: int
    most_active_day: str
    top_languages: tuple[str, ...]
    recent_activity: int
    contribution_score: int
    cashier: str
    fortune: str
    coupon_code: str
    recent_commits: int | None = None

    @property
    def top_languages_display(self) -> str:
        return ", ".join(self.top_languages)


@dataclass(frozen=True)
class Receipt:
    """
    Everything one rendered receipt shows.

    A new lookup builds a new `Receipt`; previous ones are never updated.
    """

    user: UserProfile
    stats: DerivedStats
    issued_at: datetime
    order_number: int
    auth_code: int

    @property
    def file_name(self) -> str:
        return f"github-receipt-{self.user.login}.svg"
