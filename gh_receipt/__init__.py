"""
Fetch a user's GitHub statistics and print them on a receipt.
"""

from __future__ import annotations

from .commits import get_recent_commits
from .consts import ACCESS_TOKEN, OUTPUT_DIR
from .models import DerivedStats, Receipt, RepositorySummary, UserProfile
from .receipt import generate_receipt
from .repos import LookupFailedError, get_client, lookup_account
from .stats import aggregate
from .svg import RenderError, render_receipt, save_receipt

__all__: list[str] = [
    "ACCESS_TOKEN",
    "OUTPUT_DIR",
    "DerivedStats",
    "LookupFailedError",
    "Receipt",
    "RenderError",
    "RepositorySummary",
    "UserProfile",
    "aggregate",
    "generate_receipt",
    "get_client",
    "get_recent_commits",
    "lookup_account",
    "render_receipt",
    "save_receipt",
]
