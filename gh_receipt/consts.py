"""
Constants used by the receipt generator.
"""

from __future__ import annotations

from os import environ
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ENCODING: str = "utf-8"
ACCESS_TOKEN: str | None = environ.get("GITHUB_TOKEN") or None

REPO_LIMIT: int = 100
RECENT_DAYS: int = 30
TOP_LANGUAGES: int = 3

STAR_WEIGHT: int = 2
FOLLOWER_WEIGHT: int = 3

BYTES_PER_MB: int = 1024

WEEKDAYS: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

FORTUNE_MESSAGES: tuple[str, ...] = (
    "Your next commit will be bug-free! 🪲",
    "A great PR is in your future! 🔮",
    "Today is a good day to refactor! ♻️",
    "Your code will make someone smile! 😊",
    "A mysterious bug will soon reveal itself! 🕵️",
)

FAMOUS_DEVS: tuple[str, ...] = (
    "Linus Torvalds",
    "Ada Lovelace",
    "Grace Hopper",
    "Alan Turing",
    "Margaret Hamilton",
)

COUPON_ALPHABET: str = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
COUPON_LENGTH: int = 6
ORDER_NUMBER_RANGE: int = 9999
AUTH_CODE_RANGE: int = 1000000

# visible characters between the start of a label and the end of its value
JUST_LENGTHS: dict[str, int] = {
    "repos_dots": 40,
    "stars_dots": 40,
    "forks_dots": 40,
    "followers_dots": 40,
    "following_dots": 40,
    "day_dots": 40,
    "size_dots": 40,
    "score_dots": 40,
    "recent_dots": 40,
    "commits_dots": 40,
}

BARCODE_MODULE_WIDTH: float = 1.0
BARCODE_HEIGHT: float = 40.0

FILE_PATH: Path = Path(__file__).resolve()
SRC_DIR: Path = FILE_PATH.parent
TEMPLATE_DIR: Path = Path(SRC_DIR / "templates")
TEMPLATE_FILE: Path = Path(TEMPLATE_DIR / "receipt.svg")

OUTPUT_DIR: Path = Path(environ.get("RECEIPT_OUTPUT_DIR") or "receipts")
