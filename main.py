"""
Main entry point for script execution.

Usage:
    python main.py octocat
    python main.py octocat --commits --output-dir ./out
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from gh_receipt import (
    ACCESS_TOKEN,
    OUTPUT_DIR,
    LookupFailedError,
    RenderError,
    generate_receipt,
    get_client,
    save_receipt,
)

if TYPE_CHECKING:
    from gh_receipt import Receipt

logger = logging.getLogger("gh_receipt.cli")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Return:
        argparse.ArgumentParser: Parser for the username and options.

    """

    parser = argparse.ArgumentParser(
        description="Generate a receipt-style summary of a GitHub profile.",
    )
    parser.add_argument("username", help="GitHub username to look up")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT_DIR,
        help=f"Directory the receipt is saved to (default: {OUTPUT_DIR})",
    )
    parser.add_argument(
        "--commits",
        action="store_true",
        help="Also count commits authored in the last 30 days",
    )
    parser.add_argument(
        "--token",
        default=ACCESS_TOKEN,
        help="GitHub token (default: $GITHUB_TOKEN)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Execute script.

    Args:
        argv: Command-line arguments. Defaults to `sys.argv[1:]`.

    Return:
        int: Process exit code.

    """

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    client = get_client(args.token)

    try:
        receipt: Receipt = asyncio.run(
            generate_receipt(client, args.username, with_commits=args.commits)
        )
    except ValueError as v:
        print(v, file=sys.stderr)
        return 2
    except LookupFailedError as e:
        logger.debug("Lookup failed: %s", e)
        print("User not found", file=sys.stderr)
        return 1

    try:
        out_path: Path = save_receipt(receipt, args.output_dir)
    except RenderError as r:
        logger.error("%s", r)
        return 1

    print(out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
