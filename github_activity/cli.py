"""
GitHub Activity CLI
Fetches a user's recent public events and prints them as a short list.

Usage:
  github-activity <username>
  GITHUB_ACTIVITY_LIMIT=5 github-activity octocat
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from github_activity.client import fetch_events
from github_activity.env import Settings, configure_logging, load_dotenv_if_present
from github_activity.errors import FetchError
from github_activity.formatter import render_events


def _positive(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("count must be positive")
    return number


def build_parser(default_limit: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Show the recent public GitHub activity of a user.",
        epilog="Example: github-activity octocat",
    )
    parser.add_argument("username", help="GitHub username")
    parser.add_argument(
        "-n",
        "--limit",
        type=_positive,
        default=default_limit,
        help=f"maximum number of lines to print (default: {default_limit})",
    )
    return parser


def run(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv_if_present()
    configure_logging()
    settings = Settings.from_env()

    parser = build_parser(settings.limit)
    args = parser.parse_args(argv)
    username = args.username.strip()
    if not username:
        parser.error("username cannot be empty")

    try:
        events = fetch_events(username, api_url=settings.api_url, timeout=settings.timeout)
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not events:
        print(f"No recent activity found for user: {username}")
        return 0

    print(f"Recent activity for {username}:")
    for line in render_events(events, args.limit):
        print(line)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
