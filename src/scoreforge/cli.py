# src/scoreforge/cli.py

"""Command line interface for inspecting and editing stored high scores."""

import argparse
import json
import logging
import os
import sys

from scoreforge import codec
from scoreforge.exceptions import ScoreForgeError
from scoreforge.schemas.player import BasePlayer, Player
from scoreforge.services import highscore_service
from scoreforge.storage.sql import SqlKeyValueStore

logger = logging.getLogger(__name__)

DEMO_LEVEL = "Test"


def _field(text: str) -> tuple[str, object]:
    """Parse a KEY=VALUE option; VALUE is read as JSON when it parses."""
    key, sep, raw = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key, value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scoreforge", description="Manage persistent per-level high scores."
    )
    parser.add_argument(
        "--database-url",
        help="SQLAlchemy database URL (default: $DATABASE_URL or ./scoreforge.db).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a score and print the resulting rank.")
    add.add_argument("level")
    add.add_argument("name")
    add.add_argument("score", type=int)
    add.add_argument(
        "--limit",
        type=int,
        default=highscore_service.DEFAULT_LIMIT,
        help="How many scores to keep (default 100).",
    )
    add.add_argument(
        "--ascending",
        action="store_true",
        help="Rank lower scores first (e.g. fastest times).",
    )
    add.add_argument(
        "--field",
        type=_field,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra field to store with the record; may be repeated.",
    )

    get = sub.add_parser("get", help="Print the stored scores for a level as JSON.")
    get.add_argument("level")
    get.add_argument("--pretty", action="store_true", help="Indent the JSON output.")

    reset = sub.add_parser("reset", help="Remove all scores for a level.")
    reset.add_argument("level")

    sub.add_parser("demo", help=f"Run the example walk-through on level '{DEMO_LEVEL}'.")

    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.getenv("SCOREFORGE_LOG_LEVEL", "WARNING")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run_demo(store: SqlKeyValueStore) -> None:
    # Resets all scores for the demo level
    highscore_service.reset_high_scores(store, DEMO_LEVEL)

    # Adds a player's score and reports the returned rank
    rank = highscore_service.add_high_score(
        store, DEMO_LEVEL, Player(name="Test-Kun", score=10, extra="Test-Stk")
    )
    print(f"Test-Kun ranked {rank}")

    # Re-sorts ascending, keeping at most five entries
    rank = highscore_service.add_high_score(
        store, DEMO_LEVEL, Player(name="aest-Kun", score=1), limit=5, ascending=True
    )
    print(f"aest-Kun ranked {rank}")

    players = highscore_service.get_high_scores(store, DEMO_LEVEL, Player)
    print(codec.encode(players, indent=2))


def main(argv=None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        with SqlKeyValueStore(url=args.database_url) as store:
            if args.command == "add":
                fields = {**dict(args.field), "name": args.name, "score": args.score}
                player = BasePlayer(**fields)
                rank = highscore_service.add_high_score(
                    store, args.level, player, limit=args.limit, ascending=args.ascending
                )
                print(rank)
            elif args.command == "get":
                players = highscore_service.get_high_scores(store, args.level)
                print(codec.encode(players, indent=2 if args.pretty else None))
            elif args.command == "reset":
                highscore_service.reset_high_scores(store, args.level)
            elif args.command == "demo":
                _run_demo(store)
    except ScoreForgeError as e:
        logger.debug("Command failed", extra=e.details)
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    return 0
