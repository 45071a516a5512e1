#!/usr/bin/env python
"""Tally a file of poker rounds.

Each line holds two five-card hands; the script counts how many rounds the
first hand wins, how many the second hand wins, and how many are draws.

Usage:
    python -m poker_hands.scripts.tally poker.txt
    python -m poker_hands.scripts.tally poker.txt --skip-invalid --verbose
    python -m poker_hands.scripts.tally poker.txt --json
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table
from rich import box

from poker_hands.engine.rounds import DEFAULT_SPLIT_OFFSET, RoundConfig, RoundTally, tally_file
from poker_hands.rules import InvalidHandFormat

logger = logging.getLogger(__name__)


def build_summary_table(tally: RoundTally, title: str = "Round Tally") -> Table:
    """Render a tally as a rich table with counts and shares."""
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Outcome")
    table.add_column("Rounds", justify="right")
    table.add_column("Share", justify="right")

    total = tally.total
    rows = [
        ("Hand A wins", tally.wins_a),
        ("Hand B wins", tally.wins_b),
        ("Draws", tally.draws),
    ]
    for label, count in rows:
        share = f"{count / total:.1%}" if total else "-"
        table.add_row(label, str(count), share)
    if tally.skipped:
        table.add_row("Skipped (invalid)", str(tally.skipped), "-", style="yellow")
    return table


def main(argv=None) -> int:
    """Main entry point for the tally script."""
    parser = argparse.ArgumentParser(
        description="Count wins and draws over a file of two-hand poker rounds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_hands.scripts.tally poker.txt
  python -m poker_hands.scripts.tally poker.txt --skip-invalid
  python -m poker_hands.scripts.tally poker.txt --json
        """,
    )
    parser.add_argument("path", type=str, help="File with one round per line")
    parser.add_argument(
        "--split-offset",
        type=int,
        default=DEFAULT_SPLIT_OFFSET,
        help=f"Character offset where the second hand starts (default: {DEFAULT_SPLIT_OFFSET})",
    )
    parser.add_argument(
        "--skip-invalid", action="store_true", help="Skip malformed lines instead of failing"
    )
    parser.add_argument("--json", action="store_true", help="Print the tally as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RoundConfig(split_offset=args.split_offset, skip_invalid=args.skip_invalid)
    logger.debug("Tally config: %s", config)

    try:
        tally = tally_file(args.path, config)
    except FileNotFoundError:
        print(f"Error: file not found: {args.path}")
        return 1
    except InvalidHandFormat as e:
        print(f"Error: invalid input: {e}")
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: file is not valid UTF-8: {args.path} ({e.reason})")
        return 1
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e.strerror or e}")
        return 1

    if args.json:
        print(json.dumps(tally.as_dict()))
    else:
        Console().print(build_summary_table(tally, title=f"Round Tally ({args.path})"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
