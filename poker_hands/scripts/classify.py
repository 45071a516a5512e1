#!/usr/bin/env python
"""Classify a poker hand, or compare two.

Usage:
    python -m poker_hands.scripts.classify "8C 8S KC 9H 9S"
    python -m poker_hands.scripts.classify "5H 5C 6S 7S KD" "2C 3S 8S 8D TD"
"""

import argparse
import sys

from rich.console import Console

from poker_hands.rules import InvalidHandFormat, Outcome, classify, compare_hands, describe_score, parse_hand

OUTCOME_TEXT = {
    Outcome.GREATER: "Hand A wins",
    Outcome.LESS: "Hand B wins",
    Outcome.EQUAL: "Draw",
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Classify one poker hand or compare two")
    parser.add_argument("hands", nargs="+", help='One or two hands, e.g. "8C TS KC 9H 4S"')
    args = parser.parse_args(argv)

    if len(args.hands) > 2:
        print("Error: at most two hands can be compared")
        return 1

    try:
        hands = [parse_hand(text) for text in args.hands]
    except InvalidHandFormat as e:
        print(f"Error: {e}")
        return 1

    console = Console()
    for label, hand in zip("AB", hands):
        console.print(f"[bold]{label}[/bold] {hand}: {describe_score(classify(hand))}")

    if len(hands) == 2:
        console.print(OUTCOME_TEXT[compare_hands(hands[0], hands[1])])
    return 0


if __name__ == "__main__":
    sys.exit(main())
