"""Poker Hands - five-card poker hand ranking.

Parses hands written as card codes ("8C TS KC 9H 4S"), classifies them into
the ten standard categories and compares pairs of hands, one round at a time
or in batches read from a file.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.rules import (
    Card,
    Hand,
    InvalidCardCode,
    InvalidHandFormat,
    Outcome,
    classify,
    compare_hands,
    parse_card,
    parse_hand,
)

__all__ = [
    "__version__",
    "Card",
    "Hand",
    "InvalidCardCode",
    "InvalidHandFormat",
    "Outcome",
    "classify",
    "compare_hands",
    "parse_card",
    "parse_hand",
]
