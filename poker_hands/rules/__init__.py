"""Poker hand rules.

This module provides:
- Card and rank definitions (ranks.py)
- Hand parsing and rank analysis (hands.py)
- Category detection, scoring and comparison (scoring.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    InvalidCardCode,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    parse_card,
)

from .hands import (
    HAND_SIZE,
    Hand,
    InvalidHandFormat,
    parse_hand,
    ranks_of,
    rank_counts,
    contains_rank,
    highest_rank,
    x_of_a_kind,
    make_hand_from_ranks,
)

from .scoring import (
    Category,
    Outcome,
    Score,
    straight,
    flush,
    straight_flush,
    royal_flush,
    four_of_a_kind,
    full_house,
    three_of_a_kind,
    two_pairs,
    one_pair,
    classify,
    kickers,
    compare_hands,
    describe_score,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "InvalidCardCode",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "parse_card",
    # Hands
    "HAND_SIZE",
    "Hand",
    "InvalidHandFormat",
    "parse_hand",
    "ranks_of",
    "rank_counts",
    "contains_rank",
    "highest_rank",
    "x_of_a_kind",
    "make_hand_from_ranks",
    # Scoring
    "Category",
    "Outcome",
    "Score",
    "straight",
    "flush",
    "straight_flush",
    "royal_flush",
    "four_of_a_kind",
    "full_house",
    "three_of_a_kind",
    "two_pairs",
    "one_pair",
    "classify",
    "kickers",
    "compare_hands",
    "describe_score",
]
