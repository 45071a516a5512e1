"""Category detection, scoring, and comparison of five-card hands.

Categories (weakest to strongest):
- High card, one pair, two pairs, three of a kind
- Straight, flush, full house, four of a kind
- Straight flush, royal flush

Comparison rules:
- Higher category wins
- Same category: higher defining rank wins (the pair, the trips, the top card...)
- Same category and defining rank: compare all five ranks from the top down
- Straights do not wrap: A-2-3-4-5 is not a straight
"""

from enum import IntEnum, auto
from typing import Callable, List, NamedTuple, Optional, Tuple

from .hands import Hand, contains_rank, highest_rank, rank_counts, ranks_of, x_of_a_kind
from .ranks import Rank


class Category(IntEnum):
    """Hand categories ordered by strength."""

    HIGH_CARD = auto()
    ONE_PAIR = auto()
    TWO_PAIRS = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()
    ROYAL_FLUSH = auto()

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class Outcome(IntEnum):
    """Result of comparing hand A against hand B."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Score(NamedTuple):
    """Primary comparison key of a hand.

    Attributes:
        category: The hand's strongest category
        rank: The rank anchoring that category
    """

    category: Category
    rank: Rank


# Detectors: each returns the defining rank, or None if the hand does not qualify


def straight(hand: Hand) -> Optional[Rank]:
    """Five ranks in sequence, walking successors up from the lowest card."""
    rank: Optional[Rank] = min(ranks_of(hand))
    for _ in range(4):
        rank = rank.successor()
        if rank is None or not contains_rank(hand, rank):
            return None
    return highest_rank(hand)


def flush(hand: Hand) -> Optional[Rank]:
    if len({card.suit for card in hand}) != 1:
        return None
    return highest_rank(hand)


def straight_flush(hand: Hand) -> Optional[Rank]:
    if flush(hand) is None:
        return None
    return straight(hand)


def royal_flush(hand: Hand) -> Optional[Rank]:
    rank = straight_flush(hand)
    if rank != Rank.ACE:
        return None
    return rank


def four_of_a_kind(hand: Hand) -> Optional[Rank]:
    return x_of_a_kind(hand, 4)


def full_house(hand: Hand) -> Optional[Rank]:
    if sorted(rank_counts(hand)) != [2, 3]:
        return None
    return x_of_a_kind(hand, 3)


def three_of_a_kind(hand: Hand) -> Optional[Rank]:
    return x_of_a_kind(hand, 3)


def two_pairs(hand: Hand) -> Optional[Rank]:
    if sorted(rank_counts(hand)) != [1, 2, 2]:
        return None
    return x_of_a_kind(hand, 2)


def one_pair(hand: Hand) -> Optional[Rank]:
    return x_of_a_kind(hand, 2)


# Strongest first; classify returns on the first match
DETECTORS: Tuple[Tuple[Category, Callable[[Hand], Optional[Rank]]], ...] = (
    (Category.ROYAL_FLUSH, royal_flush),
    (Category.STRAIGHT_FLUSH, straight_flush),
    (Category.FOUR_OF_A_KIND, four_of_a_kind),
    (Category.FULL_HOUSE, full_house),
    (Category.FLUSH, flush),
    (Category.STRAIGHT, straight),
    (Category.THREE_OF_A_KIND, three_of_a_kind),
    (Category.TWO_PAIRS, two_pairs),
    (Category.ONE_PAIR, one_pair),
)


def classify(hand: Hand) -> Score:
    """Classify a hand into its strongest category.

    Args:
        hand: Hand to classify

    Returns:
        Score of (category, defining rank); high card falls back to the top card
    """
    for category, detector in DETECTORS:
        rank = detector(hand)
        if rank is not None:
            return Score(category, rank)
    return Score(Category.HIGH_CARD, highest_rank(hand))


def kickers(hand: Hand) -> List[Rank]:
    """All five ranks sorted from highest to lowest, for the final tie-break."""
    return sorted(ranks_of(hand), reverse=True)


def compare_hands(a: Hand, b: Hand) -> Outcome:
    """Compare two hands.

    Args:
        a: First hand
        b: Second hand

    Returns:
        GREATER if a beats b, LESS if b beats a, EQUAL on an exact draw
    """
    score_a = classify(a)
    score_b = classify(b)

    if score_a.category != score_b.category:
        return Outcome.GREATER if score_a.category > score_b.category else Outcome.LESS

    if score_a.rank != score_b.rank:
        return Outcome.GREATER if score_a.rank > score_b.rank else Outcome.LESS

    for rank_a, rank_b in zip(kickers(a), kickers(b)):
        if rank_a != rank_b:
            return Outcome.GREATER if rank_a > rank_b else Outcome.LESS

    return Outcome.EQUAL


def describe_score(score: Score) -> str:
    """Human-readable form of a score, e.g. "Two Pairs (Nine)"."""
    return f"{score.category.label} ({score.rank.name.title()})"
