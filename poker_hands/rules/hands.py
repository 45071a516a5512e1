"""Five-card hands: parsing and rank-multiset analysis.

A hand is exactly five cards in the order they were written. The analysis
helpers here are the building blocks the category detectors in scoring.py
are written with:
- ranks_of / rank_counts: the ranks and their run-length counts
- contains_rank / highest_rank: simple membership and maximum
- x_of_a_kind: highest rank held at least x times
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .ranks import Card, InvalidCardCode, Rank, Suit

HAND_SIZE = 5


class InvalidHandFormat(ValueError):
    """Raised when text cannot be parsed into exactly five valid cards."""

    pass


@dataclass(frozen=True)
class Hand:
    """An immutable hand of exactly five cards.

    Attributes:
        cards: Tuple of the five cards, in input order
    """

    cards: Tuple[Card, ...]

    def __post_init__(self):
        if len(self.cards) != HAND_SIZE:
            raise InvalidHandFormat(f"A hand holds {HAND_SIZE} cards, got {len(self.cards)}")

    def __len__(self) -> int:
        return HAND_SIZE

    def __getitem__(self, index: int) -> Card:
        if not isinstance(index, int):
            raise TypeError(f"Hand indices must be integers, not {type(index).__name__}")
        if not 0 <= index < HAND_SIZE:
            raise IndexError(f"Hand index out of range: {index}")
        return self.cards[index]

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(card.code for card in self.cards)

    @classmethod
    def from_string(cls, text: str) -> "Hand":
        return parse_hand(text)

    def score(self):
        """Classify this hand. See scoring.classify."""
        from .scoring import classify

        return classify(self)


def parse_hand(text: str) -> Hand:
    """Parse a hand from a string like "8C TS KC 9H 4S".

    Non-whitespace characters are accumulated two at a time and each pair is
    parsed as a card as soon as it is complete. Any run of whitespace may
    separate the codes.

    Args:
        text: Five 2-character card codes

    Returns:
        Hand with the cards in encountered order

    Raises:
        InvalidHandFormat: On a card count other than five or a bad card code
    """
    if not isinstance(text, str):
        raise InvalidHandFormat(f"Hand must be given as a string, got {type(text).__name__}")

    cards: List[Card] = []
    pending = ""
    for ch in text:
        if ch.isspace():
            continue
        pending += ch
        if len(pending) < 2:
            continue
        if len(cards) == HAND_SIZE:
            raise InvalidHandFormat(f"More than {HAND_SIZE} cards in hand: {text!r}")
        try:
            cards.append(Card.from_code(pending))
        except InvalidCardCode as e:
            raise InvalidHandFormat(f"Bad card in hand {text!r}: {e}") from e
        pending = ""

    if pending:
        raise InvalidHandFormat(f"Incomplete card code {pending!r} in hand: {text!r}")
    if len(cards) < HAND_SIZE:
        raise InvalidHandFormat(f"Expected {HAND_SIZE} cards, found {len(cards)}: {text!r}")

    return Hand(cards=tuple(cards))


def ranks_of(hand: Hand) -> List[Rank]:
    """The five ranks, in hand order."""
    return [card.rank for card in hand]


def rank_counts(hand: Hand) -> List[int]:
    """Run-length counts of equal ranks, scanning the ranks in ascending order.

    Example: ranks [3, 2, 3, 2, 3] sort to [2, 2, 3, 3, 3] and give [2, 3].
    """
    counts: List[int] = []
    previous: Optional[Rank] = None
    for rank in sorted(ranks_of(hand)):
        if rank == previous:
            counts[-1] += 1
        else:
            counts.append(1)
        previous = rank
    return counts


def contains_rank(hand: Hand, rank: Rank) -> bool:
    return any(card.rank == rank for card in hand)


def highest_rank(hand: Hand) -> Rank:
    return max(ranks_of(hand))


def x_of_a_kind(hand: Hand, x: int) -> Optional[Rank]:
    """Highest rank that at least ``x`` cards of the hand share.

    All ranks present are scanned, so with two pairs and x=2 the higher pair
    is returned.

    Returns:
        The rank, or None if no rank reaches multiplicity x
    """
    ranks = ranks_of(hand)
    best: Optional[Rank] = None
    for rank in set(ranks):
        if ranks.count(rank) >= x and (best is None or rank > best):
            best = rank
    return best


# Helper functions for creating hands for testing


def make_hand_from_ranks(ranks: Sequence[Rank], suits: Optional[Sequence[Suit]] = None) -> Hand:
    """Create a hand from five ranks and optional suits.

    If suits not provided, cycles through suits so the hand is never a flush.

    Args:
        ranks: Five Rank values
        suits: Optional five Suit values

    Returns:
        Hand object
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return Hand(cards=tuple(Card(rank=r, suit=s) for r, s in zip(ranks, suits)))
