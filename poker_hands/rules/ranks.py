"""Card rank definitions and utilities.

Rank order (low to high): 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < T < J < Q < K < A

This module provides:
- Rank constants, ordering and the successor relation used for straights
- Suit definitions
- Card representation and 2-character code parsing
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional


class InvalidCardCode(ValueError):
    """Raised when a card code is not a valid <rank><suit> pair."""

    pass


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    Values match the face value, with T=10, J=11, Q=12, K=13, A=14.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank, no successor

    def successor(self) -> Optional["Rank"]:
        """Return the next rank up, or None for Ace (no wraparound)."""
        if self is Rank.ACE:
            return None
        return Rank(self.value + 1)

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]


class Suit(IntEnum):
    """Card suits. Suits carry no strength; only flush detection looks at them."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


# Rank symbols used in card codes
RANK_SYMBOLS: Dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols used in card codes
SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}

# Symbol to rank/suit mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank only: two cards of equal rank and different suit
    are neither less nor greater than each other. Equality and hashing still
    use both fields, so the card is usable in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.code})"

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    @property
    def code(self) -> str:
        """The 2-character code of this card, e.g. 'TH'."""
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a card from a 2-character code like 'JH' or '9C'.

        Args:
            code: Card code in format "RANK+SUIT", upper-case symbols

        Returns:
            Card object

        Raises:
            InvalidCardCode: If the code cannot be parsed
        """
        if not isinstance(code, str) or len(code) != 2:
            raise InvalidCardCode(f"Card code must be 2 characters: {code!r}")

        rank_char, suit_char = code
        if rank_char not in SYMBOL_TO_RANK:
            raise InvalidCardCode(f"Invalid rank character: {rank_char!r}")
        if suit_char not in SYMBOL_TO_SUIT:
            raise InvalidCardCode(f"Invalid suit character: {suit_char!r}")

        return cls(rank=SYMBOL_TO_RANK[rank_char], suit=SYMBOL_TO_SUIT[suit_char])


def parse_card(code: str) -> Card:
    """Parse a 2-character card code. See Card.from_code."""
    return Card.from_code(code)

