"""Round evaluation and tallying over a stream of hand pairs.

Each line of input is one round: hand A's five cards in the first
``split_offset`` characters, hand B's five cards in the rest, e.g.

    8C TS KC 9H 4S 7D 2S 5D 3S AC

The tally counts rounds won by A, rounds won by B and draws.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from poker_hands.rules import InvalidHandFormat, Outcome, compare_hands, parse_hand

logger = logging.getLogger(__name__)

# Width of "RS RS RS RS RS", the first hand of a round line
DEFAULT_SPLIT_OFFSET = 14


@dataclass(frozen=True)
class RoundConfig:
    """Settings for reading round lines.

    Attributes:
        split_offset: Character offset where hand B starts
        skip_invalid: Log and skip malformed lines instead of raising
    """

    split_offset: int = DEFAULT_SPLIT_OFFSET
    skip_invalid: bool = False


@dataclass
class RoundTally:
    """Aggregated outcomes over many rounds."""

    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    skipped: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome == Outcome.GREATER:
            self.wins_a += 1
        elif outcome == Outcome.LESS:
            self.wins_b += 1
        else:
            self.draws += 1

    @property
    def total(self) -> int:
        """Number of rounds evaluated (skipped lines excluded)."""
        return self.wins_a + self.wins_b + self.draws

    def as_dict(self) -> dict[str, int]:
        return {
            "wins_a": self.wins_a,
            "wins_b": self.wins_b,
            "draws": self.draws,
            "skipped": self.skipped,
        }

    def summary(self) -> str:
        lines = [
            f"Rounds: {self.total}",
            f"  Hand A wins: {self.wins_a}",
            f"  Hand B wins: {self.wins_b}",
            f"  Draws: {self.draws}",
        ]
        if self.skipped:
            lines.append(f"  Skipped (invalid): {self.skipped}")
        return "\n".join(lines)


def split_round(line: str, config: RoundConfig = RoundConfig()) -> tuple[str, str]:
    """Split a round line into the texts of hand A and hand B.

    Raises:
        InvalidHandFormat: If the line is too short to hold hand A
    """
    if len(line) < config.split_offset:
        raise InvalidHandFormat(
            f"Round line shorter than {config.split_offset} characters: {line!r}"
        )
    return line[: config.split_offset], line[config.split_offset :]


def evaluate_round(line: str, config: RoundConfig = RoundConfig()) -> Outcome:
    """Parse both hands of a round line and compare A against B."""
    text_a, text_b = split_round(line, config)
    return compare_hands(parse_hand(text_a), parse_hand(text_b))


def tally_rounds(lines: Iterable[str], config: RoundConfig = RoundConfig()) -> RoundTally:
    """Evaluate every round in ``lines`` and count the outcomes.

    Blank lines are ignored. A malformed line raises InvalidHandFormat unless
    ``config.skip_invalid`` is set, in which case it is logged and counted as
    skipped.
    """
    tally = RoundTally()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            tally.record(evaluate_round(line, config))
        except InvalidHandFormat as e:
            if not config.skip_invalid:
                raise InvalidHandFormat(f"line {lineno}: {e}") from e
            logger.warning("Skipping line %d: %s", lineno, e)
            tally.skipped += 1

    logger.debug("Tallied %d rounds (%d skipped)", tally.total, tally.skipped)
    return tally


def tally_file(path: str | Path, config: RoundConfig = RoundConfig()) -> RoundTally:
    """Tally all rounds in a text file, one round per line."""
    path = Path(path)
    logger.info("Reading rounds from %s", path)
    with path.open("r", encoding="utf-8") as f:
        return tally_rounds(f, config)
