"""Round evaluation engine.

This module provides:
- RoundConfig: How round lines are split and how bad lines are handled
- RoundTally: Win/loss/draw counts over many rounds
- evaluate_round / tally_rounds / tally_file: The batch pipeline
"""

from .rounds import (
    DEFAULT_SPLIT_OFFSET,
    RoundConfig,
    RoundTally,
    split_round,
    evaluate_round,
    tally_rounds,
    tally_file,
)

__all__ = [
    "DEFAULT_SPLIT_OFFSET",
    "RoundConfig",
    "RoundTally",
    "split_round",
    "evaluate_round",
    "tally_rounds",
    "tally_file",
]
