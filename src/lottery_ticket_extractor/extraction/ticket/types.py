# lottery_ticket_extractor/extraction/ticket/types.py
"""
types.py.

Does: Define the segmentation outcome values handed to callers and the two
      error types raised by the segmenter.
Used by: split_core, orchestrator, demo CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .number import LotteryNumber

InvalidReason = Literal["empty", "non-digit-character"]

__all__ = [
    "InvalidReason",
    "Success",
    "NoMatch",
    "InvalidInput",
    "SegmentationOutcome",
    "InvalidTicketInput",
    "SearchInvariantError",
]


# ── Outcomes ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Success:
    """A complete ticket: seven numbers in input order."""

    tokens: tuple[LotteryNumber, ...]

    @property
    def display(self) -> tuple[str, ...]:
        return tuple(t.to_display_string() for t in self.tokens)


@dataclass(frozen=True)
class NoMatch:
    """Input is well formed but cannot be split into a ticket."""


@dataclass(frozen=True)
class InvalidInput:
    """Input is malformed (empty or holds a non-digit character)."""

    reason: InvalidReason


SegmentationOutcome = Success | NoMatch | InvalidInput


# ── Errors ───────────────────────────────────────────────────────────────────
class InvalidTicketInput(ValueError):
    """Raise when a candidate string is empty/blank or contains a non-digit."""

    def __init__(self, raw: str | None, reason: InvalidReason):
        self.raw = raw
        self.reason: InvalidReason = reason
        super().__init__(f"invalid ticket input ({reason}): {raw!r}")


class SearchInvariantError(AssertionError):
    """Raise when the backtracking state is inconsistent (a bug, never bad input)."""
