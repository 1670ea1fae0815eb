"""
ticket.
======

Does: Aggregate the lottery-ticket domain: rules, numbers, outcome types and
      the segmenter.
Used By: Orchestrator, demo CLI, tests.
"""

# ── Rules ────────────────────────────────────────────────────────────────────
from .constants import (
    MAX_DIGITS,
    MAX_INPUT_LENGTH,
    MAX_VALUE,
    MIN_INPUT_LENGTH,
    MIN_VALUE,
    TICKET_LENGTH,
)

# ── Values & outcomes ────────────────────────────────────────────────────────
from .number import LotteryNumber, is_ascii_digit
from .split import check_ticket_input, segment, segment_ticket
from .types import (
    InvalidInput,
    InvalidReason,
    InvalidTicketInput,
    NoMatch,
    SearchInvariantError,
    SegmentationOutcome,
    Success,
)

__all__ = [
    # rules
    "TICKET_LENGTH",
    "MAX_DIGITS",
    "MIN_VALUE",
    "MAX_VALUE",
    "MIN_INPUT_LENGTH",
    "MAX_INPUT_LENGTH",
    # values
    "LotteryNumber",
    "is_ascii_digit",
    # outcomes
    "Success",
    "NoMatch",
    "InvalidInput",
    "InvalidReason",
    "SegmentationOutcome",
    "InvalidTicketInput",
    "SearchInvariantError",
    # segmenter
    "check_ticket_input",
    "segment_ticket",
    "segment",
]
