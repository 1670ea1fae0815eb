# extraction/ticket/split/split_core.py

"""
split_core.py.

Does: Split a glued digit string into a lottery ticket of seven unique
      numbers via recursive backtracking with length-feasibility pruning and
      snapshot/rollback of an explicit per-call search state.
Returns: list[LotteryNumber] / None from segment_ticket(); a
         SegmentationOutcome from segment().
Used by: Batch orchestration and the demo CLI.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from ..constants import MAX_DIGITS, MAX_INPUT_LENGTH, MIN_INPUT_LENGTH, TICKET_LENGTH
from ..number import LotteryNumber, is_ascii_digit
from ..types import (
    InvalidInput,
    InvalidTicketInput,
    NoMatch,
    SearchInvariantError,
    SegmentationOutcome,
    Success,
)

__all__ = [
    "check_ticket_input",
    "segment_ticket",
    "segment",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Search state
# ─────────────────────────────────────────────────────────────────────────────


class _Snapshot(NamedTuple):
    cursor: int
    count: int


@dataclass
class _SearchState:
    """
    Does: Hold the mutable state of one search (cursor, accepted numbers,
          values seen) and apply/undo tentative accepts.
    Used by: _search only; a new instance is built per segment_ticket() call.
    """

    raw: str
    cursor: int = 0
    accepted: list[LotteryNumber] = field(default_factory=list)
    seen: set[int] = field(default_factory=set)

    @property
    def remaining(self) -> int:
        return len(self.raw) - self.cursor

    @property
    def slots_left(self) -> int:
        return TICKET_LENGTH - len(self.accepted)

    def peek(self, width: int) -> str:
        return self.raw[self.cursor : self.cursor + width]

    def snapshot(self) -> _Snapshot:
        return _Snapshot(self.cursor, len(self.accepted))

    def accept(self, number: LotteryNumber) -> bool:
        """Does: Append `number` and advance the cursor unless its value was seen."""
        if number.value in self.seen:
            return False
        self.accepted.append(number)
        self.seen.add(number.value)
        self.cursor += len(number.raw)
        return True

    def restore(self, saved: _Snapshot) -> None:
        """Does: Roll back to `saved`: truncate accepted, forget values, reset cursor."""
        if saved.count > len(self.accepted) or saved.cursor > self.cursor:
            raise SearchInvariantError(
                f"cannot restore to {saved} from cursor={self.cursor} "
                f"count={len(self.accepted)}"
            )
        for number in self.accepted[saved.count :]:
            self.seen.discard(number.value)
        del self.accepted[saved.count :]
        self.cursor = saved.cursor
        self.check()

    def check(self) -> None:
        consumed = sum(len(n.raw) for n in self.accepted)
        if consumed != self.cursor or len(self.seen) != len(self.accepted):
            raise SearchInvariantError(
                f"inconsistent state: cursor={self.cursor} consumed={consumed} "
                f"seen={len(self.seen)} accepted={len(self.accepted)}"
            )

    def is_complete(self) -> bool:
        return len(self.accepted) == TICKET_LENGTH and self.remaining == 0


# ─────────────────────────────────────────────────────────────────────────────
# Preconditions
# ─────────────────────────────────────────────────────────────────────────────


def check_ticket_input(raw: str | None) -> bool:
    """
    Does: Run input checks in fixed order: emptiness, length, characters.
    Returns: False when the length rules out a ticket; True when the search
             may run.
    Raises: InvalidTicketInput for empty/blank input or a non-digit character.
    """
    if not raw or raw.isspace():
        raise InvalidTicketInput(raw, "empty")
    if not MIN_INPUT_LENGTH <= len(raw) <= MAX_INPUT_LENGTH:
        return False
    if not all(is_ascii_digit(ch) for ch in raw):
        raise InvalidTicketInput(raw, "non-digit-character")
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Backtracking search
# ─────────────────────────────────────────────────────────────────────────────


def _search(state: _SearchState, debug: bool) -> bool:
    # Termination: a full ticket or exhausted input, success needs both
    if len(state.accepted) == TICKET_LENGTH or state.remaining == 0:
        return state.is_complete()

    # More digits left than the open slots can hold at max width
    if state.remaining > MAX_DIGITS * state.slots_left:
        if debug:
            log.debug("prune@%d: %d chars > %d slots", state.cursor, state.remaining, state.slots_left)
        return False
    # Fewer digits left than open slots
    if state.remaining < state.slots_left:
        if debug:
            log.debug("prune@%d: %d chars < %d slots", state.cursor, state.remaining, state.slots_left)
        return False

    for width in range(1, MAX_DIGITS + 1):
        if state.remaining < width:
            break
        number = LotteryNumber.try_create(state.peek(width))
        if number is None:
            continue
        saved = state.snapshot()
        if not state.accept(number):
            if debug:
                log.debug("dup@%d: %s", state.cursor, number)
            continue
        if debug:
            log.debug("try@%d: %s (%d accepted)", saved.cursor, number, len(state.accepted))
        if _search(state, debug):
            return True
        state.restore(saved)
        if debug:
            log.debug("rollback@%d: %s", saved.cursor, number)
    return False


def segment_ticket(raw: str | None, *, debug: bool = False) -> list[LotteryNumber] | None:
    """
    Does: Validate `raw` and search for the first split into seven unique
          numbers, trying 1-digit before 2-digit groups at each position.
    Returns: The seven numbers in input order, or None when no split exists
             (including a length outside 7..14).
    Raises: InvalidTicketInput for malformed input.
    """
    if not check_ticket_input(raw):
        if debug:
            log.debug("length %d outside %d..%d: %r", len(raw), MIN_INPUT_LENGTH, MAX_INPUT_LENGTH, raw)
        return None

    state = _SearchState(raw)
    if not _search(state, debug):
        return None
    state.check()
    return list(state.accepted)


def segment(raw: str | None, *, debug: bool = False) -> SegmentationOutcome:
    """
    Does: Total wrapper over segment_ticket() mapping each result class to an
          outcome value.
    Returns: Success(tokens), NoMatch() or InvalidInput(reason).
    """
    try:
        numbers = segment_ticket(raw, debug=debug)
    except InvalidTicketInput as e:
        return InvalidInput(e.reason)
    if numbers is None:
        return NoMatch()
    return Success(tuple(numbers))
