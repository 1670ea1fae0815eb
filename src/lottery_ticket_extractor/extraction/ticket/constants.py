# constants.py
# ============

"""
constants.
=========

Does: Define the fixed lottery-ticket rules used by number validation and
      ticket segmentation (ticket size, digit width, value range).
Used By: LotteryNumber construction, split_core preconditions and pruning.
Returns: Pure integer constants (no side effects).
"""

# ── 1) Ticket shape ──────────────────────────────────────────────────────────

TICKET_LENGTH: int = 7  # numbers per ticket
MAX_DIGITS: int = 2  # widest digit group for one number

# ── 2) Number range ──────────────────────────────────────────────────────────

MIN_VALUE: int = 1
MAX_VALUE: int = 59

# ── 3) Derived input bounds ──────────────────────────────────────────────────

MIN_INPUT_LENGTH: int = TICKET_LENGTH
MAX_INPUT_LENGTH: int = TICKET_LENGTH * MAX_DIGITS

__all__ = [
    "TICKET_LENGTH",
    "MAX_DIGITS",
    "MIN_VALUE",
    "MAX_VALUE",
    "MIN_INPUT_LENGTH",
    "MAX_INPUT_LENGTH",
]
