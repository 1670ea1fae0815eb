# extraction/ticket/number.py
"""
number.

Does: Represent one lottery number cut from 1–2 digit characters, keeping the
      raw digits (leading zero included) next to the decimal value.
Returns: LotteryNumber, is_ascii_digit().
Used by: split_core (candidate construction) and result rendering.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .constants import MAX_DIGITS, MAX_VALUE, MIN_VALUE

__all__ = ["LotteryNumber", "is_ascii_digit"]

_ASCII_DIGITS = frozenset("0123456789")


def is_ascii_digit(ch: str) -> bool:
    """Does: True for a single character in '0'..'9' (no locale digits)."""
    return ch in _ASCII_DIGITS


def _parse(raw: str) -> int | None:
    """
    Does: Validate width/characters and convert to a decimal value in range.
    Returns: The value, or None when `raw` cannot be a lottery number.
    """
    if not 1 <= len(raw) <= MAX_DIGITS:
        return None
    value = 0
    for ch in raw:
        if not is_ascii_digit(ch):
            return None
        value = value * 10 + (ord(ch) - ord("0"))
    if not MIN_VALUE <= value <= MAX_VALUE:
        return None
    return value


@dataclass(frozen=True, eq=False)
class LotteryNumber:
    """
    One validated lottery number.

    Equality and hashing follow `value`, so "07" and "7" are the same number.
    Use `try_create` for candidates that may be invalid; the constructor
    raises ValueError instead.
    """

    raw: str
    value: int = field(init=False)

    def __post_init__(self) -> None:
        value = _parse(self.raw) if isinstance(self.raw, str) else None
        if value is None:
            raise ValueError(f"not a lottery number: {self.raw!r}")
        object.__setattr__(self, "value", value)

    @classmethod
    def try_create(cls, chars: str | Iterable[str]) -> LotteryNumber | None:
        """
        Does: Build a number from candidate digit characters.
        Returns: LotteryNumber, or None for a wrong width, a non-digit or an
                 out-of-range value.
        """
        raw = chars if isinstance(chars, str) else "".join(chars)
        if _parse(raw) is None:
            return None
        return cls(raw)

    def to_display_string(self) -> str:
        return self.raw

    def values_equal(self, other: LotteryNumber) -> bool:
        return other is not None and self.value == other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LotteryNumber):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.raw
