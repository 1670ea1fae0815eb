# orchestrator.py

"""
orchestrator.py
===============

Does: Batch orchestration around the ticket segmenter: read candidate lines,
      segment each one independently, and render results for display.
Returns:
  - extract_tickets(raws) -> [TicketResult(raw, outcome), ...]
  - render_tickets(raws) -> ["4938532894754 -> 49 38 53 28 9 47 54", ...]
  - process_file(path) -> same as render_tickets for the file's lines
Used by: demo CLI and any caller processing many candidate strings.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from lottery_ticket_extractor.extraction.ticket import (
    InvalidInput,
    NoMatch,
    SegmentationOutcome,
    Success,
    segment,
)
from lottery_ticket_extractor.extraction.utils import ConfigTypeError, load_config
from lottery_ticket_extractor.extraction.utils import debug as log_topic

logger = logging.getLogger(__name__)

__all__ = [
    "TicketResult",
    "load_batch_settings",
    "extract_tickets",
    "format_result",
    "render_tickets",
    "read_candidates",
    "process_file",
]

# ── Settings ──────────────────────────────────────────────────────────────────
_SETTING_TYPES: dict[str, type] = {
    "encoding": str,
    "separator": str,
    "arrow": str,
    "report_rejections": bool,
}


def _validate_batch_settings(data: dict[str, Any]) -> dict[str, Any]:
    missing = [k for k in _SETTING_TYPES if k not in data]
    if missing:
        raise ConfigTypeError(f"batch_settings: missing keys {missing}")
    for key, expected in _SETTING_TYPES.items():
        if not isinstance(data[key], expected):
            raise ConfigTypeError(
                f"batch_settings: '{key}' must be {expected.__name__}, "
                f"got {type(data[key]).__name__}"
            )
    return data


def load_batch_settings() -> dict[str, Any]:
    """Does: Load and validate <data>/batch_settings.json."""
    return load_config(
        "batch_settings", mode="validated_dict", validator=_validate_batch_settings
    )


# ── Extraction ───────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class TicketResult:
    raw: str
    outcome: SegmentationOutcome

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)


def extract_tickets(raws: Iterable[str], *, debug: bool = False) -> list[TicketResult]:
    """
    Does: Segment every candidate string independently.
    Returns: One TicketResult per input, in input order.
    """
    if raws is None:
        raise TypeError("raws must be an iterable of strings, not None")
    results = [TicketResult(raw, segment(raw, debug=debug)) for raw in raws]
    logger.debug(
        "extract_tickets: %d inputs, %d tickets",
        len(results),
        sum(r.ok for r in results),
    )
    return results


def format_result(
    result: TicketResult,
    *,
    separator: str = " ",
    arrow: str = " -> ",
    report_rejections: bool = False,
) -> str | None:
    """
    Does: Render one result as "<raw><arrow><numbers joined by separator>".
    Returns: The line, or None for a rejection unless report_rejections is set.
    """
    outcome = result.outcome
    if isinstance(outcome, Success):
        return f"{result.raw}{arrow}{separator.join(outcome.display)}"

    if isinstance(outcome, NoMatch):
        reason = "no match"
    elif isinstance(outcome, InvalidInput):
        reason = f"invalid input ({outcome.reason})"
    else:
        raise TypeError(f"unknown outcome: {outcome!r}")

    log_topic(f"skip {result.raw!r}: {reason}", topic="batch")
    if not report_rejections:
        return None
    return f"{result.raw}{arrow}{reason}"


def render_tickets(
    raws: Iterable[str],
    *,
    report_rejections: bool | None = None,
    debug: bool = False,
) -> list[str]:
    """
    Does: Extract tickets and format them with the batch settings.
    Returns: Rendered lines; rejections only when reporting is on
             (argument wins over settings when not None).
    """
    settings = load_batch_settings()
    if report_rejections is None:
        report_rejections = settings["report_rejections"]

    lines: list[str] = []
    for result in extract_tickets(raws, debug=debug):
        line = format_result(
            result,
            separator=settings["separator"],
            arrow=settings["arrow"],
            report_rejections=report_rejections,
        )
        if line is not None:
            lines.append(line)
    return lines


# ── File input ───────────────────────────────────────────────────────────────
def read_candidates(path: str | os.PathLike[str], *, encoding: str | None = None) -> list[str]:
    """Does: Read one candidate per line, stripping only the line terminator."""
    if encoding is None:
        encoding = load_batch_settings()["encoding"]
    with open(path, encoding=encoding, newline="") as f:
        return [line.rstrip("\r\n") for line in f]


def process_file(
    path: str | os.PathLike[str],
    *,
    report_rejections: bool | None = None,
) -> list[str]:
    """Does: read_candidates() + render_tickets() for a file of candidate strings."""
    candidates = read_candidates(path)
    logger.info("Processing %s (%d lines)", os.fspath(path), len(candidates))
    return render_tickets(candidates, report_rejections=report_rejections)
