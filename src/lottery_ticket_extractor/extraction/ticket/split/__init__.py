# extraction/ticket/split/__init__.py
"""
split
=====

Does: Expose the ticket segmenter (preconditions + backtracking search).
Exports: check_ticket_input, segment_ticket, segment
Used by: Orchestrator and CLI.
"""

from .split_core import (
    check_ticket_input,
    segment,
    segment_ticket,
)

__all__ = [
    "check_ticket_input",
    "segment_ticket",
    "segment",
]
