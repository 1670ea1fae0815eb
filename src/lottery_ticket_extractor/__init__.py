"""
lottery_ticket_extractor
========================

Does: Root package initializer for the lottery ticket extractor project.
Returns: Re-exports the segmenter entry points (`segment`, `segment_ticket`).
Used by: All higher-level imports starting from `lottery_ticket_extractor.*`.
"""

from .extraction.ticket import segment, segment_ticket

__all__: list[str] = ["segment", "segment_ticket"]
__docformat__ = "google"
