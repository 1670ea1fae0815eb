# lottery_ticket_extractor/extraction/__init__.py

"""
extraction.
==========

Does: Group the ticket domain (`ticket`), shared utilities (`utils`) and the
      batch `orchestrator`.
"""

__all__: list[str] = []
__docformat__ = "google"
