"""Ingestion layer.

Turns aggregates fetched through the contract facades into normalized
store records.  Nothing in here performs store writes.
"""

__all__: list[str] = []
