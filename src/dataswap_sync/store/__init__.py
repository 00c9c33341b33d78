"""Store layer.

The only component allowed to write derived records.  Entity stores key
every write by the record's business unique index.
"""

from dataswap_sync.store.backend import DocumentBackend, InMemoryBackend
from dataswap_sync.store.reconcile import (
    CarReplicaStore,
    CarStore,
    EntityStore,
    index_filter,
    reconcile_concurrently,
)

__all__ = [
    "CarReplicaStore",
    "CarStore",
    "DocumentBackend",
    "EntityStore",
    "InMemoryBackend",
    "index_filter",
    "reconcile_concurrently",
]
