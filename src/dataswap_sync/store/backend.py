"""Persistence boundary.

The storage engine is external; entity stores only need create-or-update
keyed by a business index.  :class:`InMemoryBackend` is the deterministic
reference implementation used in tests and local runs.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Protocol

_logger = logging.getLogger(__name__)


class DocumentBackend(Protocol):
    """Structural store interface.

    ``index`` maps unique-index field names to values, in declaration order.
    The document replaces any existing document with the same index
    (the converter output is a complete snapshot for that key).

    Implementations raise :class:`dataswap_sync.exceptions.DataswapTransportError`
    or their driver's own errors on failure; entity stores turn every
    exception into an error result.
    """

    async def create_or_update(
        self,
        collection: str,
        index: Mapping[str, Any],
        document: Mapping[str, Any],
    ) -> None:
        ...


class InMemoryBackend:
    """Dict-backed :class:`DocumentBackend`.

    Documents are keyed by ``(collection, index values)`` so two writes with
    the same unique index always land on the same slot.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[tuple[Any, ...], dict[str, Any]]] = {}
        self.writes = 0

    async def create_or_update(
        self,
        collection: str,
        index: Mapping[str, Any],
        document: Mapping[str, Any],
    ) -> None:
        docs = self._collections.setdefault(collection, {})
        key = tuple(index.values())
        action = "update" if key in docs else "create"
        docs[key] = copy.deepcopy(dict(document))
        self.writes += 1
        _logger.debug("%s %s key=%s", action, collection, key)

    def get(self, collection: str, index: Mapping[str, Any]) -> dict[str, Any] | None:
        doc = self._collections.get(collection, {}).get(tuple(index.values()))
        return copy.deepcopy(doc) if doc is not None else None

    def documents(self, collection: str) -> list[dict[str, Any]]:
        """All documents of *collection*, in first-insertion order."""
        return [copy.deepcopy(doc) for doc in self._collections.get(collection, {}).values()]

    def count(self, collection: str) -> int:
        return len(self._collections.get(collection, {}))
