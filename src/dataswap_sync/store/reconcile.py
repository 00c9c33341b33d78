"""Idempotent reconciliation of derived records into the store.

Batches are applied strictly in order and stop at the first failure.
Earlier records of a failed batch stay committed; nothing is rolled back.
Independent batches (cars vs. car replicas) touch disjoint unique-index
spaces and may run concurrently via :func:`reconcile_concurrently`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from dataswap_sync.exceptions import DataswapError, DataswapReconciliationError, DataswapTransportError
from dataswap_sync.ingestion.convert import dataset_proofs_to_cars, matching_target_to_car_replicas
from dataswap_sync.models._base import DataswapBaseModel
from dataswap_sync.models.car import Car, CarReplica, unique_index
from dataswap_sync.models.dataset import DatasetProofs
from dataswap_sync.models.matching import MatchingTarget
from dataswap_sync.result import Result
from dataswap_sync.store.backend import DocumentBackend

_logger = logging.getLogger(__name__)

R = TypeVar("R", bound=DataswapBaseModel)


def index_filter(record: DataswapBaseModel) -> dict[str, Any]:
    """``{field: value}`` form of the record's unique index."""
    fields: tuple[str, ...] = type(record).UNIQUE_INDEX  # type: ignore[attr-defined]
    return dict(zip(fields, unique_index(record), strict=True))


class EntityStore(Generic[R]):
    """Create-or-update adapter for one entity type."""

    def __init__(self, backend: DocumentBackend, collection: str, model: type[R]) -> None:
        self._backend = backend
        self._collection = collection
        self._model = model

    @property
    def collection(self) -> str:
        return self._collection

    async def create_or_update_by_unique_index(self, record: R) -> Result[R]:
        """Write *record*, replacing any stored record with the same unique index."""
        if not isinstance(record, self._model):
            return Result.failure(
                DataswapError(f"{self._collection}: expected {self._model.__name__}, got {type(record).__name__}")
            )
        index = index_filter(record)
        document = record.model_dump(mode="json")
        try:
            await self._backend.create_or_update(self._collection, index, document)
        except DataswapError as exc:
            return Result.failure(exc)
        except Exception as exc:
            reason = "timed out" if isinstance(exc, TimeoutError) else f"failed: {exc}"
            error = DataswapTransportError(f"{self._collection} upsert {reason}", method="create_or_update")
            error.__cause__ = exc
            return Result.failure(error)
        return Result.success(record)

    async def upsert_batch(self, records: Iterable[R]) -> Result[list[R]]:
        """Upsert *records* one by one, stopping at the first failure.

        On failure the error is a :class:`DataswapReconciliationError` whose
        ``index`` is the 1-based position of the failing record; records
        after it were not attempted.
        """
        applied: list[R] = []
        for position, record in enumerate(records, start=1):
            res = await self.create_or_update_by_unique_index(record)
            if not res.ok:
                _logger.warning(
                    "%s batch stopped at record %d after %d committed: %s",
                    self._collection,
                    position,
                    len(applied),
                    res.error,
                )
                return Result.failure(
                    DataswapReconciliationError(
                        f"{self._collection} upsert failed at record {position}: {res.error}",
                        index=position,
                        record=record,
                        cause=res.error,
                    )
                )
            applied.append(record)
        _logger.debug("%s batch upserted %d records", self._collection, len(applied))
        return Result.success(applied)


class CarStore(EntityStore[Car]):
    def __init__(self, backend: DocumentBackend, collection: str = "Car") -> None:
        super().__init__(backend, collection, Car)

    async def store_cars(
        self,
        proofs: DatasetProofs,
        *,
        car_ids: Sequence[int] | None = None,
        replicas_count: int | None = None,
    ) -> Result[list[Car]]:
        """Convert the dataset's proof leaves to cars and reconcile them.

        ``car_ids`` (aligned with the proof hashes) and ``replicas_count``
        enrich each car so it can be joined to its replicas.
        """
        cars = dataset_proofs_to_cars(proofs, car_ids=car_ids, replicas_count=replicas_count)
        return await self.upsert_batch(cars)


class CarReplicaStore(EntityStore[CarReplica]):
    def __init__(self, backend: DocumentBackend, collection: str = "CarReplica") -> None:
        super().__init__(backend, collection, CarReplica)

    async def store_car_replicas(self, target: MatchingTarget) -> Result[list[CarReplica]]:
        """Convert the matching target's cars to replicas and reconcile them."""
        return await self.upsert_batch(matching_target_to_car_replicas(target))


async def reconcile_concurrently(*batches: Awaitable[Result[Any]]) -> list[Result[Any]]:
    """Run independent batches side by side; each keeps its own ordering."""
    return list(await asyncio.gather(*batches))
