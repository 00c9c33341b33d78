"""Store-side entity records derived from protocol state.

``UNIQUE_INDEX`` names the business fields that identify a record.  Both
the converter (which builds records) and the store (which keys upserts)
read the key through :func:`unique_index`, so the two can never drift.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from dataswap_sync.ingestion.normalize import require_int
from dataswap_sync.models._base import DataswapBaseModel, DataswapEnum
from dataswap_sync.models.enums import CarReplicaState, DataType


class Car(DataswapBaseModel):
    """A content-addressed piece of a dataset.

    ``car_id`` is the on-chain car id that :class:`CarReplica` records refer
    to, and ``replicas_count`` the number of replicas the dataset requires.
    Both are optional enrichments and not part of the unique index.
    """

    UNIQUE_INDEX: ClassVar[tuple[str, ...]] = ("hash", "dataset_id", "data_type")

    hash: str
    dataset_id: int
    data_type: DataType
    size: int | None = None
    car_id: int | None = None
    replicas_count: int | None = None

    @field_validator("hash", mode="before")
    @classmethod
    def _require_hash(cls, value: Any) -> str:
        text = str(value).strip() if value is not None else ""
        if not text:
            raise ValueError("car hash must be non-empty")
        return text

    @field_validator("size", "car_id", "replicas_count", mode="before")
    @classmethod
    def _coerce_optional_int(cls, value: Any) -> int | None:
        return None if value is None else require_int(value)


class CarReplica(DataswapBaseModel):
    """One replica of a car assigned to a matching."""

    UNIQUE_INDEX: ClassVar[tuple[str, ...]] = ("car_id", "matching_id")

    car_id: int
    matching_id: int
    state: CarReplicaState = CarReplicaState.MATCHED


def unique_index(record: DataswapBaseModel) -> tuple[Any, ...]:
    """Return the business key of *record* as declared by its ``UNIQUE_INDEX``."""
    fields: tuple[str, ...] = getattr(type(record), "UNIQUE_INDEX", ())
    if not fields:
        raise TypeError(f"{type(record).__name__} declares no UNIQUE_INDEX")
    return tuple(_key_part(getattr(record, name)) for name in fields)


def _key_part(value: Any) -> Any:
    # Enums key by their wire value so keys survive serialization.
    if isinstance(value, DataswapEnum):
        return int(value)
    return value
