"""Matching target aggregate."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, field_validator

from dataswap_sync.ingestion.normalize import int_list, require_int
from dataswap_sync.models._base import DataswapBaseModel
from dataswap_sync.models.enums import DataType


class MatchingTarget(DataswapBaseModel):
    """Cars a matching distributes, read from the MatchingTarget contract.

    The on-chain struct does not carry its own matching id; the facade
    injects it from the call argument (see
    :meth:`dataswap_sync.contracts.matching_target.MatchingTargetContract.get_matching_target`).
    """

    _TUPLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "dataset_id",
        "cars",
        "size",
        "data_type",
        "associated_mapping_files_matching_id",
        "replica_index",
    )

    matching_id: int | None = None
    dataset_id: int = 0
    data_type: DataType = DataType.UNKNOWN
    size: int = 0
    cars: list[int] = Field(default_factory=list)
    associated_mapping_files_matching_id: int = 0
    replica_index: int = 0

    @field_validator("matching_id", mode="before")
    @classmethod
    def _coerce_optional_id(cls, value: Any) -> int | None:
        return None if value is None else require_int(value)

    @field_validator("dataset_id", "size", "associated_mapping_files_matching_id", "replica_index", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return require_int(value)

    @field_validator("data_type", mode="before")
    @classmethod
    def _coerce_data_type(cls, value: Any) -> DataType:
        return DataType(require_int(value, default=-1))

    @field_validator("cars", mode="before")
    @classmethod
    def _coerce_cars(cls, value: Any) -> list[int]:
        return int_list(value)
