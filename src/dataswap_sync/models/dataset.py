"""Dataset requirement and proof aggregates."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator

from dataswap_sync.ingestion.normalize import int_list, require_int
from dataswap_sync.models._base import DataswapBaseModel
from dataswap_sync.models.enums import DataType


class DatasetRequirement(DataswapBaseModel):
    """One replica requirement of a dataset (who may store it, and where)."""

    _TUPLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "data_preparers",
        "storage_providers",
        "region_code",
        "country_code",
        "city_codes",
    )

    data_preparers: list[str] = Field(default_factory=list)
    storage_providers: list[str] = Field(default_factory=list)
    region_code: int = 0
    country_code: int = 0
    city_codes: list[int] = Field(default_factory=list)

    @field_validator("data_preparers", "storage_providers", mode="before")
    @classmethod
    def _coerce_addresses(cls, value: Any) -> list[str]:
        if value is None:
            return []
        return [str(item) for item in value]

    @field_validator("region_code", "country_code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> int:
        return require_int(value)

    @field_validator("city_codes", mode="before")
    @classmethod
    def _coerce_city_codes(cls, value: Any) -> list[int]:
        return int_list(value)


class DatasetProofs(DataswapBaseModel):
    """Proof leaves of one dataset, as fetched page by page from DatasetProof.

    ``sizes`` is either empty (sizes unknown) or aligned with ``hashes``.
    """

    dataset_id: int
    data_type: DataType
    hashes: list[str] = Field(default_factory=list)
    sizes: list[int] = Field(default_factory=list)

    @field_validator("hashes", mode="before")
    @classmethod
    def _coerce_hashes(cls, value: Any) -> list[str]:
        if value is None:
            return []
        return [str(item) for item in value]

    @field_validator("sizes", mode="before")
    @classmethod
    def _coerce_sizes(cls, value: Any) -> list[int]:
        return int_list(value)

    @model_validator(mode="after")
    def _check_alignment(self) -> DatasetProofs:
        if self.sizes and len(self.sizes) != len(self.hashes):
            raise ValueError(f"sizes ({len(self.sizes)}) must align with hashes ({len(self.hashes)})")
        return self
