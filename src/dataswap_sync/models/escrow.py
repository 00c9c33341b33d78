"""Escrow fund value object."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from dataswap_sync.ingestion.normalize import safe_int
from dataswap_sync.models._base import DataswapBaseModel


class Fund(DataswapBaseModel):
    """Balances of one escrow account.

    The ``getOwnerFund`` / ``getBeneficiaryFund`` calls return a positional
    struct ``(total, available, lock, collateral, ...)``; ABI decoders hand
    that back as a tuple which loses the field names.
    """

    _TUPLE_FIELDS: ClassVar[tuple[str, ...]] = ("total", "available", "lock", "collateral")

    available: int = 0
    collateral: int = 0
    lock: int = 0

    @field_validator("available", "collateral", "lock", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> int:
        parsed = safe_int(value)
        if parsed is None:
            raise ValueError(f"not an integer amount: {value!r}")
        if parsed < 0:
            raise ValueError(f"amount must be non-negative, got {parsed}")
        return parsed

    @property
    def total(self) -> int:
        return self.available + self.collateral + self.lock

    def __repr__(self) -> str:
        return f"Fund(available={self.available}, collateral={self.collateral}, lock={self.lock})"

