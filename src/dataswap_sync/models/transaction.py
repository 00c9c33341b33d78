"""Transaction options for state-changing contract methods."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dataswap_sync.ingestion.normalize import safe_int

_EVM_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_FIL_ADDRESS_RE = re.compile(r"^[ft][0-4][0-9a-z]+$")


class TransactionOptions(BaseModel):
    """Sender and fee bounds for a ``send`` invocation.

    Parameters
    ----------
    from_address : str
        Sender address (``0x`` EVM address or Filecoin ``f``/``t`` address).
        Accepts ``from`` as input key.
    value : int
        Native token amount attached to the transaction, in attoFIL/wei.
    gas : int or None
        Gas limit.  Accepts ``gasLimit`` as input key.
    gas_price : int or None
        Legacy gas price; cannot be combined with EIP-1559 fee fields.
    max_fee_per_gas, max_priority_fee_per_gas : int or None
        EIP-1559 fee caps.
    nonce : int or None
        Explicit sender nonce.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    from_address: str = Field(
        validation_alias=AliasChoices("from", "fromAddress", "from_address", "sender"),
        serialization_alias="from",
    )
    value: int = 0
    gas: int | None = Field(default=None, validation_alias=AliasChoices("gas", "gasLimit", "gas_limit"))
    gas_price: int | None = Field(default=None, validation_alias=AliasChoices("gasPrice", "gas_price"))
    max_fee_per_gas: int | None = Field(
        default=None,
        validation_alias=AliasChoices("maxFeePerGas", "max_fee_per_gas"),
    )
    max_priority_fee_per_gas: int | None = Field(
        default=None,
        validation_alias=AliasChoices("maxPriorityFeePerGas", "max_priority_fee_per_gas"),
    )
    nonce: int | None = None

    @field_validator("from_address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        if _EVM_ADDRESS_RE.match(value) or _FIL_ADDRESS_RE.match(value):
            return value
        raise ValueError(f"invalid sender address: {value!r}")

    @field_validator("value", "gas", "gas_price", "max_fee_per_gas", "max_priority_fee_per_gas", "nonce", mode="before")
    @classmethod
    def _coerce_quantity(cls, value: Any) -> int | None:
        if value is None:
            return None
        parsed = safe_int(value)
        if parsed is None:
            raise ValueError(f"not an integer quantity: {value!r}")
        if parsed < 0:
            raise ValueError(f"quantity must be non-negative, got {parsed}")
        return parsed

    @model_validator(mode="after")
    def _check_fee_bounds(self) -> TransactionOptions:
        if self.gas is not None and self.gas == 0:
            raise ValueError("gas limit must be positive")
        eip1559 = self.max_fee_per_gas is not None or self.max_priority_fee_per_gas is not None
        if self.gas_price is not None and eip1559:
            raise ValueError("gas_price cannot be combined with max_fee_per_gas/max_priority_fee_per_gas")
        if (
            self.max_fee_per_gas is not None
            and self.max_priority_fee_per_gas is not None
            and self.max_priority_fee_per_gas > self.max_fee_per_gas
        ):
            raise ValueError("max_priority_fee_per_gas must not exceed max_fee_per_gas")
        return self

    def to_rpc(self) -> dict[str, Any]:
        """Dump as the camelCase dict most JSON-RPC signers expect."""
        return {
            key: value
            for key, value in {
                "from": self.from_address,
                "value": self.value,
                "gas": self.gas,
                "gasPrice": self.gas_price,
                "maxFeePerGas": self.max_fee_per_gas,
                "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
                "nonce": self.nonce,
            }.items()
            if value is not None
        }


def coerce_transaction_options(value: Any) -> TransactionOptions:
    """Validate *value* into :class:`TransactionOptions`.

    Raises :class:`pydantic.ValidationError` (or :class:`TypeError` for
    values that are neither options nor a mapping).
    """
    if isinstance(value, TransactionOptions):
        return value
    if isinstance(value, Mapping):
        return TransactionOptions.model_validate(dict(value))
    raise TypeError(f"transaction options must be a mapping, got {type(value).__name__}")


def is_transaction_options(value: Any) -> bool:
    """Predicate used by the dispatcher before any ``send``."""
    try:
        coerce_transaction_options(value)
    except (TypeError, ValidationError):
        return False
    return True
