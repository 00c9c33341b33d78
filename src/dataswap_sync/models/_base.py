"""Base model and enum for Dataswap protocol values.

Every model inherits from :class:`DataswapBaseModel` which provides:

* ``alias_generator=to_camel`` so the contracts' camelCase field names map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that turns positional tuples (how
  ABI decoders return Solidity structs) into keyword dicts using the
  subclass' ``_TUPLE_FIELDS`` order.
* A ``raw`` value that captures the original payload.

Protocol enums inherit from :class:`DataswapEnum` which adds an ``UNKNOWN``
member at ``-1`` and a ``_missing_`` hook that returns ``UNKNOWN`` for any
value without a mapped member.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class DataswapEnum(enum.IntEnum):
    """Base for protocol enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    """

    @classmethod
    def _missing_(cls, value: object) -> DataswapEnum:
        # pylint: disable=no-member
        if hasattr(cls, "UNKNOWN"):
            unknown: DataswapEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class DataswapBaseModel(BaseModel):
    """Base for values read from or written to the protocol."""

    _TUPLE_FIELDS: ClassVar[tuple[str, ...]] = ()
    """Field order of the Solidity struct, used to map positional results."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: Any = Field(default=None, exclude=True, repr=False)
    """Original payload as returned by the chain, when built from one."""

    @model_validator(mode="before")
    @classmethod
    def _from_positional(cls, values: Any) -> Any:
        """Map tuple/list results onto fields and stash the raw payload."""
        if isinstance(values, (list, tuple)):
            fields = cls._TUPLE_FIELDS
            if not fields:
                return values
            mapped: dict[str, Any] = dict(zip(fields, values, strict=False))
            mapped["raw"] = values
            return mapped
        if isinstance(values, Mapping):
            merged = dict(values)
            merged.setdefault("raw", dict(values))
            return merged
        return values

    def __eq__(self, other: object) -> bool:
        # Structural equality ignores the captured raw payload.
        if not isinstance(other, BaseModel) or type(other) is not type(self):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((type(self), _freeze(self.model_dump())))


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value
