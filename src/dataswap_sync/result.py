"""Success/error wrapper returned by every fallible operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dataswap_sync.exceptions import DataswapError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Either ``data`` (``ok=True``) or ``error`` (``ok=False``).

    Usage::

        res = await escrow.get_owner_fund(EscrowType.DATACAP_COLLATERAL, owner, 7)
        if res.ok:
            print(res.data.available)
        else:
            log.warning("lookup failed: %s", res.error)
    """

    ok: bool
    data: T | None = None
    error: DataswapError | None = None

    @classmethod
    def success(cls, data: T | None = None) -> Result[T]:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: DataswapError) -> Result[T]:
        return cls(ok=False, error=error)
