"""Custom exception hierarchy for dataswap_sync.

Only :class:`DataswapConfigError` is raised by the library itself.  Every
other error type travels inside the error variant of a
:class:`dataswap_sync.result.Result` so callers can branch on it without
``try``/``except``.
"""

from __future__ import annotations

from typing import Any


class DataswapError(Exception):
    """Base exception for all dataswap_sync errors."""


class DataswapConfigError(DataswapError):
    """Invalid or inconsistent configuration (fatal at construction time)."""


class DataswapUnsupportedMethodError(DataswapError):
    """Method name not registered for a contract."""

    def __init__(self, message: str, *, method: str = "", contract: str = "") -> None:
        self.method = method
        self.contract = contract
        super().__init__(message)


class DataswapInvalidOptionsError(DataswapError):
    """Transaction options failed validation before dispatch."""

    def __init__(self, message: str, *, method: str = "") -> None:
        self.method = method
        super().__init__(message)


class DataswapTransportError(DataswapError):
    """Chain RPC or store I/O failure (network, revert, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        contract: str = "",
        method: str = "",
    ) -> None:
        self.contract = contract
        self.method = method
        super().__init__(message)


class DataswapDecodeError(DataswapError):
    """Raw call result could not be reconstructed into a value object."""

    def __init__(self, message: str, *, method: str = "") -> None:
        self.method = method
        super().__init__(message)


class DataswapReconciliationError(DataswapError):
    """A record in an upsert batch failed.

    ``index`` is 1-based.  Records before it were committed; records from
    it onwards were not attempted.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int,
        record: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        self.index = index
        self.record = record
        self.cause = cause
        super().__init__(message)
