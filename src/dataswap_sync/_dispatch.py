"""Method dispatch: route a contract method name to a chain call or send.

A :class:`MethodDispatcher` is built once per contract facade from two
allow-lists.  Inconsistent lists are rejected at construction so a
misconfigured facade never gets as far as the chain.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from dataswap_sync._transport import ChainTransport
from dataswap_sync.exceptions import (
    DataswapConfigError,
    DataswapInvalidOptionsError,
    DataswapTransportError,
    DataswapUnsupportedMethodError,
)
from dataswap_sync.models.transaction import (
    TransactionOptions,
    coerce_transaction_options,
    is_transaction_options,
)
from dataswap_sync.result import Result

_logger = logging.getLogger(__name__)


class InvocationKind(StrEnum):
    CALL = "call"
    SEND = "send"


@dataclass(frozen=True, slots=True)
class ContractMethodSpec:
    """A registered contract method and how it is invoked."""

    method_name: str
    kind: InvocationKind


def build_method_table(
    call_methods: Iterable[str],
    send_methods: Iterable[str],
    *,
    contract_name: str = "",
) -> dict[str, ContractMethodSpec]:
    """Validate the allow-lists and return ``{name: spec}`` in registration order.

    Raises
    ------
    DataswapConfigError
        On blank names, duplicates within a list, or a name present in
        both lists.
    """
    table: dict[str, ContractMethodSpec] = {}
    for kind, names in ((InvocationKind.CALL, call_methods), (InvocationKind.SEND, send_methods)):
        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise DataswapConfigError(f"{contract_name}: method names must be non-empty strings, got {name!r}")
            existing = table.get(name)
            if existing is not None:
                if existing.kind == kind:
                    raise DataswapConfigError(f"{contract_name}: method {name!r} registered twice as {kind}")
                raise DataswapConfigError(f"{contract_name}: method {name!r} registered as both call and send")
            table[name] = ContractMethodSpec(method_name=name, kind=kind)
    return table


class MethodDispatcher:
    """Invoke registered contract methods through a :class:`ChainTransport`.

    Expected failures (unknown method, malformed options, revert, network
    error, timeout) come back as ``Result.failure``; nothing is retried.
    """

    def __init__(
        self,
        transport: ChainTransport,
        address: str,
        *,
        call_methods: Iterable[str],
        send_methods: Iterable[str],
        contract_name: str = "",
    ) -> None:
        self._transport = transport
        self._address = address
        self._contract_name = contract_name
        self._table = build_method_table(call_methods, send_methods, contract_name=contract_name)

    @property
    def address(self) -> str:
        return self._address

    @property
    def contract_name(self) -> str:
        return self._contract_name

    def kind_of(self, method: str) -> InvocationKind | None:
        spec = self._table.get(method)
        return spec.kind if spec is not None else None

    def methods(self, kind: InvocationKind) -> tuple[str, ...]:
        return tuple(name for name, spec in self._table.items() if spec.kind == kind)

    async def invoke(
        self,
        method: str,
        *args: Any,
        options: TransactionOptions | Mapping[str, Any] | None = None,
    ) -> Result[Any]:
        """Run *method* with positional *args*.

        ``options`` is required for send methods and ignored for calls.
        """
        spec = self._table.get(method)
        if spec is None:
            return Result.failure(
                DataswapUnsupportedMethodError(
                    f"{self._contract_name}: method {method!r} is not supported",
                    method=method,
                    contract=self._contract_name,
                )
            )

        if spec.kind == InvocationKind.CALL:
            return await self._call(method, args)

        if options is None or not is_transaction_options(options):
            _logger.warning("Rejected options for %s.%s", self._contract_name, method)
            reason = "are required" if options is None else "are invalid"
            return Result.failure(
                DataswapInvalidOptionsError(
                    f"{self._contract_name}.{method}: transaction options {reason}",
                    method=method,
                )
            )
        return await self._send(method, args, coerce_transaction_options(options))

    async def _call(self, method: str, args: tuple[Any, ...]) -> Result[Any]:
        _logger.debug("call %s.%s args=%d", self._contract_name, method, len(args))
        try:
            data = await self._transport.call(self._address, method, list(args))
        except Exception as exc:
            return Result.failure(self._transport_error("call", method, exc))
        return Result.success(data)

    async def _send(self, method: str, args: tuple[Any, ...], options: TransactionOptions) -> Result[Any]:
        _logger.debug("send %s.%s from=%s", self._contract_name, method, options.from_address)
        try:
            data = await self._transport.send(self._address, method, list(args), options)
        except Exception as exc:
            return Result.failure(self._transport_error("send", method, exc))
        return Result.success(data)

    def _transport_error(self, verb: str, method: str, exc: BaseException) -> DataswapTransportError:
        reason = "timed out" if isinstance(exc, TimeoutError) else f"failed: {exc}"
        _logger.warning("%s %s.%s at %s %s", verb, self._contract_name, method, self._address, reason)
        error = DataswapTransportError(
            f"{verb} {self._contract_name}.{method} at {self._address} {reason}",
            contract=self._contract_name,
            method=method,
        )
        error.__cause__ = exc
        return error
