"""Shared plumbing for contract facades.

A facade is a flat, typed surface over two collaborators:

- a :class:`~dataswap_sync._dispatch.MethodDispatcher` that knows which
  method names are calls and which are sends
- a :class:`~dataswap_sync.messages.decoder.MessageDecoder` that knows how
  to classify messages sent to the contract

Subclasses only declare their method tables and one coroutine per
protocol operation.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, ClassVar, ParamSpec, TypeVar

from pydantic import ValidationError

from dataswap_sync._dispatch import InvocationKind, MethodDispatcher
from dataswap_sync._transport import ChainTransport
from dataswap_sync.exceptions import DataswapDecodeError
from dataswap_sync.ingestion.normalize import safe_int
from dataswap_sync.messages.decoder import CorrelationExtractor, MessageDecoder
from dataswap_sync.models.message import ProtocolEvent, RawMessage
from dataswap_sync.result import Result

_logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def as_int(data: Any, *_args: Any, **_kwargs: Any) -> int:
    """Decoder for uint results (ABI decoders may return str/hex/bigint)."""
    parsed = safe_int(data)
    if parsed is None:
        raise ValueError(f"not an integer: {data!r}")
    return parsed


def as_bool(data: Any, *_args: Any, **_kwargs: Any) -> bool:
    if isinstance(data, bool):
        return data
    if isinstance(data, str) and data.strip().lower() in {"true", "false"}:
        return data.strip().lower() == "true"
    parsed = safe_int(data)
    if parsed not in (0, 1):
        raise ValueError(f"not a boolean: {data!r}")
    return bool(parsed)


def as_str_list(data: Any, *_args: Any, **_kwargs: Any) -> list[str]:
    if isinstance(data, (str, bytes)):
        raise TypeError(f"expected a list, got {type(data).__name__}")
    return [str(item) for item in data]


def decoded_result(
    decoder: Callable[..., T],
) -> Callable[[Callable[P, Awaitable[Result[Any]]]], Callable[P, Awaitable[Result[T]]]]:
    """Post-process a facade method's raw result into a value object.

    *decoder* receives the raw chain result followed by the wrapped
    method's arguments (without ``self``), so it can inject call arguments
    the chain does not echo back.  Error results pass through untouched;
    an empty or undecodable success becomes a :class:`DataswapDecodeError`.
    """

    def wrap(fn: Callable[P, Awaitable[Result[Any]]]) -> Callable[P, Awaitable[Result[T]]]:
        @functools.wraps(fn)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
            res = await fn(*args, **kwargs)
            if not res.ok:
                return res
            method = fn.__name__
            if res.data is None:
                return Result.failure(DataswapDecodeError(f"{method}: empty result", method=method))
            try:
                return Result.success(decoder(res.data, *args[1:], **kwargs))
            except (ValidationError, ValueError, TypeError) as exc:
                _logger.warning("Could not decode %s result: %s", method, exc)
                return Result.failure(DataswapDecodeError(f"{method}: cannot decode result: {exc}", method=method))

        return wrapper

    return wrap


class ContractFacade:
    """Base for one protocol contract.

    Subclasses set ``CONTRACT_NAME``, ``CALL_METHODS``, ``SEND_METHODS``
    and ``CORRELATIONS``.  The tables are validated when the facade is
    constructed; a misconfigured facade raises
    :class:`~dataswap_sync.exceptions.DataswapConfigError` right away.
    """

    CONTRACT_NAME: ClassVar[str] = ""
    CALL_METHODS: ClassVar[tuple[str, ...]] = ()
    SEND_METHODS: ClassVar[tuple[str, ...]] = ()
    CORRELATIONS: ClassVar[Mapping[str, CorrelationExtractor]] = {}

    def __init__(
        self,
        transport: ChainTransport,
        address: str,
        *,
        strict_target_address: bool = True,
    ) -> None:
        name = self.CONTRACT_NAME or type(self).__name__
        self._dispatcher = MethodDispatcher(
            transport,
            address,
            call_methods=self.CALL_METHODS,
            send_methods=self.SEND_METHODS,
            contract_name=name,
        )
        self._decoder = MessageDecoder(
            name,
            self._dispatcher.methods(InvocationKind.SEND),
            self.CORRELATIONS,
            address=address if strict_target_address else None,
        )

    @property
    def address(self) -> str:
        return self._dispatcher.address

    @property
    def dispatcher(self) -> MethodDispatcher:
        return self._dispatcher

    @property
    def decoder(self) -> MessageDecoder:
        return self._decoder

    def decode_message(self, message: RawMessage | Mapping[str, Any]) -> Result[ProtocolEvent]:
        """Classify a parsed message sent to this contract."""
        return self._decoder.decode(message)

    async def _invoke(self, method: str, *args: Any, options: Any = None) -> Result[Any]:
        return await self._dispatcher.invoke(method, *args, options=options)
