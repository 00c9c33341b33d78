"""Classify parsed chain messages into :class:`ProtocolEvent` values.

Each contract declares a correlation table mapping every one of its send
methods to an extractor.  The extractor lifts protocol identifiers
(``datasetId``, ``matchingId``) out of the message parameters so
downstream indexers do not have to know each method's parameter names.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from dataswap_sync.exceptions import DataswapConfigError, DataswapDecodeError, DataswapUnsupportedMethodError
from dataswap_sync.ingestion.normalize import safe_int
from dataswap_sync.models.message import ProtocolEvent, RawMessage
from dataswap_sync.result import Result

_logger = logging.getLogger(__name__)

Correlation = dict[str, int | None]
CorrelationExtractor = Callable[[Mapping[str, Any]], Correlation]


def no_correlation(_params: Mapping[str, Any]) -> Correlation:
    """For methods that do not concern a specific dataset or matching."""
    return {}


def dataset_correlation(param: str = "datasetId") -> CorrelationExtractor:
    def extract(params: Mapping[str, Any]) -> Correlation:
        return {"dataset_id": safe_int(params.get(param))}

    return extract


def dataset_and_matching_correlation(
    dataset_param: str = "datasetId",
    matching_param: str = "matchingId",
) -> CorrelationExtractor:
    def extract(params: Mapping[str, Any]) -> Correlation:
        return {
            "dataset_id": safe_int(params.get(dataset_param)),
            "matching_id": safe_int(params.get(matching_param)),
        }

    return extract


class MessageDecoder:
    """Decode messages sent to one contract.

    Parameters
    ----------
    contract_name : str
        Used in error messages and on the decoded events.
    send_methods : iterable of str
        The contract's state-changing methods; exactly the set of messages
        this decoder recognizes.
    correlations : mapping
        ``{method: extractor}``.  Must cover ``send_methods`` exactly.
    address : str or None
        When set, messages whose ``to`` address is present and differs are
        rejected as not belonging to this contract.
    """

    def __init__(
        self,
        contract_name: str,
        send_methods: Iterable[str],
        correlations: Mapping[str, CorrelationExtractor],
        *,
        address: str | None = None,
    ) -> None:
        declared = tuple(send_methods)
        missing = [name for name in declared if name not in correlations]
        extra = [name for name in correlations if name not in declared]
        if missing or extra:
            raise DataswapConfigError(
                f"{contract_name}: correlation table out of sync with send methods (missing={missing}, unknown={extra})"
            )
        self._contract_name = contract_name
        self._table: dict[str, CorrelationExtractor] = {name: correlations[name] for name in declared}
        self._address = address.lower() if address else None

    @property
    def methods(self) -> tuple[str, ...]:
        return tuple(self._table)

    def decode(self, message: RawMessage | Mapping[str, Any]) -> Result[ProtocolEvent]:
        """Decode *message* or return an error result; never a partial event."""
        if not isinstance(message, RawMessage):
            try:
                message = RawMessage.model_validate(message)
            except ValidationError as exc:
                return Result.failure(DataswapDecodeError(f"{self._contract_name}: malformed message: {exc}"))

        if self._address and message.to_address and message.to_address.lower() != self._address:
            return Result.failure(
                DataswapUnsupportedMethodError(
                    f"{self._contract_name}: message to {message.to_address} is not for this contract",
                    method=message.method,
                    contract=self._contract_name,
                )
            )

        extract = self._table.get(message.method)
        if extract is None:
            _logger.debug("%s: skipping unsupported method %r", self._contract_name, message.method)
            return Result.failure(
                DataswapUnsupportedMethodError(
                    f"{self._contract_name}: method {message.method!r} is not supported",
                    method=message.method,
                    contract=self._contract_name,
                )
            )

        params = dict(message.params)
        event = ProtocolEvent(
            method=message.method,
            params=params,
            contract=self._contract_name,
            cid=message.cid,
            from_address=message.from_address,
            to_address=message.to_address,
            height=message.height,
            **extract(params),
        )
        return Result.success(event)
