"""Chain RPC boundary.

The physical transport (JSON-RPC client, ABI codec, signer) lives outside
this package.  Facades only depend on the structural interface below.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from dataswap_sync.models.transaction import TransactionOptions


class ChainTransport(Protocol):
    """Structural chain interface used by the method dispatcher.

    Implementations raise :class:`dataswap_sync.exceptions.DataswapTransportError`
    or any client error (revert, network, timeout) on failure; the
    dispatcher turns every exception into an error result.
    """

    async def call(self, address: str, method: str, args: Sequence[Any]) -> Any:
        ...

    async def send(
        self,
        address: str,
        method: str,
        args: Sequence[Any],
        options: TransactionOptions,
    ) -> Any:
        ...
