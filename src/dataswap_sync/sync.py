"""High-level entry point wiring facades, converters and stores together."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from dataswap_sync._transport import ChainTransport
from dataswap_sync.config import SyncConfig
from dataswap_sync.contracts._base import ContractFacade
from dataswap_sync.contracts.dataset_proof import DatasetProofContract
from dataswap_sync.contracts.dataset_requirement import DatasetRequirementContract
from dataswap_sync.contracts.escrow import EscrowContract
from dataswap_sync.contracts.matching_target import MatchingTargetContract
from dataswap_sync.exceptions import DataswapDecodeError, DataswapUnsupportedMethodError
from dataswap_sync.ingestion.fetch import fetch_dataset_proofs, fetch_matching_target
from dataswap_sync.models.car import Car, CarReplica
from dataswap_sync.models.enums import DataType
from dataswap_sync.models.message import ProtocolEvent, RawMessage
from dataswap_sync.result import Result
from dataswap_sync.store.backend import DocumentBackend
from dataswap_sync.store.reconcile import CarReplicaStore, CarStore, reconcile_concurrently

_logger = logging.getLogger(__name__)


class DataswapSync:
    """Read-model synchronization over one Dataswap deployment.

    Usage::

        sync = DataswapSync(SyncConfig.from_env(), transport, backend)
        res = await sync.sync_dataset_cars(9, DataType.SOURCE)
        if not res.ok:
            log.error("car sync failed: %s", res.error)
    """

    def __init__(
        self,
        config: SyncConfig,
        transport: ChainTransport,
        backend: DocumentBackend,
    ) -> None:
        self._config = config
        strict = config.strict_target_address
        self.escrow = EscrowContract(transport, config.escrow_address, strict_target_address=strict)
        self.dataset_requirement = DatasetRequirementContract(
            transport,
            config.dataset_requirement_address,
            strict_target_address=strict,
        )
        self.dataset_proof = DatasetProofContract(transport, config.dataset_proof_address, strict_target_address=strict)
        self.matching_target = MatchingTargetContract(
            transport,
            config.matching_target_address,
            strict_target_address=strict,
        )
        self.cars = CarStore(backend, config.car_collection)
        self.car_replicas = CarReplicaStore(backend, config.car_replica_collection)

    @property
    def contracts(self) -> tuple[ContractFacade, ...]:
        return (self.escrow, self.dataset_requirement, self.dataset_proof, self.matching_target)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def decode_message(self, message: RawMessage | Mapping[str, Any]) -> Result[ProtocolEvent]:
        """Classify *message* against the contract it was sent to.

        Messages carrying a ``to`` address are routed by address.  Without
        one, the first contract recognizing the method wins; method names
        are unique across the four contracts.
        """
        if not isinstance(message, RawMessage):
            try:
                message = RawMessage.model_validate(message)
            except ValidationError as exc:
                return Result.failure(DataswapDecodeError(f"malformed message: {exc}"))

        candidates = self.contracts
        if message.to_address:
            target = message.to_address.lower()
            candidates = tuple(c for c in self.contracts if c.address and c.address.lower() == target)

        for contract in candidates:
            if message.method in contract.decoder.methods:
                return contract.decode_message(message)

        return Result.failure(
            DataswapUnsupportedMethodError(
                f"no Dataswap contract handles method {message.method!r}",
                method=message.method,
            )
        )

    # ------------------------------------------------------------------
    # Reconciliation
    # ------------------------------------------------------------------

    async def sync_dataset_cars(
        self,
        dataset_id: int,
        data_type: DataType,
        *,
        car_ids: Sequence[int] | None = None,
    ) -> Result[list[Car]]:
        """Fetch the dataset's proof and reconcile one car per proof leaf.

        Each car carries the dataset's required replica count.  ``car_ids``,
        when known, must align with the proof hashes.
        """
        replicas = await self.dataset_requirement.get_dataset_replicas_count(dataset_id)
        if not replicas.ok:
            return Result.failure(replicas.error)  # type: ignore[arg-type]
        proofs = await fetch_dataset_proofs(
            self.dataset_proof,
            dataset_id,
            data_type,
            page_size=self._config.proof_page_size,
        )
        if not proofs.ok:
            return Result.failure(proofs.error)  # type: ignore[arg-type]
        return await self.cars.store_cars(
            proofs.data,  # type: ignore[arg-type]
            car_ids=car_ids,
            replicas_count=replicas.data,
        )

    async def sync_matching_replicas(self, matching_id: int) -> Result[list[CarReplica]]:
        """Fetch the matching target and reconcile one replica per car."""
        target = await fetch_matching_target(self.matching_target, matching_id)
        if not target.ok:
            return Result.failure(target.error)  # type: ignore[arg-type]
        return await self.car_replicas.store_car_replicas(target.data)  # type: ignore[arg-type]

    async def sync_all(
        self,
        dataset_id: int,
        data_type: DataType,
        matching_id: int,
    ) -> tuple[Result[list[Car]], Result[list[CarReplica]]]:
        """Run the car and replica syncs concurrently; they share no unique index."""
        cars, replicas = await reconcile_concurrently(
            self.sync_dataset_cars(dataset_id, data_type),
            self.sync_matching_replicas(matching_id),
        )
        return cars, replicas
