"""MatchingTarget contract facade.

Call methods:
  - getMatchingTarget, isMatchingContainsCar, isMatchingContainsCars,
    isMatchingTargetValid, isMatchingTargetMeetsFilPlusRequirements
Send methods:
  - initDependencies, createTarget, publishMatching
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dataswap_sync.contracts._base import ContractFacade, as_bool, decoded_result
from dataswap_sync.messages.decoder import dataset_and_matching_correlation, no_correlation
from dataswap_sync.models.enums import DataType
from dataswap_sync.models.matching import MatchingTarget
from dataswap_sync.models.transaction import TransactionOptions
from dataswap_sync.result import Result


def _decode_target(data: Any, *args: Any, **kwargs: Any) -> MatchingTarget:
    """Rebuild the target and inject the matching id the chain omits."""
    matching_id = args[0] if args else kwargs["matching_id"]
    target = MatchingTarget.model_validate(data)
    return target.model_copy(update={"matching_id": matching_id})


class MatchingTargetContract(ContractFacade):
    """Targets (the cars a matching distributes) and their publication."""

    CONTRACT_NAME = "MatchingTarget"
    CALL_METHODS = (
        "getMatchingTarget",
        "isMatchingContainsCar",
        "isMatchingContainsCars",
        "isMatchingTargetValid",
        "isMatchingTargetMeetsFilPlusRequirements",
    )
    SEND_METHODS = ("initDependencies", "createTarget", "publishMatching")
    CORRELATIONS = {
        "initDependencies": no_correlation,
        "createTarget": dataset_and_matching_correlation(),
        "publishMatching": dataset_and_matching_correlation(),
    }

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    @decoded_result(_decode_target)
    async def get_matching_target(self, matching_id: int) -> Result[Any]:
        """Target of *matching_id*, with ``matching_id`` filled in."""
        return await self._invoke("getMatchingTarget", matching_id)

    @decoded_result(as_bool)
    async def is_matching_contains_car(self, matching_id: int, car_id: int) -> Result[Any]:
        return await self._invoke("isMatchingContainsCar", matching_id, car_id)

    @decoded_result(as_bool)
    async def is_matching_contains_cars(self, matching_id: int, car_ids: Sequence[int]) -> Result[Any]:
        return await self._invoke("isMatchingContainsCars", matching_id, list(car_ids))

    @decoded_result(as_bool)
    async def is_matching_target_valid(
        self,
        dataset_id: int,
        cars: Sequence[int],
        size: int,
        data_type: DataType,
        associated_mapping_files_matching_id: int,
    ) -> Result[Any]:
        return await self._invoke(
            "isMatchingTargetValid",
            dataset_id,
            list(cars),
            size,
            int(data_type),
            associated_mapping_files_matching_id,
        )

    @decoded_result(as_bool)
    async def is_matching_target_meets_fil_plus_requirements(self, matching_id: int, candidate: str) -> Result[Any]:
        return await self._invoke("isMatchingTargetMeetsFilPlusRequirements", matching_id, candidate)

    # ------------------------------------------------------------------
    # Sends
    # ------------------------------------------------------------------

    async def init_dependencies(
        self,
        matchings: str,
        matchings_bids: str,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Wire the Matchings and MatchingsBids contract addresses."""
        return await self._invoke("initDependencies", matchings, matchings_bids, options=options)

    async def create_target(
        self,
        matching_id: int,
        dataset_id: int,
        data_type: DataType,
        associated_mapping_files_matching_id: int,
        replica_index: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke(
            "createTarget",
            matching_id,
            dataset_id,
            int(data_type),
            associated_mapping_files_matching_id,
            replica_index,
            options=options,
        )

    async def publish_matching(
        self,
        matching_id: int,
        dataset_id: int,
        cars_starts: Sequence[int],
        cars_ends: Sequence[int],
        complete: bool,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Publish car ranges ``[start, end]`` into the matching target."""
        if len(cars_starts) != len(cars_ends):
            raise ValueError(f"cars_starts ({len(cars_starts)}) and cars_ends ({len(cars_ends)}) must align")
        return await self._invoke(
            "publishMatching",
            matching_id,
            dataset_id,
            list(cars_starts),
            list(cars_ends),
            complete,
            options=options,
        )
