"""DatasetRequirement contract facade.

Call methods:
  - getDatasetReplicasCount, getDatasetReplicaRequirement,
    getDatasetPreCollateralRequirements
Send methods:
  - submitDatasetReplicaRequirements
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dataswap_sync.contracts._base import ContractFacade, as_int, decoded_result
from dataswap_sync.messages.decoder import dataset_correlation
from dataswap_sync.models.dataset import DatasetRequirement
from dataswap_sync.models.transaction import TransactionOptions
from dataswap_sync.result import Result


def _decode_requirement(data: Any, *_args: Any, **_kwargs: Any) -> DatasetRequirement:
    return DatasetRequirement.model_validate(data)


class DatasetRequirementContract(ContractFacade):
    """Replica requirements attached to a dataset."""

    CONTRACT_NAME = "DatasetRequirement"
    CALL_METHODS = (
        "getDatasetReplicasCount",
        "getDatasetReplicaRequirement",
        "getDatasetPreCollateralRequirements",
    )
    SEND_METHODS = ("submitDatasetReplicaRequirements",)
    CORRELATIONS = {"submitDatasetReplicaRequirements": dataset_correlation()}

    @decoded_result(as_int)
    async def get_dataset_replicas_count(self, dataset_id: int) -> Result[Any]:
        return await self._invoke("getDatasetReplicasCount", dataset_id)

    @decoded_result(_decode_requirement)
    async def get_dataset_replica_requirement(self, dataset_id: int, index: int) -> Result[Any]:
        """Requirement of replica *index* (0-based) of the dataset."""
        return await self._invoke("getDatasetReplicaRequirement", dataset_id, index)

    @decoded_result(as_int)
    async def get_dataset_pre_collateral_requirements(self, dataset_id: int) -> Result[Any]:
        return await self._invoke("getDatasetPreCollateralRequirements", dataset_id)

    async def submit_dataset_replica_requirements(
        self,
        dataset_id: int,
        data_preparers: Sequence[Sequence[str]],
        storage_providers: Sequence[Sequence[str]],
        regions: Sequence[int],
        countrys: Sequence[int],
        citys: Sequence[Sequence[int]],
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Submit one requirement per replica; all sequences are per-replica aligned."""
        return await self._invoke(
            "submitDatasetReplicaRequirements",
            dataset_id,
            [list(item) for item in data_preparers],
            [list(item) for item in storage_providers],
            list(regions),
            list(countrys),
            [list(item) for item in citys],
            options=options,
        )
