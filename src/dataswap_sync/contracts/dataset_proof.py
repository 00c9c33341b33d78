"""DatasetProof contract facade.

Call methods:
  - getDatasetAppendCollateral, getDatasetProof, getDatasetProofCount,
    getDatasetProofSubmitter, getDatasetSize, getDatasetCollateralRequirement,
    getDatasetDataAuditorFeesRequirement, getDatasetDataAuditorFees,
    isDatasetProofallCompleted, isDatasetContainsCar, isDatasetContainsCars,
    isDatasetProofSubmitter
Send methods:
  - submitDatasetProofRoot, submitDatasetProof, submitDatasetProofCompleted,
    appendDatasetFunds
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dataswap_sync.contracts._base import ContractFacade, as_bool, as_int, as_str_list, decoded_result
from dataswap_sync.messages.decoder import dataset_correlation
from dataswap_sync.models.enums import DataType
from dataswap_sync.models.transaction import TransactionOptions
from dataswap_sync.result import Result

_SEND_METHODS = (
    "submitDatasetProofRoot",
    "submitDatasetProof",
    "submitDatasetProofCompleted",
    "appendDatasetFunds",
)


def _decode_submitter(data: Any, *_args: Any, **_kwargs: Any) -> str:
    text = str(data).strip()
    if not text:
        raise ValueError("empty submitter address")
    return text


class DatasetProofContract(ContractFacade):
    """Proof submission and proof queries for datasets."""

    CONTRACT_NAME = "DatasetProof"
    CALL_METHODS = (
        "getDatasetAppendCollateral",
        "getDatasetProof",
        "getDatasetProofCount",
        "getDatasetProofSubmitter",
        "getDatasetSize",
        "getDatasetCollateralRequirement",
        "getDatasetDataAuditorFeesRequirement",
        "getDatasetDataAuditorFees",
        "isDatasetProofallCompleted",
        "isDatasetContainsCar",
        "isDatasetContainsCars",
        "isDatasetProofSubmitter",
    )
    SEND_METHODS = _SEND_METHODS
    # Every proof-side send concerns exactly one dataset.
    CORRELATIONS = {name: dataset_correlation() for name in _SEND_METHODS}

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    @decoded_result(as_int)
    async def get_dataset_append_collateral(self, dataset_id: int) -> Result[Any]:
        """Collateral still to be appended to the dataset."""
        return await self._invoke("getDatasetAppendCollateral", dataset_id)

    @decoded_result(as_str_list)
    async def get_dataset_proof(self, dataset_id: int, data_type: DataType, index: int, length: int) -> Result[Any]:
        """Leaf hashes ``[index, index + length)`` of the dataset's proof."""
        return await self._invoke("getDatasetProof", dataset_id, int(data_type), index, length)

    @decoded_result(as_int)
    async def get_dataset_proof_count(self, dataset_id: int, data_type: DataType) -> Result[Any]:
        return await self._invoke("getDatasetProofCount", dataset_id, int(data_type))

    @decoded_result(_decode_submitter)
    async def get_dataset_proof_submitter(self, dataset_id: int) -> Result[Any]:
        return await self._invoke("getDatasetProofSubmitter", dataset_id)

    @decoded_result(as_int)
    async def get_dataset_size(self, dataset_id: int, data_type: DataType) -> Result[Any]:
        return await self._invoke("getDatasetSize", dataset_id, int(data_type))

    @decoded_result(as_int)
    async def get_dataset_collateral_requirement(self, dataset_id: int) -> Result[Any]:
        return await self._invoke("getDatasetCollateralRequirement", dataset_id)

    @decoded_result(as_int)
    async def get_dataset_data_auditor_fees_requirement(self, dataset_id: int) -> Result[Any]:
        return await self._invoke("getDatasetDataAuditorFeesRequirement", dataset_id)

    @decoded_result(as_int)
    async def get_dataset_data_auditor_fees(self, dataset_id: int) -> Result[Any]:
        return await self._invoke("getDatasetDataAuditorFees", dataset_id)

    @decoded_result(as_bool)
    async def is_dataset_proof_all_completed(self, dataset_id: int, data_type: DataType) -> Result[Any]:
        return await self._invoke("isDatasetProofallCompleted", dataset_id, int(data_type))

    @decoded_result(as_bool)
    async def is_dataset_contains_car(self, dataset_id: int, car_id: int) -> Result[Any]:
        return await self._invoke("isDatasetContainsCar", dataset_id, car_id)

    @decoded_result(as_bool)
    async def is_dataset_contains_cars(self, dataset_id: int, car_ids: Sequence[int]) -> Result[Any]:
        return await self._invoke("isDatasetContainsCars", dataset_id, list(car_ids))

    @decoded_result(as_bool)
    async def is_dataset_proof_submitter(self, dataset_id: int, submitter: str) -> Result[Any]:
        return await self._invoke("isDatasetProofSubmitter", dataset_id, submitter)

    # ------------------------------------------------------------------
    # Sends
    # ------------------------------------------------------------------

    async def submit_dataset_proof_root(
        self,
        dataset_id: int,
        data_type: DataType,
        mapping_files_access_method: str,
        root_hash: str,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke(
            "submitDatasetProofRoot",
            dataset_id,
            int(data_type),
            mapping_files_access_method,
            root_hash,
            options=options,
        )

    async def submit_dataset_proof(
        self,
        dataset_id: int,
        data_type: DataType,
        leaf_hashes: Sequence[str],
        leaf_index: int,
        leaf_sizes: Sequence[int],
        completed: bool,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Submit one batch of proof leaves starting at *leaf_index*."""
        if len(leaf_hashes) != len(leaf_sizes):
            raise ValueError(f"leaf_hashes ({len(leaf_hashes)}) and leaf_sizes ({len(leaf_sizes)}) must align")
        return await self._invoke(
            "submitDatasetProof",
            dataset_id,
            int(data_type),
            list(leaf_hashes),
            leaf_index,
            list(leaf_sizes),
            completed,
            options=options,
        )

    async def submit_dataset_proof_completed(
        self,
        dataset_id: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke("submitDatasetProofCompleted", dataset_id, options=options)

    async def append_dataset_funds(
        self,
        dataset_id: int,
        datacap_collateral: int,
        data_auditor_fees: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Append datacap collateral and auditor fees to the dataset escrow."""
        return await self._invoke(
            "appendDatasetFunds",
            dataset_id,
            datacap_collateral,
            data_auditor_fees,
            options=options,
        )
