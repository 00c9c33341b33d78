"""Fetch protocol aggregates through the contract facades."""

from __future__ import annotations

import logging

from dataswap_sync.config import DEFAULT_PROOF_PAGE_SIZE
from dataswap_sync.contracts.dataset_proof import DatasetProofContract
from dataswap_sync.contracts.matching_target import MatchingTargetContract
from dataswap_sync.models.dataset import DatasetProofs
from dataswap_sync.models.enums import DataType
from dataswap_sync.models.matching import MatchingTarget
from dataswap_sync.result import Result

_logger = logging.getLogger(__name__)


async def fetch_dataset_proofs(
    contract: DatasetProofContract,
    dataset_id: int,
    data_type: DataType,
    *,
    page_size: int = DEFAULT_PROOF_PAGE_SIZE,
) -> Result[DatasetProofs]:
    """Read every proof leaf of a dataset.

    Pages are requested one after another; the first failing call is
    returned unchanged and nothing partial is handed back.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    count_res = await contract.get_dataset_proof_count(dataset_id, data_type)
    if not count_res.ok:
        return Result.failure(count_res.error)  # type: ignore[arg-type]
    total: int = count_res.data  # type: ignore[assignment]

    hashes: list[str] = []
    for index in range(0, total, page_size):
        length = min(page_size, total - index)
        page = await contract.get_dataset_proof(dataset_id, data_type, index, length)
        if not page.ok:
            return Result.failure(page.error)  # type: ignore[arg-type]
        hashes.extend(page.data or [])

    _logger.debug(
        "Fetched dataset proofs dataset_id=%d data_type=%d count=%d",
        dataset_id,
        int(data_type),
        len(hashes),
    )
    return Result.success(DatasetProofs(dataset_id=dataset_id, data_type=data_type, hashes=hashes))


async def fetch_matching_target(contract: MatchingTargetContract, matching_id: int) -> Result[MatchingTarget]:
    res = await contract.get_matching_target(matching_id)
    if res.ok:
        _logger.debug("Fetched matching target matching_id=%d cars=%d", matching_id, len(res.data.cars))  # type: ignore[union-attr]
    return res
