"""Typed facades over the Dataswap protocol contracts."""

from dataswap_sync.contracts._base import ContractFacade, decoded_result
from dataswap_sync.contracts.dataset_proof import DatasetProofContract
from dataswap_sync.contracts.dataset_requirement import DatasetRequirementContract
from dataswap_sync.contracts.escrow import EscrowContract
from dataswap_sync.contracts.matching_target import MatchingTargetContract

__all__ = [
    "ContractFacade",
    "DatasetProofContract",
    "DatasetRequirementContract",
    "EscrowContract",
    "MatchingTargetContract",
    "decoded_result",
]
