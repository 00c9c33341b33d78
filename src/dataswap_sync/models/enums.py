"""Protocol enums shared by the contract facades and entity records."""

from __future__ import annotations

from dataswap_sync.models._base import DataswapEnum


class DataType(DataswapEnum):
    """Kind of dataset proof: the source data or its mapping files."""

    UNKNOWN = -1
    SOURCE = 0
    MAPPING_FILES = 1


class EscrowType(DataswapEnum):
    """Escrow account category a fund movement is booked against."""

    UNKNOWN = -1
    DATACAP_COLLATERAL = 0
    DATACAP_CHUNK_LAND_COLLATERAL = 1
    CHALLENGE_COMMISSION = 2
    DATA_PREPARE_FEE_BY_CLIENT = 3
    DATA_PREPARE_FEE_BY_PROVIDER = 4
    PROOF_AUDIT_COLLATERAL = 5
    CHALLENGE_AUDIT_COLLATERAL = 6
    DISPUTE_AUDIT_COLLATERAL = 7


class CarReplicaState(DataswapEnum):
    """Lifecycle state of one car replica inside a matching."""

    UNKNOWN = -1
    NONE = 0
    MATCHED = 1
    STORED = 2
    CORRUPTED = 3
    SLASHED = 4
    EXPIRED = 5
