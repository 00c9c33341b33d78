"""Data models for Dataswap protocol values and store records."""

from dataswap_sync.models._base import DataswapBaseModel, DataswapEnum
from dataswap_sync.models.car import Car, CarReplica, unique_index
from dataswap_sync.models.dataset import DatasetProofs, DatasetRequirement
from dataswap_sync.models.enums import CarReplicaState, DataType, EscrowType
from dataswap_sync.models.escrow import Fund
from dataswap_sync.models.matching import MatchingTarget
from dataswap_sync.models.message import ProtocolEvent, RawMessage
from dataswap_sync.models.transaction import TransactionOptions, coerce_transaction_options, is_transaction_options

__all__ = [
    "Car",
    "CarReplica",
    "CarReplicaState",
    "DataType",
    "DatasetProofs",
    "DatasetRequirement",
    "DataswapBaseModel",
    "DataswapEnum",
    "EscrowType",
    "Fund",
    "MatchingTarget",
    "ProtocolEvent",
    "RawMessage",
    "TransactionOptions",
    "coerce_transaction_options",
    "is_transaction_options",
    "unique_index",
]
