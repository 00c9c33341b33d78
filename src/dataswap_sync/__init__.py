"""dataswap_sync - read-model synchronization for the Dataswap protocol."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dataswap-sync")
except PackageNotFoundError:
    __version__ = "0+local"
from dataswap_sync._dispatch import ContractMethodSpec, InvocationKind, MethodDispatcher
from dataswap_sync.config import SyncConfig
from dataswap_sync.contracts import (
    ContractFacade,
    DatasetProofContract,
    DatasetRequirementContract,
    EscrowContract,
    MatchingTargetContract,
)
from dataswap_sync.exceptions import (
    DataswapConfigError,
    DataswapDecodeError,
    DataswapError,
    DataswapInvalidOptionsError,
    DataswapReconciliationError,
    DataswapTransportError,
    DataswapUnsupportedMethodError,
)
from dataswap_sync.ingestion.convert import (
    dataset_proofs_to_cars,
    matching_target_to_car_replicas,
    proof_data_to_cars,
)
from dataswap_sync.messages import MessageDecoder
from dataswap_sync.models import (
    Car,
    CarReplica,
    CarReplicaState,
    DatasetProofs,
    DatasetRequirement,
    DataType,
    EscrowType,
    Fund,
    MatchingTarget,
    ProtocolEvent,
    RawMessage,
    TransactionOptions,
)
from dataswap_sync.result import Result
from dataswap_sync.store import CarReplicaStore, CarStore, InMemoryBackend
from dataswap_sync.sync import DataswapSync

__all__ = [
    "__version__",
    "Car",
    "CarReplica",
    "CarReplicaState",
    "CarReplicaStore",
    "CarStore",
    "ContractFacade",
    "ContractMethodSpec",
    "DataType",
    "DatasetProofContract",
    "DatasetProofs",
    "DatasetRequirement",
    "DatasetRequirementContract",
    "DataswapConfigError",
    "DataswapDecodeError",
    "DataswapError",
    "DataswapInvalidOptionsError",
    "DataswapReconciliationError",
    "DataswapSync",
    "DataswapTransportError",
    "DataswapUnsupportedMethodError",
    "EscrowContract",
    "EscrowType",
    "Fund",
    "InMemoryBackend",
    "InvocationKind",
    "MatchingTarget",
    "MatchingTargetContract",
    "MessageDecoder",
    "MethodDispatcher",
    "ProtocolEvent",
    "RawMessage",
    "Result",
    "SyncConfig",
    "TransactionOptions",
    "dataset_proofs_to_cars",
    "matching_target_to_car_replicas",
    "proof_data_to_cars",
]
