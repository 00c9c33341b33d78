"""Runtime configuration for dataswap_sync."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from dataswap_sync.exceptions import DataswapConfigError

DEFAULT_PROOF_PAGE_SIZE = 100


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class SyncConfig:
    """Synchronization layer configuration.

    Parameters
    ----------
    escrow_address : str
        Deployed Escrow contract address.
    dataset_requirement_address : str
        Deployed DatasetRequirement contract address.
    dataset_proof_address : str
        Deployed DatasetProof contract address.
    matching_target_address : str
        Deployed MatchingTarget contract address.
    proof_page_size : int
        Number of proof hashes requested per ``getDatasetProof`` call.
    car_collection : str
        Store collection name for :class:`~dataswap_sync.models.car.Car` records.
    car_replica_collection : str
        Store collection name for car replica records.
    strict_target_address : bool
        Reject decoded messages whose ``to`` address differs from the
        contract the decoder is bound to.
    """

    escrow_address: str = ""
    dataset_requirement_address: str = ""
    dataset_proof_address: str = ""
    matching_target_address: str = ""
    proof_page_size: int = DEFAULT_PROOF_PAGE_SIZE
    car_collection: str = "Car"
    car_replica_collection: str = "CarReplica"
    strict_target_address: bool = True

    def __post_init__(self) -> None:
        if self.proof_page_size <= 0:
            raise DataswapConfigError(f"proof_page_size must be positive, got {self.proof_page_size}")
        if not self.car_collection or not self.car_replica_collection:
            raise DataswapConfigError("store collection names must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> SyncConfig:
        """Create configuration from ``DATASWAP_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "DATASWAP_ESCROW_ADDRESS": "escrow_address",
            "DATASWAP_DATASET_REQUIREMENT_ADDRESS": "dataset_requirement_address",
            "DATASWAP_DATASET_PROOF_ADDRESS": "dataset_proof_address",
            "DATASWAP_MATCHING_TARGET_ADDRESS": "matching_target_address",
            "DATASWAP_CAR_COLLECTION": "car_collection",
            "DATASWAP_CAR_REPLICA_COLLECTION": "car_replica_collection",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        page_env = env.get("DATASWAP_PROOF_PAGE_SIZE")
        if page_env is not None and "proof_page_size" not in overrides:
            try:
                config_kwargs["proof_page_size"] = int(page_env)
            except ValueError as exc:
                raise DataswapConfigError(f"DATASWAP_PROOF_PAGE_SIZE is not an integer: {page_env!r}") from exc

        if "strict_target_address" not in overrides:
            config_kwargs["strict_target_address"] = _env_bool(env.get("DATASWAP_STRICT_TARGET_ADDRESS"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
