from __future__ import annotations

import pytest

from dataswap_sync.config import DEFAULT_PROOF_PAGE_SIZE, SyncConfig
from dataswap_sync.exceptions import DataswapConfigError


def test_defaults() -> None:
    config = SyncConfig()

    assert config.proof_page_size == DEFAULT_PROOF_PAGE_SIZE
    assert config.car_collection == "Car"
    assert config.car_replica_collection == "CarReplica"
    assert config.strict_target_address is True


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATASWAP_ESCROW_ADDRESS", " 0xescrow ")
    monkeypatch.setenv("DATASWAP_DATASET_PROOF_ADDRESS", "0xproof")
    monkeypatch.setenv("DATASWAP_PROOF_PAGE_SIZE", "25")
    monkeypatch.setenv("DATASWAP_STRICT_TARGET_ADDRESS", "off")
    monkeypatch.setenv("DATASWAP_CAR_COLLECTION", "cars")

    config = SyncConfig.from_env()

    assert config.escrow_address == "0xescrow"
    assert config.dataset_proof_address == "0xproof"
    assert config.proof_page_size == 25
    assert config.strict_target_address is False
    assert config.car_collection == "cars"


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATASWAP_PROOF_PAGE_SIZE", "not-a-number")
    monkeypatch.setenv("DATASWAP_MATCHING_TARGET_ADDRESS", "0xenv")

    config = SyncConfig.from_env(proof_page_size=10, matching_target_address="0xarg")

    assert config.proof_page_size == 10
    assert config.matching_target_address == "0xarg"


def test_bad_page_size_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATASWAP_PROOF_PAGE_SIZE", "lots")

    with pytest.raises(DataswapConfigError):
        SyncConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"proof_page_size": 0},
        {"proof_page_size": -5},
        {"car_collection": ""},
        {"car_replica_collection": ""},
    ],
)
def test_invalid_config_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(DataswapConfigError):
        SyncConfig(**kwargs)  # type: ignore[arg-type]
