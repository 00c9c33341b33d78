"""Entity conversion: protocol aggregates to store records.

Pure functions.  The same input always yields equal records, which is what
makes repeated reconciliation idempotent.
"""

from __future__ import annotations

from collections.abc import Sequence

from dataswap_sync.models.car import Car, CarReplica
from dataswap_sync.models.dataset import DatasetProofs
from dataswap_sync.models.enums import CarReplicaState, DataType
from dataswap_sync.models.matching import MatchingTarget


def proof_data_to_cars(
    dataset_id: int,
    data_type: DataType,
    hashes: Sequence[str],
    sizes: Sequence[int] | None = None,
    *,
    car_ids: Sequence[int] | None = None,
    replicas_count: int | None = None,
) -> list[Car]:
    """Build one :class:`Car` per proof hash, in input order.

    ``sizes`` and ``car_ids``, when given, must align with ``hashes``.
    ``replicas_count`` is the dataset's required replica count and is
    copied onto every car.
    """
    if sizes and len(sizes) != len(hashes):
        raise ValueError(f"sizes ({len(sizes)}) must align with hashes ({len(hashes)})")
    if car_ids and len(car_ids) != len(hashes):
        raise ValueError(f"car_ids ({len(car_ids)}) must align with hashes ({len(hashes)})")
    return [
        Car(
            hash=car_hash,
            dataset_id=dataset_id,
            data_type=data_type,
            size=sizes[i] if sizes else None,
            car_id=car_ids[i] if car_ids else None,
            replicas_count=replicas_count,
        )
        for i, car_hash in enumerate(hashes)
    ]


def dataset_proofs_to_cars(
    proofs: DatasetProofs,
    *,
    car_ids: Sequence[int] | None = None,
    replicas_count: int | None = None,
) -> list[Car]:
    return proof_data_to_cars(
        proofs.dataset_id,
        proofs.data_type,
        proofs.hashes,
        proofs.sizes,
        car_ids=car_ids,
        replicas_count=replicas_count,
    )


def matching_target_to_car_replicas(
    target: MatchingTarget,
    state: CarReplicaState = CarReplicaState.MATCHED,
) -> list[CarReplica]:
    """Build one :class:`CarReplica` per car referenced by *target*."""
    if target.matching_id is None:
        raise ValueError("matching target has no matching_id; fetch it through MatchingTargetContract")
    return [CarReplica(car_id=car_id, matching_id=target.matching_id, state=state) for car_id in target.cars]
