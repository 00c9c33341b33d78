"""Tests for pydantic model parsing with DataswapBaseModel + DataswapEnum."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

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
    coerce_transaction_options,
    is_transaction_options,
    unique_index,
)

_SENDER = "0x" + "12" * 20

# ------------------------------------------------------------------
# DataswapEnum
# ------------------------------------------------------------------


class TestDataswapEnum:
    def test_unknown_value_falls_back(self) -> None:
        assert EscrowType(99) == EscrowType.UNKNOWN
        assert DataType(7) == DataType.UNKNOWN

    def test_known_values(self) -> None:
        assert DataType(1) == DataType.MAPPING_FILES
        assert EscrowType(0) == EscrowType.DATACAP_COLLATERAL
        assert CarReplicaState(2) == CarReplicaState.STORED

    def test_all_enums_have_unknown(self) -> None:
        for cls in (DataType, EscrowType, CarReplicaState):
            assert cls.UNKNOWN == -1


# ------------------------------------------------------------------
# Positional struct mapping
# ------------------------------------------------------------------


class TestPositionalStructs:
    def test_fund_from_tuple(self) -> None:
        fund = Fund.model_validate((10, "4", "0x3", 3))

        assert fund.available == 4
        assert fund.lock == 3
        assert fund.collateral == 3
        assert fund.raw == (10, "4", "0x3", 3)

    def test_fund_from_camel_case_mapping(self) -> None:
        fund = Fund.model_validate({"available": "5", "collateral": 1, "lock": 0})

        assert fund.total == 6

    def test_fund_keeps_uint256_precision(self) -> None:
        amount = 2**255 + 1
        fund = Fund.model_validate({"available": str(amount)})

        assert fund.available == amount

    def test_fund_rejects_negative(self) -> None:
        with pytest.raises(ValidationError):
            Fund.model_validate({"available": -1})

    def test_requirement_from_tuple(self) -> None:
        requirement = DatasetRequirement.model_validate((["f01"], ["f02", "f03"], "1", 86, ["1", "2"]))

        assert requirement.data_preparers == ["f01"]
        assert requirement.storage_providers == ["f02", "f03"]
        assert requirement.region_code == 1
        assert requirement.country_code == 86
        assert requirement.city_codes == [1, 2]

    def test_matching_target_from_tuple(self) -> None:
        target = MatchingTarget.model_validate((9, ["101", 102], 2048, 0, 0, 1))

        assert target.matching_id is None
        assert target.dataset_id == 9
        assert target.cars == [101, 102]
        assert target.size == 2048
        assert target.data_type == DataType.SOURCE
        assert target.replica_index == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"matchingId": 3, "cars": [101, "bad", 102]},
            {"matchingId": 3, "cars": [101, None]},
            {"matchingId": "x", "cars": [101]},
            {"datasetId": "nine"},
            {"dataType": "source"},
        ],
    )
    def test_matching_target_rejects_malformed_ids(self, payload: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            MatchingTarget.model_validate(payload)

    def test_requirement_rejects_malformed_codes(self) -> None:
        with pytest.raises(ValidationError):
            DatasetRequirement.model_validate(([], [], "north", 86, []))
        with pytest.raises(ValidationError):
            DatasetRequirement.model_validate(([], [], 1, 86, ["755", "?"]))

    def test_raw_is_excluded_from_equality_and_dump(self) -> None:
        a = Fund.model_validate((10, 4, 3, 3))
        b = Fund(available=4, lock=3, collateral=3)

        assert a == b
        assert hash(a) == hash(b)
        assert "raw" not in a.model_dump()


# ------------------------------------------------------------------
# Dataset proofs and store records
# ------------------------------------------------------------------


class TestRecords:
    def test_proofs_sizes_must_align(self) -> None:
        with pytest.raises(ValidationError):
            DatasetProofs(dataset_id=1, data_type=DataType.SOURCE, hashes=["a", "b"], sizes=[1])

    def test_proofs_without_sizes(self) -> None:
        proofs = DatasetProofs(dataset_id=1, data_type=DataType.SOURCE, hashes=["a", "b"])

        assert proofs.sizes == []

    def test_car_requires_hash(self) -> None:
        with pytest.raises(ValidationError):
            Car(hash="  ", dataset_id=1, data_type=DataType.SOURCE)

    def test_car_enrichment_is_optional_and_outside_the_index(self) -> None:
        plain = Car(hash="bafy1", dataset_id=9, data_type=DataType.SOURCE)
        enriched = Car(hash="bafy1", dataset_id=9, data_type=DataType.SOURCE, car_id="0x65", replicas_count="3")

        assert plain.car_id is None
        assert (enriched.car_id, enriched.replicas_count) == (101, 3)
        assert unique_index(plain) == unique_index(enriched)

    def test_car_rejects_malformed_car_id(self) -> None:
        with pytest.raises(ValidationError):
            Car(hash="bafy1", dataset_id=9, data_type=DataType.SOURCE, car_id="car-1")

    def test_unique_index_uses_wire_values(self) -> None:
        car = Car(hash="bafy1", dataset_id=9, data_type=DataType.MAPPING_FILES, size=10)
        replica = CarReplica(car_id=101, matching_id=3)

        assert unique_index(car) == ("bafy1", 9, 1)
        assert unique_index(replica) == (101, 3)
        assert replica.state == CarReplicaState.MATCHED

    def test_unique_index_requires_declaration(self) -> None:
        with pytest.raises(TypeError):
            unique_index(Fund())

    def test_records_are_frozen(self) -> None:
        car = Car(hash="bafy1", dataset_id=9, data_type=DataType.SOURCE)

        with pytest.raises(ValidationError):
            car.dataset_id = 10  # type: ignore[misc]


# ------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------


class TestMessages:
    def test_raw_message_envelope_aliases(self) -> None:
        message = RawMessage.model_validate(
            {"method": " collateral ", "params": None, "from": "f1sender", "to": "f410target", "height": "12"}
        )

        assert message.method == "collateral"
        assert message.params == {}
        assert message.from_address == "f1sender"
        assert message.to_address == "f410target"
        assert message.height == 12

    def test_protocol_event_defaults(self) -> None:
        event = ProtocolEvent(method="withdraw")

        assert event.dataset_id is None
        assert event.matching_id is None
        assert event.params == {}


# ------------------------------------------------------------------
# TransactionOptions
# ------------------------------------------------------------------


class TestTransactionOptions:
    def test_aliases_and_rpc_dump(self) -> None:
        options = TransactionOptions.model_validate(
            {"from": _SENDER, "gasLimit": "0x5208", "maxFeePerGas": 30, "maxPriorityFeePerGas": 2}
        )

        assert options.gas == 21000
        assert options.to_rpc() == {
            "from": _SENDER,
            "value": 0,
            "gas": 21000,
            "maxFeePerGas": 30,
            "maxPriorityFeePerGas": 2,
        }

    def test_filecoin_sender_accepted(self) -> None:
        assert coerce_transaction_options({"from": "t410fabcdef"}).from_address == "t410fabcdef"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"from": "0x1234"},
            {"from": _SENDER, "gas": 0},
            {"from": _SENDER, "value": -1},
            {"from": _SENDER, "gasPrice": 1, "maxPriorityFeePerGas": 1},
            {"from": _SENDER, "maxFeePerGas": 1, "maxPriorityFeePerGas": 2},
            {"from": _SENDER, "to": _SENDER},
        ],
    )
    def test_invalid_options(self, payload: dict[str, object]) -> None:
        assert not is_transaction_options(payload)
        with pytest.raises(ValidationError):
            coerce_transaction_options(payload)

    def test_non_mapping_rejected(self) -> None:
        assert not is_transaction_options([("from", _SENDER)])
        with pytest.raises(TypeError):
            coerce_transaction_options("0x" + "12" * 20)

    def test_instance_passes_through(self) -> None:
        options = TransactionOptions(from_address=_SENDER)

        assert coerce_transaction_options(options) is options
