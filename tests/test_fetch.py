from __future__ import annotations

from typing import Any

import pytest

from dataswap_sync.contracts import DatasetProofContract, MatchingTargetContract
from dataswap_sync.exceptions import DataswapTransportError
from dataswap_sync.ingestion.fetch import fetch_dataset_proofs, fetch_matching_target
from dataswap_sync.models import DataType

_ADDRESS = "0x" + "ab" * 20


class _ProofChain:
    """Serves ``count`` proof hashes ``h0..h{count-1}`` page by page."""

    def __init__(self, count: int, fail_on_index: int | None = None) -> None:
        self.count = count
        self.fail_on_index = fail_on_index
        self.pages: list[tuple[int, int]] = []

    async def call(self, _address: str, method: str, args: list[Any]) -> Any:
        if method == "getDatasetProofCount":
            return str(self.count)
        if method == "getDatasetProof":
            _dataset_id, _data_type, index, length = args
            self.pages.append((index, length))
            if index == self.fail_on_index:
                raise ConnectionError("node went away")
            return [f"h{i}" for i in range(index, index + length)]
        if method == "getMatchingTarget":
            return {"datasetId": 9, "cars": [101, 102], "dataType": 0}
        raise AssertionError(method)

    async def send(self, *_args: Any) -> Any:
        raise AssertionError("fetching must not send")


@pytest.mark.asyncio
async def test_fetch_dataset_proofs_pages_through_all_leaves() -> None:
    chain = _ProofChain(count=7)

    res = await fetch_dataset_proofs(DatasetProofContract(chain, _ADDRESS), 9, DataType.SOURCE, page_size=3)

    assert res.ok
    assert res.data.hashes == [f"h{i}" for i in range(7)]
    assert res.data.dataset_id == 9
    assert res.data.data_type == DataType.SOURCE
    assert chain.pages == [(0, 3), (3, 3), (6, 1)]


@pytest.mark.asyncio
async def test_fetch_dataset_proofs_with_no_leaves() -> None:
    chain = _ProofChain(count=0)

    res = await fetch_dataset_proofs(DatasetProofContract(chain, _ADDRESS), 9, DataType.SOURCE)

    assert res.ok
    assert res.data.hashes == []
    assert chain.pages == []


@pytest.mark.asyncio
async def test_fetch_dataset_proofs_stops_on_first_failed_page() -> None:
    chain = _ProofChain(count=10, fail_on_index=4)

    res = await fetch_dataset_proofs(DatasetProofContract(chain, _ADDRESS), 9, DataType.SOURCE, page_size=2)

    assert not res.ok
    assert isinstance(res.error, DataswapTransportError)
    assert chain.pages == [(0, 2), (2, 2), (4, 2)]


@pytest.mark.asyncio
async def test_fetch_dataset_proofs_rejects_bad_page_size() -> None:
    with pytest.raises(ValueError):
        await fetch_dataset_proofs(DatasetProofContract(_ProofChain(1), _ADDRESS), 9, DataType.SOURCE, page_size=0)


@pytest.mark.asyncio
async def test_fetch_matching_target() -> None:
    res = await fetch_matching_target(MatchingTargetContract(_ProofChain(0), _ADDRESS), 3)

    assert res.ok
    assert res.data.matching_id == 3
    assert res.data.cars == [101, 102]
