from __future__ import annotations

import pytest

from dataswap_sync.ingestion.normalize import int_list, require_int, safe_int


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (7, 7),
        ("42", 42),
        (" 0x2a ", 42),
        ("123n", 123),
        (b"9", 9),
        (b"\xff\xfe", None),
        (3.9, 3),
        ("1e3", 1000),
        ("--", None),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        (float("nan"), None),
    ],
)
def test_safe_int(value: object, expected: int | None) -> None:
    assert safe_int(value) == expected


def test_safe_int_keeps_uint256_precision() -> None:
    big = 2**256 - 1

    assert safe_int(str(big)) == big
    assert safe_int(hex(big)) == big


def test_int_list() -> None:
    assert int_list(["1", 2, "0x3"]) == [1, 2, 3]
    assert int_list(None) == []


@pytest.mark.parametrize("value", [["1", "x", 2], [101, None], "123", b"12"])
def test_int_list_rejects_unparseable_entries(value: object) -> None:
    with pytest.raises(ValueError):
        int_list(value)


def test_require_int() -> None:
    assert require_int("0x10") == 16
    assert require_int(None) == 0
    assert require_int(None, default=-1) == -1
    with pytest.raises(ValueError):
        require_int("bad")
