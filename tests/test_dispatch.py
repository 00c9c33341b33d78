from __future__ import annotations

from typing import Any

import pytest

from dataswap_sync._dispatch import InvocationKind, MethodDispatcher, build_method_table
from dataswap_sync.exceptions import (
    DataswapConfigError,
    DataswapInvalidOptionsError,
    DataswapTransportError,
    DataswapUnsupportedMethodError,
)
from dataswap_sync.models.transaction import TransactionOptions

_ADDRESS = "0x" + "ab" * 20
_SENDER = "0x" + "12" * 20


class _FakeTransport:
    def __init__(self, result: Any = None, error: BaseException | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, list[Any]]] = []
        self.sends: list[tuple[str, str, list[Any], TransactionOptions]] = []

    async def call(self, address: str, method: str, args: list[Any]) -> Any:
        self.calls.append((address, method, args))
        if self.error is not None:
            raise self.error
        return self.result

    async def send(self, address: str, method: str, args: list[Any], options: TransactionOptions) -> Any:
        self.sends.append((address, method, args, options))
        if self.error is not None:
            raise self.error
        return self.result


def _dispatcher(transport: _FakeTransport) -> MethodDispatcher:
    return MethodDispatcher(
        transport,
        _ADDRESS,
        call_methods=("getA", "getB"),
        send_methods=("setA",),
        contract_name="Demo",
    )


def test_method_table_keeps_registration_order() -> None:
    table = build_method_table(("getA", "getB"), ("setA",))

    assert list(table) == ["getA", "getB", "setA"]
    assert table["setA"].kind == InvocationKind.SEND


@pytest.mark.parametrize(
    ("calls", "sends"),
    [
        (("getA",), ("getA",)),
        (("getA", "getA"), ()),
        ((), ("setA", "setA")),
        (("",), ()),
        (("  ",), ("setA",)),
    ],
)
def test_inconsistent_method_lists_rejected(calls: tuple[str, ...], sends: tuple[str, ...]) -> None:
    with pytest.raises(DataswapConfigError):
        MethodDispatcher(_FakeTransport(), _ADDRESS, call_methods=calls, send_methods=sends)


def test_kind_lookup() -> None:
    dispatcher = _dispatcher(_FakeTransport())

    assert dispatcher.kind_of("getB") == InvocationKind.CALL
    assert dispatcher.kind_of("setA") == InvocationKind.SEND
    assert dispatcher.kind_of("nope") is None
    assert dispatcher.methods(InvocationKind.SEND) == ("setA",)


@pytest.mark.asyncio
async def test_call_method_routes_to_transport_call() -> None:
    transport = _FakeTransport(result=42)

    res = await _dispatcher(transport).invoke("getA", 1, "two")

    assert res.ok
    assert res.data == 42
    assert transport.calls == [(_ADDRESS, "getA", [1, "two"])]
    assert transport.sends == []


@pytest.mark.asyncio
async def test_send_method_routes_to_transport_send_with_validated_options() -> None:
    transport = _FakeTransport(result={"hash": "0xdead"})

    res = await _dispatcher(transport).invoke("setA", 5, options={"from": _SENDER, "gasLimit": "21000"})

    assert res.ok
    assert transport.calls == []
    (address, method, args, options) = transport.sends[0]
    assert (address, method, args) == (_ADDRESS, "setA", [5])
    assert isinstance(options, TransactionOptions)
    assert options.from_address == _SENDER
    assert options.gas == 21000


@pytest.mark.asyncio
async def test_unknown_method_is_unsupported_and_never_reaches_transport() -> None:
    transport = _FakeTransport()

    res = await _dispatcher(transport).invoke("dropTables")

    assert not res.ok
    assert isinstance(res.error, DataswapUnsupportedMethodError)
    assert res.error.method == "dropTables"
    assert res.error.contract == "Demo"
    assert transport.calls == []
    assert transport.sends == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "options",
    [
        None,
        "0x1234",
        {"from": "not-an-address"},
        {"from": _SENDER, "gas": 0},
        {"from": _SENDER, "gasPrice": 1, "maxFeePerGas": 2},
        {"from": _SENDER, "unexpected": True},
    ],
)
async def test_invalid_options_never_reach_transport(options: Any) -> None:
    transport = _FakeTransport()

    res = await _dispatcher(transport).invoke("setA", 5, options=options)

    assert not res.ok
    assert isinstance(res.error, DataswapInvalidOptionsError)
    assert res.error.method == "setA"
    assert transport.sends == []


@pytest.mark.asyncio
async def test_call_ignores_options() -> None:
    transport = _FakeTransport(result=1)

    res = await _dispatcher(transport).invoke("getA", options={"from": "garbage"})

    assert res.ok
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_transport_timeout_becomes_error_result() -> None:
    transport = _FakeTransport(error=TimeoutError())

    res = await _dispatcher(transport).invoke("getA")

    assert not res.ok
    assert isinstance(res.error, DataswapTransportError)
    assert "timed out" in str(res.error)
    assert isinstance(res.error.__cause__, TimeoutError)


@pytest.mark.asyncio
async def test_transport_revert_becomes_error_result() -> None:
    transport = _FakeTransport(error=DataswapTransportError("execution reverted"))

    res = await _dispatcher(transport).invoke("setA", options={"from": _SENDER})

    assert not res.ok
    assert isinstance(res.error, DataswapTransportError)
    assert res.error.method == "setA"
    assert "execution reverted" in str(res.error)


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [ValueError("execution reverted"), RuntimeError("rpc client closed")])
async def test_client_errors_become_error_results(error: Exception) -> None:
    transport = _FakeTransport(error=error)

    call = await _dispatcher(transport).invoke("getA")
    send = await _dispatcher(transport).invoke("setA", options={"from": _SENDER})

    for res in (call, send):
        assert not res.ok
        assert isinstance(res.error, DataswapTransportError)
        assert res.error.contract == "Demo"
        assert res.error.__cause__ is error
