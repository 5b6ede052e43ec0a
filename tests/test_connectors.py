"""Tests for observer handles and the JSON-RPC wallet connector."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any

import pytest
from web3 import Web3

from bonkers_sdk.clients.connectors import (
    CHANGE_EVENT,
    DISCONNECT_EVENT,
    USER_REJECTED_REQUEST,
    EventEmitter,
    RPCWalletConnector,
    Subscription,
)
from bonkers_sdk.exceptions import ConnectorError

WALLET = "0x00000000000000000000000000000000000000a1"
OTHER_WALLET = "0x00000000000000000000000000000000000000b2"


class TestSubscription:
    def test_detaches_once(self) -> None:
        detached: list[int] = []
        subscription = Subscription(lambda: detached.append(1))

        subscription.unsubscribe()
        subscription()

        assert detached == [1]
        assert not subscription.active

    def test_context_manager(self) -> None:
        detached: list[int] = []

        with Subscription(lambda: detached.append(1)) as subscription:
            assert subscription.active

        assert detached == [1]


class TestEventEmitter:
    def test_emit_reaches_listeners_in_order(self) -> None:
        emitter = EventEmitter()
        seen: list[tuple[str, Any]] = []
        emitter.on("tick", lambda value: seen.append(("first", value)))
        emitter.on("tick", lambda value: seen.append(("second", value)))

        emitter.emit("tick", 3)

        assert seen == [("first", 3), ("second", 3)]

    def test_failing_listener_is_logged(self, caplog) -> None:
        emitter = EventEmitter()
        seen: list[int] = []

        def broken(_value: int) -> None:
            raise ValueError("boom")

        emitter.on("tick", broken)
        emitter.on("tick", seen.append)

        with caplog.at_level(logging.ERROR):
            emitter.emit("tick", 1)

        assert seen == [1]
        assert "Listener for tick event failed" in caplog.text

    def test_unsubscribe_removes_listener(self) -> None:
        emitter = EventEmitter()
        subscription = emitter.on("tick", lambda *_: None)

        subscription.unsubscribe()

        assert emitter.listener_count("tick") == 0


class FakeProvider:
    """Scripted EIP-1193 endpoint keyed by JSON-RPC method."""

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.requests: list[tuple[str, list[Any]]] = []

    async def make_request(self, method: str, params: list[Any]) -> dict[str, Any]:
        self.requests.append((method, params))
        response = self.responses[method]
        if isinstance(response, Exception):
            raise response
        return response


def wallet(responses: dict[str, Any]) -> tuple[RPCWalletConnector, FakeProvider]:
    connector = RPCWalletConnector("http://127.0.0.1:1248", name="Frame")
    provider = FakeProvider(responses)
    connector._web3 = SimpleNamespace(provider=provider)  # type: ignore[assignment]
    return connector, provider


class TestRPCWalletConnector:
    def test_identity(self) -> None:
        connector = RPCWalletConnector("http://127.0.0.1:1248", name="Frame Wallet")

        assert connector.id == "frame-wallet"
        assert repr(connector) == "RPCWalletConnector(id='frame-wallet', name='Frame Wallet')"

    @pytest.mark.asyncio
    async def test_connect_checksums_accounts(self) -> None:
        connector, provider = wallet(
            {
                "eth_requestAccounts": {"result": [WALLET]},
                "eth_chainId": {"result": "0x1"},
            }
        )

        accounts, chain_id = await connector.connect()

        assert accounts == (Web3.to_checksum_address(WALLET),)
        assert chain_id == 1
        assert [method for method, _ in provider.requests] == [
            "eth_requestAccounts",
            "eth_chainId",
        ]

    @pytest.mark.asyncio
    async def test_connect_switches_to_requested_chain(self) -> None:
        connector, provider = wallet(
            {
                "eth_requestAccounts": {"result": [WALLET]},
                "eth_chainId": {"result": "0x1"},
                "wallet_switchEthereumChain": {"result": None},
            }
        )
        changes: list[dict[str, Any]] = []
        connector.on(CHANGE_EVENT, changes.append)

        _, chain_id = await connector.connect(137)

        assert chain_id == 137
        assert provider.requests[-1] == ("wallet_switchEthereumChain", [{"chainId": "0x89"}])
        assert changes == [{"chain_id": 137}]

    @pytest.mark.asyncio
    async def test_rejected_request_carries_code(self) -> None:
        connector, _ = wallet(
            {
                "eth_requestAccounts": {
                    "error": {"code": USER_REJECTED_REQUEST, "message": "User rejected"}
                },
            }
        )

        with pytest.raises(ConnectorError) as excinfo:
            await connector.connect()

        assert excinfo.value.code == USER_REJECTED_REQUEST
        assert excinfo.value.connector_id == "frame"
        assert "User rejected" in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_unreachable_wallet(self) -> None:
        cause = ConnectionError("refused")
        connector, _ = wallet({"eth_accounts": cause})

        with pytest.raises(ConnectorError) as excinfo:
            await connector.get_accounts()

        assert excinfo.value.cause is cause
        assert excinfo.value.details["url"] == "http://127.0.0.1:1248"

    @pytest.mark.asyncio
    async def test_is_authorized(self) -> None:
        connector, provider = wallet({"eth_accounts": {"result": []}})
        assert not await connector.is_authorized()

        provider.responses["eth_accounts"] = {"result": [WALLET]}
        assert await connector.is_authorized()

        provider.responses["eth_accounts"] = {"error": {"code": 4100, "message": "locked"}}
        assert not await connector.is_authorized()

    @pytest.mark.asyncio
    async def test_account_change_is_emitted(self) -> None:
        connector, provider = wallet(
            {
                "eth_requestAccounts": {"result": [WALLET]},
                "eth_chainId": {"result": 1},
            }
        )
        await connector.connect()
        changes: list[dict[str, Any]] = []
        connector.on(CHANGE_EVENT, changes.append)

        provider.responses["eth_accounts"] = {"result": [OTHER_WALLET]}
        accounts = await connector.get_accounts()

        assert changes == [{"accounts": accounts}]
        assert accounts == (Web3.to_checksum_address(OTHER_WALLET),)

    @pytest.mark.asyncio
    async def test_disconnect_is_emitted(self) -> None:
        connector, _ = wallet({})
        disconnects: list[tuple[Any, ...]] = []
        connector.on(DISCONNECT_EVENT, lambda *args: disconnects.append(args))

        await connector.disconnect()

        assert disconnects == [()]
