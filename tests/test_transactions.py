"""Tests for the read/write dispatch layer."""

from __future__ import annotations

import asyncio

import pytest
from fakes import CONTRACT_ADDRESS, TX_HASH, FakeWeb3Factory, server_config

from bonkers_sdk.abi import Controller_0_0_1_abi, Vault_0_0_1_abi
from bonkers_sdk.clients.connections import ClientManager
from bonkers_sdk.clients.transactions import ContractDispatcher
from bonkers_sdk.exceptions import ContractInteractionFailed
from bonkers_sdk.types import ContractCall, Status

RECIPIENT = "0x00000000000000000000000000000000000000b1"


def _dispatcher(factory: FakeWeb3Factory) -> tuple[ContractDispatcher, ClientManager]:
    clients = ClientManager(server_config(receipt_timeout=5.0), web3_factory=factory)
    return ContractDispatcher(clients), clients


def _signers(factory: FakeWeb3Factory) -> list:
    return [web3 for web3 in factory.created if web3.middleware_onion.layers]


def _reward(amount: int = 5, value: int = 0) -> ContractCall:
    return ContractCall(
        CONTRACT_ADDRESS, tuple(Vault_0_0_1_abi), "reward", (RECIPIENT, amount), value=value
    )


@pytest.mark.asyncio
async def test_read_uses_public_client_of_active_chain(web3_factory) -> None:
    dispatcher, clients = _dispatcher(web3_factory)
    web3_factory.results["owner"] = RECIPIENT

    owner = await dispatcher.read(ContractCall(CONTRACT_ADDRESS, Controller_0_0_1_abi, "owner"))

    assert owner == RECIPIENT
    public = clients.public_client(1)
    assert public.calls == [("owner", (), None)]


@pytest.mark.asyncio
async def test_read_failure_is_wrapped(web3_factory) -> None:
    dispatcher, _ = _dispatcher(web3_factory)
    cause = ValueError("execution reverted")
    web3_factory.results["owner"] = cause

    with pytest.raises(ContractInteractionFailed) as excinfo:
        await dispatcher.read(ContractCall(CONTRACT_ADDRESS, Controller_0_0_1_abi, "owner"))

    assert excinfo.value.cause is cause
    assert excinfo.value.function_name == "owner"


@pytest.mark.asyncio
async def test_unknown_function_is_rejected(web3_factory) -> None:
    dispatcher, _ = _dispatcher(web3_factory)

    with pytest.raises(ContractInteractionFailed, match="notAFunction"):
        await dispatcher.read(ContractCall(CONTRACT_ADDRESS, Vault_0_0_1_abi, "notAFunction"))


@pytest.mark.asyncio
async def test_write_simulates_submits_and_waits(web3_factory, signer_address) -> None:
    dispatcher, clients = _dispatcher(web3_factory)
    web3_factory.results["reward"] = True
    public = clients.public_client(1)

    outcome = await dispatcher.write(_reward())

    assert outcome.status is Status.SUCCESS
    assert outcome.result is True
    assert outcome.tx_hash == TX_HASH.to_0x_hex()
    assert outcome.receipt == {
        "status": 1,
        "blockNumber": 7,
        "transactionHash": TX_HASH.to_0x_hex(),
    }

    (signer,) = _signers(web3_factory)
    assert signer.calls == [("reward", (RECIPIENT, 5), {"from": signer_address})]
    assert signer.sent == [("reward", (RECIPIENT, 5), {"from": signer_address})]
    assert public.waited == [(TX_HASH, 5.0)]


@pytest.mark.asyncio
async def test_write_attaches_value(web3_factory, signer_address) -> None:
    dispatcher, _ = _dispatcher(web3_factory)

    await dispatcher.write(_reward(value=42))

    (signer,) = _signers(web3_factory)
    assert signer.sent[0][2] == {"from": signer_address, "value": 42}


@pytest.mark.asyncio
async def test_reverted_receipt_is_a_failure(web3_factory) -> None:
    dispatcher, clients = _dispatcher(web3_factory)
    clients.public_client(1).receipt = {"status": 0, "blockNumber": 8}

    with pytest.raises(ContractInteractionFailed, match="reverted") as excinfo:
        await dispatcher.write(_reward())

    assert excinfo.value.details["tx_hash"] == TX_HASH.to_0x_hex()


@pytest.mark.asyncio
async def test_failed_simulation_sends_nothing(web3_factory) -> None:
    dispatcher, _ = _dispatcher(web3_factory)
    cause = RuntimeError("insufficient reward pool")
    web3_factory.results["reward"] = cause

    with pytest.raises(ContractInteractionFailed) as excinfo:
        await dispatcher.write(_reward())

    assert excinfo.value.cause is cause
    assert "Ethereum" in str(excinfo.value)
    (signer,) = _signers(web3_factory)
    assert signer.sent == []
    assert "tx_hash" not in excinfo.value.details


@pytest.mark.asyncio
async def test_submission_failure_is_wrapped(web3_factory) -> None:
    dispatcher, clients = _dispatcher(web3_factory)
    (signer,) = _signers(web3_factory)
    signer.transact_error = ConnectionError("nonce too low")

    with pytest.raises(ContractInteractionFailed) as excinfo:
        await dispatcher.write(_reward())

    assert isinstance(excinfo.value.cause, ConnectionError)
    assert clients.public_client(1).waited == []


@pytest.mark.asyncio
async def test_lost_receipt_keeps_tx_hash(web3_factory) -> None:
    dispatcher, clients = _dispatcher(web3_factory)
    timeout = TimeoutError("receipt not found after 5s")
    clients.public_client(1).receipt_error = timeout

    with pytest.raises(ContractInteractionFailed) as excinfo:
        await dispatcher.write(_reward())

    assert excinfo.value.cause is timeout
    assert excinfo.value.details["tx_hash"] == TX_HASH.to_0x_hex()
    (signer,) = _signers(web3_factory)
    assert len(signer.sent) == 1


@pytest.mark.asyncio
async def test_write_keeps_chain_captured_at_start(web3_factory) -> None:
    dispatcher, clients = _dispatcher(web3_factory)
    release = asyncio.Event()
    simulating = asyncio.Event()

    async def slow_reward(*_args: object) -> bool:
        simulating.set()
        await release.wait()
        return True

    web3_factory.results["reward"] = slow_reward
    pending = asyncio.create_task(dispatcher.write(_reward()))
    await simulating.wait()

    clients.use_chain(137)
    release.set()
    outcome = await pending

    assert outcome.success
    ethereum_signer, polygon_signer = _signers(web3_factory)
    assert ethereum_signer.transport == "https://eth.example"
    assert len(ethereum_signer.sent) == 1
    assert polygon_signer.sent == []
    assert clients.public_client(1).waited
    assert clients.chain().id == 137
