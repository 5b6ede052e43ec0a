"""Tests for contract verification and ABI resolution."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from fakes import CONTRACT_ADDRESS, ETHEREUM, FakeWeb3

from bonkers_sdk.abi import ABIS, Vault_0_0_1_abi
from bonkers_sdk.clients.config import Chain
from bonkers_sdk.constants import EIP1967_IMPLEMENTATION_SLOT, ZERO_ADDRESS
from bonkers_sdk.exceptions import (
    ContractAbiNotFound,
    InvalidChainId,
    InvalidContract,
    InvalidContractType,
    InvalidContractVersion,
)
from bonkers_sdk.registry import AbiRegistry
from bonkers_sdk.resolver import ContractResolver
from bonkers_sdk.types import BaseParams, ContractType
from bonkers_sdk.utils import to_checksum


class StubClients:
    def __init__(self, web3: FakeWeb3) -> None:
        self.web3 = web3
        self.requested: list[int] = []

    def public_client(self, chain_id: int) -> FakeWeb3:
        self.requested.append(chain_id)
        if chain_id != ETHEREUM.id:
            raise InvalidChainId(f"Chain Id [{chain_id}] Does Not Exist On The Provided Chains")
        return self.web3

    def get_chain(self, chain_id: int) -> Any:
        return ETHEREUM


class SpyRegistry(AbiRegistry):
    def __init__(self) -> None:
        super().__init__(ABIS)
        self.lookups: list[tuple[Any, str]] = []

    def get_abi(self, contract_type: Any, version: str) -> Any:
        self.lookups.append((contract_type, version))
        return super().get_abi(contract_type, version)


def _resolver(**results: Any) -> tuple[ContractResolver, FakeWeb3, SpyRegistry]:
    web3 = FakeWeb3(results=results)
    registry = SpyRegistry()
    return ContractResolver(StubClients(web3), registry), web3, registry  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_resolve_returns_checksummed_params() -> None:
    resolver, _, _ = _resolver(contractType="VAULT", version="0.0.1")

    params = await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT)

    assert params == BaseParams(address=to_checksum(CONTRACT_ADDRESS), abi=tuple(Vault_0_0_1_abi))


@pytest.mark.asyncio
async def test_resolve_is_repeatable() -> None:
    resolver, web3, _ = _resolver(contractType="VAULT FACTORY", version="0.0.1")

    first = await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT_FACTORY)
    second = await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT_FACTORY)

    assert first == second
    assert [name for name, _, _ in web3.calls].count("contractType") == 2


@pytest.mark.asyncio
async def test_type_mismatch_never_reaches_registry() -> None:
    resolver, _, registry = _resolver(contractType="CONTROLLER", version="0.0.1")

    with pytest.raises(InvalidContractType) as excinfo:
        await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT)

    assert registry.lookups == []
    assert excinfo.value.details == {"expected": "VAULT", "actual": "CONTROLLER"}


@pytest.mark.asyncio
async def test_unrecognised_type_string_is_rejected() -> None:
    resolver, _, registry = _resolver(contractType="VAULT  FACTORY", version="0.0.1")

    with pytest.raises(InvalidContractType):
        await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT_FACTORY)
    assert registry.lookups == []


@pytest.mark.asyncio
async def test_missing_abi_names_type_and_version() -> None:
    resolver, _, registry = _resolver(contractType="VAULT", version="0.0.2")

    with pytest.raises(ContractAbiNotFound) as excinfo:
        await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT)

    message = str(excinfo.value)
    assert "VAULT" in message
    assert "0.0.2" in message
    assert registry.lookups == [("vault", "0.0.2")]


@pytest.mark.asyncio
async def test_read_failure_becomes_invalid_contract() -> None:
    cause = ConnectionError("connection refused")
    resolver, _, _ = _resolver(contractType=cause, version="0.0.1")

    with pytest.raises(InvalidContract) as excinfo:
        await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.VAULT)

    assert "Ethereum" in str(excinfo.value)
    assert "connection refused" in str(excinfo.value)
    assert excinfo.value.cause is cause


@pytest.mark.asyncio
async def test_unknown_chain_becomes_invalid_contract() -> None:
    web3 = FakeWeb3(results={"contractType": "VAULT", "version": "0.0.1"})
    resolver = ContractResolver(StubClients(web3))  # type: ignore[arg-type]
    goerli = Chain(id=5, name="Goerli", rpc_urls=("https://goerli.example",))

    with pytest.raises(InvalidContract, match="Goerli") as excinfo:
        await resolver.resolve(goerli, CONTRACT_ADDRESS, ContractType.VAULT)
    assert isinstance(excinfo.value.cause, InvalidChainId)


@pytest.mark.asyncio
async def test_type_and_version_are_read_concurrently() -> None:
    version_requested = asyncio.Event()

    async def contract_type() -> str:
        await asyncio.wait_for(version_requested.wait(), timeout=1)
        return "CONTROLLER"

    async def version() -> str:
        version_requested.set()
        return "0.0.1"

    resolver, _, _ = _resolver(contractType=contract_type, version=version)

    params = await resolver.resolve(ETHEREUM, CONTRACT_ADDRESS, ContractType.CONTROLLER)
    assert params.address == to_checksum(CONTRACT_ADDRESS)


@pytest.mark.asyncio
async def test_single_reads_wrap_failures() -> None:
    resolver, _, _ = _resolver(contractType=RuntimeError("revert"), version=RuntimeError("revert"))

    with pytest.raises(InvalidContractType, match="Can Not Find Contract Type"):
        await resolver.contract_type(ETHEREUM.id, CONTRACT_ADDRESS)
    with pytest.raises(InvalidContractVersion, match="Can Not Find Version"):
        await resolver.contract_version(ETHEREUM.id, CONTRACT_ADDRESS)


@pytest.mark.asyncio
async def test_implementation_address_reads_eip1967_slot() -> None:
    implementation = "0x00000000000000000000000000000000000000d2"
    resolver, web3, _ = _resolver()
    web3.storage = bytes(12) + bytes.fromhex(implementation[2:])

    assert await resolver.implementation_address(ETHEREUM.id, CONTRACT_ADDRESS) == to_checksum(
        implementation
    )
    assert web3.storage_reads == [(to_checksum(CONTRACT_ADDRESS), EIP1967_IMPLEMENTATION_SLOT)]


@pytest.mark.asyncio
async def test_unset_implementation_is_zero_address() -> None:
    resolver, _, _ = _resolver()

    assert await resolver.implementation_address(ETHEREUM.id, CONTRACT_ADDRESS) == ZERO_ADDRESS
