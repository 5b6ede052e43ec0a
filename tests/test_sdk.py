"""End-to-end tests of the SDK entry point over fake transports."""

from __future__ import annotations

import pytest
from fakes import (
    CONTRACT_ADDRESS,
    FakeConnector,
    interactive_config,
    server_config,
)
from web3 import Web3

from bonkers_sdk import BonkersSDK
from bonkers_sdk.exceptions import (
    ClientNotFound,
    ContractAbiNotFound,
    InvalidContract,
    InvalidContractType,
    InvalidSDKMode,
    MissingConfigRequirement,
)
from bonkers_sdk.registry import DEFAULT_REGISTRY
from bonkers_sdk.types import ContractType, Mode

CONTRACT = Web3.to_checksum_address(CONTRACT_ADDRESS)
WALLET = "0x00000000000000000000000000000000000000A1"
RECEIVER = Web3.to_checksum_address("0x00000000000000000000000000000000000000e1")


class TestConstruction:
    def test_server_mode(self, web3_factory, signer_address) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)

        assert sdk.mode is Mode.SERVER
        assert sdk.account() == signer_address
        assert [chain.id for chain in sdk.chains()] == [1, 137]

    def test_missing_private_key(self, web3_factory) -> None:
        with pytest.raises(MissingConfigRequirement, match="PrivateKey"):
            BonkersSDK(server_config(private_key=""), web3_factory=web3_factory)
        assert web3_factory.created == []

    def test_server_switches_are_chainable(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)

        assert sdk.use_chain(137).chain().symbol == "POL"
        with pytest.raises(InvalidSDKMode):
            sdk.connectors()


class TestGetParams:
    @pytest.mark.asyncio
    async def test_resolves_registry_abi(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)
        web3_factory.results.update({"contractType": "CONTROLLER", "version": "0.0.1"})

        params = await sdk.get_params(137, CONTRACT_ADDRESS, "CONTROLLER")

        assert params.address == CONTRACT
        assert params.abi == DEFAULT_REGISTRY.get_abi("controller", "0.0.1")
        polygon = sdk.clients.public_client(137)
        assert sorted(name for name, _, _ in polygon.calls) == ["contractType", "version"]

    @pytest.mark.asyncio
    async def test_unknown_type_is_rejected_before_any_read(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)

        with pytest.raises(InvalidContractType):
            await sdk.get_params(1, CONTRACT_ADDRESS, "multicall")
        assert all(not web3.calls for web3 in web3_factory.created)

    @pytest.mark.asyncio
    async def test_type_mismatch(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)
        web3_factory.results.update({"contractType": "VAULT", "version": "0.0.1"})

        with pytest.raises(InvalidContractType) as excinfo:
            await sdk.get_params(1, CONTRACT_ADDRESS, ContractType.CONTROLLER)
        assert excinfo.value.details == {"expected": "CONTROLLER", "actual": "VAULT"}

    @pytest.mark.asyncio
    async def test_unsupported_version(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)
        web3_factory.results.update({"contractType": "VAULT FACTORY", "version": "9.9.9"})

        with pytest.raises(ContractAbiNotFound, match="Please Provide it Manually"):
            await sdk.get_params(1, CONTRACT_ADDRESS, ContractType.VAULT_FACTORY)

    @pytest.mark.asyncio
    async def test_unreachable_contract(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)
        web3_factory.results["contractType"] = ValueError("no code at address")

        with pytest.raises(InvalidContract):
            await sdk.vault().get_params(1, CONTRACT_ADDRESS)


class TestSharedClients:
    @pytest.mark.asyncio
    async def test_facades_follow_server_switches(self, web3_factory) -> None:
        sdk = BonkersSDK(server_config(), web3_factory=web3_factory)
        web3_factory.results.update(
            {"contractType": "VAULT", "version": "0.0.1", "reward": True}
        )
        vault = sdk.vault(await sdk.get_params(1, CONTRACT_ADDRESS, "VAULT"))

        sdk.use_chain(137)
        outcome = await vault.reward(RECEIVER, 3)

        assert outcome.success
        (polygon_signer,) = [
            web3
            for web3 in web3_factory.for_transport("https://polygon.example")
            if web3.middleware_onion.layers
        ]
        assert polygon_signer.sent[0][:2] == ("reward", (RECEIVER, 3))

    @pytest.mark.asyncio
    async def test_interactive_writes_go_through_wallet(self, web3_factory) -> None:
        connector = FakeConnector(accounts=(WALLET,))
        sdk = BonkersSDK(interactive_config(connector), web3_factory=web3_factory)
        vault = sdk.vault(
            await _resolved(sdk, web3_factory, ContractType.VAULT),
        )
        connector.web3.results["grantPermit"] = None

        with pytest.raises(ClientNotFound):
            await vault.grant_permit(RECEIVER)

        await sdk.connect(connector)
        outcome = await vault.grant_permit(RECEIVER)

        assert outcome.success
        name, args, tx = connector.web3.sent[0]
        assert (name, args, tx) == ("grantPermit", (RECEIVER,), {"from": WALLET})

    @pytest.mark.asyncio
    async def test_interactive_disconnect_via_sdk(self, web3_factory) -> None:
        connector = FakeConnector()
        sdk = BonkersSDK(interactive_config(connector), web3_factory=web3_factory)

        await sdk.connect(connector)
        await sdk.disconnect()

        assert sdk.account() is None
        with pytest.raises(InvalidSDKMode):
            sdk.use_account("0x" + "33" * 32)


async def _resolved(sdk: BonkersSDK, factory, contract_type: ContractType):
    factory.results.update({"contractType": contract_type.value, "version": "0.0.1"})
    return await sdk.get_params(1, CONTRACT_ADDRESS, contract_type)
