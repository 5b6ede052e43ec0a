"""Verify deployed contracts and resolve their ABI from the registry."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from eth_abi import decode as abi_decode
from web3 import AsyncWeb3

from .abi import Base_abi
from .clients.config import Chain
from .constants import EIP1967_IMPLEMENTATION_SLOT
from .exceptions import (
    BonkersError,
    ContractAbiNotFound,
    InvalidContract,
    InvalidContractType,
    InvalidContractVersion,
)
from .registry import DEFAULT_REGISTRY, AbiRegistry
from .types import Address, BaseParams, ChainId, ContractType, ContractVersion
from .utils import format_contract_type, log_failure, to_checksum


class PublicClientProvider(Protocol):
    def public_client(self, chain_id: ChainId) -> AsyncWeb3: ...

    def get_chain(self, chain_id: ChainId) -> Chain: ...


class ContractResolver:
    """Turn ``(chain, address, expected type)`` into verified :class:`BaseParams`.

    Resolution reads ``contractType()`` and ``version()`` from the deployed
    contract, rejects a type mismatch before the registry is consulted, then
    looks up the ABI for the reported version. Nothing is cached beyond the
    per-chain read handle owned by the client provider.
    """

    def __init__(
        self,
        clients: PublicClientProvider,
        registry: AbiRegistry = DEFAULT_REGISTRY,
        logger: logging.Logger | None = None,
    ) -> None:
        self._clients = clients
        self._registry = registry
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(
        self, chain: Chain, address: Address, expected_type: ContractType
    ) -> BaseParams:
        try:
            web3 = self._clients.public_client(chain.id)
            checksum = to_checksum(address)
            reported_type, version = await asyncio.gather(
                self._read(web3, checksum, "contractType"),
                self._read(web3, checksum, "version"),
            )
        except Exception as exc:
            error = InvalidContract(
                f"Failed To Verify Contract Existence On {chain.name} Chain | Cause: {exc}",
                cause=exc,
                details={"chain_id": chain.id, "address": address},
            )
            log_failure(self.logger, type(self).__name__, "resolve", error)
            raise error from exc

        expected = ContractType(expected_type)
        if reported_type != expected.value:
            error = InvalidContractType(
                "Contract Type and Expected Contract Type Does Not Match",
                details={"expected": expected.value, "actual": reported_type},
            )
            log_failure(self.logger, type(self).__name__, "resolve", error)
            raise error

        abi = self._registry.get_abi(format_contract_type(expected), version)
        if abi is None:
            error = ContractAbiNotFound(
                f"Contract Abi Not Found In The SDK for {reported_type} version {version}, "
                "Please Provide it Manually",
                contract_type=reported_type,
                version=version,
            )
            log_failure(self.logger, type(self).__name__, "resolve", error)
            raise error

        self.logger.debug(
            "Resolved %s %s at %s on %s", reported_type, version, checksum, chain.name
        )
        return BaseParams(address=checksum, abi=abi)

    async def contract_type(self, chain_id: ChainId, address: Address) -> str:
        try:
            return await self._read(
                self._clients.public_client(chain_id), to_checksum(address), "contractType"
            )
        except Exception as exc:
            error = InvalidContractType(
                "Can Not Find Contract Type From The Given Address",
                cause=exc,
                details={"chain_id": chain_id, "address": address},
            )
            log_failure(self.logger, type(self).__name__, "contract_type", error)
            raise error from exc

    async def contract_version(self, chain_id: ChainId, address: Address) -> ContractVersion:
        try:
            return await self._read(
                self._clients.public_client(chain_id), to_checksum(address), "version"
            )
        except Exception as exc:
            error = InvalidContractVersion(
                "Can Not Find Version From The Given Address",
                cause=exc,
                details={"chain_id": chain_id, "address": address},
            )
            log_failure(self.logger, type(self).__name__, "contract_version", error)
            raise error from exc

    async def implementation_address(self, chain_id: ChainId, address: Address) -> Address:
        """Read the EIP-1967 implementation slot of a proxy."""

        chain = self._clients.get_chain(chain_id)
        try:
            web3 = self._clients.public_client(chain_id)
            raw = await web3.eth.get_storage_at(to_checksum(address), EIP1967_IMPLEMENTATION_SLOT)
            (implementation,) = abi_decode(["address"], bytes(raw).rjust(32, b"\x00"))
        except BonkersError:
            raise
        except Exception as exc:
            error = InvalidContract(
                f"Failed To Read Implementation Address On {chain.name} Chain | Cause: {exc}",
                cause=exc,
                details={"chain_id": chain_id, "address": address},
            )
            log_failure(self.logger, type(self).__name__, "implementation_address", error)
            raise error from exc
        return to_checksum(implementation)

    @staticmethod
    async def _read(web3: AsyncWeb3, address: Address, function_name: str) -> Any:
        contract = web3.eth.contract(address=address, abi=Base_abi)
        return await getattr(contract.functions, function_name)().call()
