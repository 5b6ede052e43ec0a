"""Entry point wiring clients, resolver, dispatcher and contract facades."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eth_typing import ChecksumAddress

from .clients.config import Chain, Config
from .clients.connections import ClientManager, Watcher, Web3Factory
from .clients.connectors import Connector, Subscription
from .clients.transactions import ContractDispatcher
from .contracts.controller import Controller
from .contracts.erc20 import ERC20
from .contracts.vault import Vault
from .contracts.vault_factory import VaultFactory
from .exceptions import InvalidContractType
from .registry import DEFAULT_REGISTRY, AbiRegistry
from .resolver import ContractResolver
from .types import (
    Address,
    BaseParams,
    ChainId,
    ChainInfo,
    Connection,
    ConnectionState,
    ConnectResult,
    ContractType,
    Mode,
    SwitchAccountResult,
    SwitchChainResult,
)


class BonkersSDK:
    """Single object exposing every SDK capability for one configuration.

    The config is validated here, so a missing key, chain or connector fails
    at construction rather than on first use. All facades created by this
    object share one client manager, so switching chain or account is seen
    by all of them.
    """

    def __init__(
        self,
        config: Config,
        *,
        registry: AbiRegistry = DEFAULT_REGISTRY,
        web3_factory: Web3Factory | None = None,
    ) -> None:
        self.clients = ClientManager(config, web3_factory=web3_factory)
        self.config = self.clients.config
        self.logger = self.clients.logger
        self.resolver = ContractResolver(self.clients, registry, self.logger)
        self.dispatcher = ContractDispatcher(self.clients, self.logger)
        self.logger.debug(
            "SDK ready in %s mode with chains %s",
            self.mode.value,
            [chain.name for chain in self.config.chains],
        )

    @property
    def mode(self) -> Mode:
        return self.clients.mode

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------
    def controller(self, params: BaseParams | None = None) -> Controller:
        return Controller(self.clients, self.resolver, self.dispatcher, params)

    def vault(self, params: BaseParams | None = None) -> Vault:
        return Vault(self.clients, self.resolver, self.dispatcher, params)

    def vault_factory(self, params: BaseParams | None = None) -> VaultFactory:
        return VaultFactory(self.clients, self.resolver, self.dispatcher, params)

    def erc20(self, token: Address | None = None, abi: Sequence[Any] | None = None) -> ERC20:
        return ERC20(self.clients, self.resolver, self.dispatcher, token, abi=abi)

    async def get_params(
        self, chain_id: ChainId, address: Address, contract_type: ContractType | str
    ) -> BaseParams:
        """Verify a deployed contract and return its address with the registry ABI."""

        try:
            expected = ContractType(contract_type)
        except ValueError as exc:
            raise InvalidContractType(
                f"Unknown Contract Type: {contract_type}", cause=exc
            ) from exc

        chain = self.clients.get_chain(chain_id)
        return await self.resolver.resolve(chain, address, expected)

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------
    def chain(self) -> ChainInfo:
        return self.clients.chain()

    def chains(self) -> tuple[Chain, ...]:
        return self.clients.chains()

    def account(self) -> ChecksumAddress | None:
        return self.clients.account()

    async def balance_of(self, address: Address) -> int:
        return await self.clients.balance_of(address)

    def use_chain(self, chain_id: ChainId) -> BonkersSDK:
        self.clients.use_chain(chain_id)
        return self

    def use_account(self, private_key: str) -> BonkersSDK:
        self.clients.use_account(private_key)
        return self

    def connectors(self) -> tuple[Connector, ...]:
        return self.clients.connectors()

    def connection(self) -> ConnectionState:
        return self.clients.connection()

    async def connect(self, connector: Connector, callback: Watcher | None = None) -> ConnectResult:
        return await self.clients.connect(connector, callback)

    async def reconnect(
        self, connectors: Sequence[Connector] | None = None
    ) -> tuple[Connection, ...]:
        return await self.clients.reconnect(connectors)

    async def disconnect(self, connector: Connector | None = None) -> None:
        await self.clients.disconnect(connector)

    async def switch_chain(
        self, chain_id: ChainId, callback: Watcher | None = None
    ) -> SwitchChainResult:
        return await self.clients.switch_chain(chain_id, callback)

    async def switch_account(
        self, connector: Connector, callback: Watcher | None = None
    ) -> SwitchAccountResult:
        return await self.clients.switch_account(connector, callback)

    def watch_account(self, callback: Watcher) -> Subscription:
        return self.clients.watch_account(callback)

    def watch_chain_id(self, callback: Watcher) -> Subscription:
        return self.clients.watch_chain_id(callback)

    def watch_connections(self, callback: Watcher) -> Subscription:
        return self.clients.watch_connections(callback)
