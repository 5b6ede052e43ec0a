"""Connectivity and signing handles for both SDK modes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, cast

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.middleware import SignAndSendRawMiddlewareBuilder
from web3.providers.async_base import AsyncBaseProvider

from ..constants import INTERACTIVE_ONLY_MESSAGE, SERVER_ONLY_MESSAGE
from ..exceptions import (
    BonkersError,
    ClientNotFound,
    ConnectorError,
    ContractInteractionFailed,
    InvalidClientType,
    InvalidSDKMode,
    MissingConfigRequirement,
)
from ..types import (
    AccountState,
    Address,
    ChainId,
    ChainInfo,
    ClientType,
    Connection,
    ConnectionState,
    ConnectorState,
    ConnectResult,
    Mode,
    SwitchAccountResult,
    SwitchChainResult,
)
from ..utils import censor, log_failure, to_checksum
from .config import Chain, Config, Transport, get_chain_by_id, prepare_config
from .connectors import CHANGE_EVENT, DISCONNECT_EVENT, Connector, EventEmitter, Subscription

Web3Factory = Callable[[Transport, float], AsyncWeb3]
Watcher = Callable[[Any, Any, Subscription], Any]

CONNECTIONS_EVENT = "connections"
CHAIN_ID_EVENT = "chain_id"
ACCOUNT_EVENT = "account"


def build_web3(transport: Transport, request_timeout: float) -> AsyncWeb3:
    """Create an async web3 handle for a transport (RPC URL or provider)."""
    if isinstance(transport, AsyncBaseProvider):
        return AsyncWeb3(transport)
    return AsyncWeb3(AsyncHTTPProvider(transport, request_kwargs={"timeout": request_timeout}))


@dataclass(frozen=True)
class DirectClient:
    """Immutable server-mode handle: one chain, one account, one signer."""

    chain: Chain
    web3: AsyncWeb3
    account: LocalAccount


@dataclass(frozen=True)
class Signer:
    """Write handle captured once per dispatched transaction."""

    web3: AsyncWeb3
    address: ChecksumAddress
    chain: Chain


class ClientManager:
    """Own the read clients and the signing client of the active mode.

    Server mode holds a :class:`DirectClient` built from the configured
    private key. Interactive mode keeps connector bookkeeping in a
    :class:`ConnectorState` snapshot and notifies watchers on every change.
    Both snapshots are replaced rather than mutated, so an operation that
    captured one keeps using it after a switch.
    """

    def __init__(self, config: Config, *, web3_factory: Web3Factory | None = None):
        self.config = prepare_config(config)
        self.mode = self.config.mode
        self.logger = self.config.logger or logging.getLogger(__name__)
        self._web3_factory = web3_factory or build_web3
        self._public_clients: dict[ChainId, AsyncWeb3] = {}
        self._direct: DirectClient | None = None
        self._state: ConnectorState | None = None
        self._events = EventEmitter()
        self._connector_subscriptions: dict[str, tuple[Subscription, ...]] = {}
        self.set_clients()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def set_clients(self) -> None:
        """Build the mode-specific client from the prepared config."""

        initial_chain = self.config.chains[0]
        if self.mode is Mode.SERVER:
            private_key = self.config.options.private_key  # type: ignore[union-attr]
            account = self._load_account(private_key)
            self._direct = self._build_direct_client(initial_chain, account)
            self.logger.info(
                "Server client ready for %s on %s [%s]",
                account.address,
                initial_chain.name,
                initial_chain.id,
            )
        else:
            self._state = ConnectorState(
                status=ConnectionState.DISCONNECTED, chain_id=initial_chain.id
            )
            self.logger.info(
                "Connector client ready with %d connector(s)", len(self.connectors())
            )

    def clients_exist(self, client_type: ClientType | str) -> bool:
        """Return whether a client of ``client_type`` was built. Never raises."""

        try:
            client_type = ClientType(client_type)
        except ValueError:
            return False

        if client_type is ClientType.DIRECT:
            return self._direct is not None
        return self._state is not None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def chains(self) -> tuple[Chain, ...]:
        return self.config.chains

    def get_chain(self, chain_id: ChainId) -> Chain:
        return get_chain_by_id(self.config, chain_id)

    def active_chain(self) -> Chain:
        if self.mode is Mode.SERVER:
            return self._require_direct().chain

        state = self._require_state()
        return self.get_chain(cast(ChainId, state.chain_id))

    def chain(self, client_type: ClientType | str | None = None) -> ChainInfo:
        """Return the active chain, optionally asserting which client serves it."""

        if client_type is not None and not self.clients_exist(client_type):
            error = InvalidClientType(f"No {client_type} Client Available")
            log_failure(self.logger, type(self).__name__, "chain", error)
            raise error

        chain = self.active_chain()
        return ChainInfo(id=chain.id, name=chain.name, symbol=chain.native_symbol)

    def account(self) -> ChecksumAddress | None:
        if self.mode is Mode.SERVER:
            return self._require_direct().account.address

        connection = self._current_connection(self._require_state())
        if connection is None or not connection.accounts:
            return None
        return connection.accounts[0]

    def public_client(self, chain_id: ChainId) -> AsyncWeb3:
        """Return the cached read client for ``chain_id``."""

        client = self._public_clients.get(chain_id)
        if client is None:
            chain = self.get_chain(chain_id)
            client = self._web3_factory(
                self.config.transports[chain.id], self.config.request_timeout
            )
            self._public_clients[chain_id] = client
        return client

    def reader(self) -> tuple[AsyncWeb3, Chain]:
        chain = self.active_chain()
        return self.public_client(chain.id), chain

    def signer(self) -> Signer:
        """Snapshot the signing client of the active mode."""

        if self.mode is Mode.SERVER:
            direct = self._require_direct()
            return Signer(web3=direct.web3, address=direct.account.address, chain=direct.chain)

        state = self._require_state()
        connection = self._current_connection(state)
        if connection is None or not connection.accounts:
            raise ClientNotFound("No Connected Wallet; call connect() first")
        return Signer(
            web3=connection.connector.web3,
            address=connection.accounts[0],
            chain=self.get_chain(connection.chain_id),
        )

    async def balance_of(self, address: Address) -> int:
        web3, chain = self.reader()
        try:
            return await web3.eth.get_balance(to_checksum(address))
        except Exception as exc:
            error = ContractInteractionFailed(
                f"Failed To Fetch Balance Of {address} On {chain.name} Chain",
                function_name="getBalance",
                cause=exc,
            )
            log_failure(self.logger, type(self).__name__, "balance_of", error)
            raise error from exc

    # ------------------------------------------------------------------
    # Server mode
    # ------------------------------------------------------------------
    def use_chain(self, chain_id: ChainId) -> ChainInfo:
        """Point the direct client at another configured chain."""

        self._require_mode(Mode.SERVER)
        direct = self._require_direct()
        chain = self.get_chain(chain_id)
        self._direct = self._build_direct_client(chain, direct.account)
        self.logger.info("Direct client switched to %s [%s]", chain.name, chain.id)
        return ChainInfo(id=chain.id, name=chain.name, symbol=chain.native_symbol)

    def use_account(self, private_key: str) -> ChecksumAddress:
        """Swap the signing account of the direct client."""

        self._require_mode(Mode.SERVER)
        direct = self._require_direct()
        account = self._load_account(private_key)
        self._direct = self._build_direct_client(direct.chain, account)
        self.logger.info("Direct client now signing as %s", account.address)
        return account.address

    # ------------------------------------------------------------------
    # Interactive mode
    # ------------------------------------------------------------------
    def connectors(self) -> tuple[Connector, ...]:
        self._require_mode(Mode.INTERACTIVE)
        return tuple(self.config.options.connector_config.connectors)  # type: ignore[union-attr]

    def connection(self) -> ConnectionState:
        self._require_mode(Mode.INTERACTIVE)
        return self._require_state().status

    def connections(self) -> tuple[Connection, ...]:
        self._require_mode(Mode.INTERACTIVE)
        return tuple(self._require_state().connections.values())

    def account_state(self) -> AccountState:
        self._require_mode(Mode.INTERACTIVE)
        return self._account_state(self._require_state())

    async def connect(
        self, connector: Connector, callback: Watcher | None = None
    ) -> ConnectResult:
        """Open a wallet session; ``callback`` then observes connection changes."""

        self._require_mode(Mode.INTERACTIVE)
        subscription = self.watch_connections(callback) if callback else None

        self._set_state(status=ConnectionState.CONNECTING)
        try:
            accounts, chain_id = await connector.connect()
        except Exception as exc:
            if subscription is not None:
                subscription.unsubscribe()
            self._settle_status()
            raise self._connector_failure("connect", connector, exc) from exc

        self._store_connection(Connection(connector, tuple(accounts), chain_id), make_current=True)
        self._bind_connector(connector)
        self.logger.info("Connected via %s on chain %s", connector.name, chain_id)
        return ConnectResult(accounts=tuple(accounts), chain_id=chain_id, unwatch=subscription)

    async def reconnect(
        self, connectors: Sequence[Connector] | None = None
    ) -> tuple[Connection, ...]:
        """Restore sessions for connectors the wallet already authorised."""

        self._require_mode(Mode.INTERACTIVE)
        candidates = tuple(connectors) if connectors is not None else self.connectors()
        self._set_state(status=ConnectionState.RECONNECTING)

        restored: list[Connection] = []
        for connector in candidates:
            try:
                if not await connector.is_authorized():
                    continue
                accounts, chain_id = await connector.connect()
            except Exception as exc:
                self.logger.warning("Reconnect via %s failed: %s", connector.name, exc)
                continue

            connection = Connection(connector, tuple(accounts), chain_id)
            self._store_connection(connection, make_current=not restored)
            self._bind_connector(connector)
            restored.append(connection)

        if not restored:
            self._settle_status()
        return tuple(restored)

    async def disconnect(self, connector: Connector | None = None) -> None:
        self._require_mode(Mode.INTERACTIVE)
        state = self._require_state()
        target_id = connector.id if connector is not None else state.current
        if target_id is None or target_id not in state.connections:
            raise self._missing_connection("disconnect", "No Connected Wallet To Disconnect")

        target = state.connections[target_id].connector
        try:
            await target.disconnect()
        except Exception as exc:
            raise self._connector_failure("disconnect", target, exc) from exc
        finally:
            self._drop_connection(target_id)
        self.logger.info("Disconnected %s", target.name)

    async def switch_chain(
        self, chain_id: ChainId, callback: Watcher | None = None
    ) -> SwitchChainResult:
        """Ask the connected wallet to move to ``chain_id``."""

        self._require_mode(Mode.INTERACTIVE)
        chain = self.get_chain(chain_id)
        connection = self._current_connection(self._require_state())
        if connection is None:
            raise self._missing_connection(
                "switch_chain", "No Connected Wallet; call connect() first"
            )

        subscription = self.watch_chain_id(callback) if callback else None
        try:
            new_chain_id = await connection.connector.switch_chain(chain.id)
        except Exception as exc:
            if subscription is not None:
                subscription.unsubscribe()
            raise self._connector_failure("switch_chain", connection.connector, exc) from exc

        self._update_connection(connection.connector.id, chain_id=new_chain_id)
        landed = self.get_chain(new_chain_id)
        return SwitchChainResult(
            chain=ChainInfo(id=landed.id, name=landed.name, symbol=landed.native_symbol),
            unwatch=subscription,
        )

    async def switch_account(
        self, connector: Connector, callback: Watcher | None = None
    ) -> SwitchAccountResult:
        """Make an already connected connector the current one."""

        self._require_mode(Mode.INTERACTIVE)
        connection = self._require_state().connections.get(connector.id)
        if connection is None or not connection.accounts:
            raise self._missing_connection(
                "switch_account", f"Connector {connector.name} Is Not Connected"
            )

        subscription = self.watch_account(callback) if callback else None
        self._set_state(current=connector.id, chain_id=connection.chain_id)
        return SwitchAccountResult(
            account=connection.accounts[0], chain_id=connection.chain_id, unwatch=subscription
        )

    def watch_connections(self, callback: Watcher) -> Subscription:
        self._require_mode(Mode.INTERACTIVE)
        return self._watch(CONNECTIONS_EVENT, callback)

    def watch_chain_id(self, callback: Watcher) -> Subscription:
        self._require_mode(Mode.INTERACTIVE)
        return self._watch(CHAIN_ID_EVENT, callback)

    def watch_account(self, callback: Watcher) -> Subscription:
        self._require_mode(Mode.INTERACTIVE)
        return self._watch(ACCOUNT_EVENT, callback)

    # ------------------------------------------------------------------
    # Internal wiring
    # ------------------------------------------------------------------
    def _require_mode(self, mode: Mode) -> None:
        if self.mode is not mode:
            message = SERVER_ONLY_MESSAGE if mode is Mode.SERVER else INTERACTIVE_ONLY_MESSAGE
            error = InvalidSDKMode(message, details={"mode": self.mode.value})
            log_failure(self.logger, type(self).__name__, "require_mode", error)
            raise error

    def _require_direct(self) -> DirectClient:
        if self._direct is None:
            raise ClientNotFound("Direct Client Not Found")
        return self._direct

    def _require_state(self) -> ConnectorState:
        if self._state is None:
            raise ClientNotFound("Connector Client Not Found")
        return self._state

    def _load_account(self, private_key: str) -> LocalAccount:
        try:
            return cast(LocalAccount, Account.from_key(private_key))
        except Exception as exc:
            raise MissingConfigRequirement(
                "Failed to derive signer account from provided private key",
                cause=exc,
                details={"private_key": censor(private_key)},
            ) from exc

    def _build_direct_client(self, chain: Chain, account: LocalAccount) -> DirectClient:
        web3 = self._web3_factory(self.config.transports[chain.id], self.config.request_timeout)
        self._apply_account_middleware(web3, account)
        return DirectClient(chain=chain, web3=web3, account=account)

    def _apply_account_middleware(self, web3: AsyncWeb3, account: LocalAccount) -> None:
        middleware = SignAndSendRawMiddlewareBuilder.build(account)
        web3.middleware_onion.add(middleware)  # type: ignore[arg-type]
        web3.eth.default_account = account.address

    def _connector_failure(
        self, function: str, connector: Connector, exc: Exception
    ) -> BonkersError:
        if isinstance(exc, BonkersError):
            error = exc
        else:
            error = ConnectorError(
                f"{connector.name} failed during {function}",
                connector_id=connector.id,
                cause=exc,
            )
        log_failure(self.logger, type(self).__name__, function, error)
        return error

    def _missing_connection(self, function: str, message: str) -> ClientNotFound:
        error = ClientNotFound(message)
        log_failure(self.logger, type(self).__name__, function, error)
        return error

    def _settle_status(self) -> None:
        # Other calls may have connected while this one was pending.
        connected = bool(self._require_state().connections)
        self._set_state(
            status=ConnectionState.CONNECTED if connected else ConnectionState.DISCONNECTED
        )

    def _watch(self, event: str, callback: Watcher) -> Subscription:
        def listener(current: Any, previous: Any) -> None:
            callback(current, previous, subscription)

        subscription = self._events.on(event, listener)
        return subscription

    @staticmethod
    def _current_connection(state: ConnectorState) -> Connection | None:
        if state.current is None:
            return None
        return state.connections.get(state.current)

    def _account_state(self, state: ConnectorState) -> AccountState:
        connection = self._current_connection(state)
        if connection is None:
            return AccountState(address=None, status=state.status)
        return AccountState(
            address=connection.accounts[0] if connection.accounts else None,
            addresses=connection.accounts,
            chain_id=connection.chain_id,
            connector_id=connection.connector.id,
            status=state.status,
        )

    def _set_state(self, **changes: Any) -> None:
        previous = self._require_state()
        current = replace(previous, **changes)
        if current == previous:
            return
        self._state = current

        if current.connections != previous.connections:
            self._events.emit(
                CONNECTIONS_EVENT,
                tuple(current.connections.values()),
                tuple(previous.connections.values()),
            )
        if current.chain_id != previous.chain_id:
            self._events.emit(CHAIN_ID_EVENT, current.chain_id, previous.chain_id)

        current_account = self._account_state(current)
        previous_account = self._account_state(previous)
        if current_account != previous_account:
            self._events.emit(ACCOUNT_EVENT, current_account, previous_account)

    def _store_connection(self, connection: Connection, *, make_current: bool) -> None:
        state = self._require_state()
        connections = {**state.connections, connection.connector.id: connection}
        changes: dict[str, Any] = {
            "connections": connections,
            "status": ConnectionState.CONNECTED,
        }
        if make_current or state.current is None:
            changes["current"] = connection.connector.id
            changes["chain_id"] = connection.chain_id
        self._set_state(**changes)

    def _update_connection(self, connector_id: str, **changes: Any) -> None:
        state = self._require_state()
        connection = state.connections.get(connector_id)
        if connection is None:
            return

        updated = replace(connection, **changes)
        state_changes: dict[str, Any] = {
            "connections": {**state.connections, connector_id: updated}
        }
        if state.current == connector_id:
            state_changes["chain_id"] = updated.chain_id
        self._set_state(**state_changes)

    def _drop_connection(self, connector_id: str) -> None:
        for subscription in self._connector_subscriptions.pop(connector_id, ()):
            subscription.unsubscribe()

        state = self._require_state()
        if connector_id not in state.connections:
            return

        connections = {
            key: value for key, value in state.connections.items() if key != connector_id
        }
        current = state.current
        chain_id = state.chain_id
        if current == connector_id:
            current = next(iter(connections), None)
            if current is not None:
                chain_id = connections[current].chain_id

        self._set_state(
            connections=connections,
            current=current,
            chain_id=chain_id,
            status=ConnectionState.CONNECTED if connections else ConnectionState.DISCONNECTED,
        )

    def _bind_connector(self, connector: Connector) -> None:
        if connector.id in self._connector_subscriptions:
            return

        def on_change(payload: dict[str, Any]) -> None:
            changes: dict[str, Any] = {}
            if payload.get("accounts") is not None:
                changes["accounts"] = tuple(payload["accounts"])
            if payload.get("chain_id") is not None:
                changes["chain_id"] = int(payload["chain_id"])
            if changes:
                self._update_connection(connector.id, **changes)

        def on_disconnect(*_args: Any) -> None:
            self._drop_connection(connector.id)

        self._connector_subscriptions[connector.id] = (
            connector.on(CHANGE_EVENT, on_change),
            connector.on(DISCONNECT_EVENT, on_disconnect),
        )
