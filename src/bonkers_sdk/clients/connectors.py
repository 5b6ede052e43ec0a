"""Wallet connectors and observer handles for interactive mode."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from eth_typing import ChecksumAddress
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.types import RPCEndpoint

from ..constants import DEFAULT_REQUEST_TIMEOUT
from ..exceptions import ConnectorError
from ..types import ChainId
from ..utils import to_checksum

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]

CHANGE_EVENT = "change"
DISCONNECT_EVENT = "disconnect"

# EIP-1193 provider error codes
USER_REJECTED_REQUEST = 4001
UNRECOGNIZED_CHAIN = 4902


class Subscription:
    """Handle returned by every ``watch``/``on`` call.

    Disposing detaches the listener; disposing twice is a no-op.
    """

    def __init__(self, detach: Callable[[], None]):
        self._detach = detach
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        self._detach()

    def __call__(self) -> None:
        self.unsubscribe()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *_exc: Any) -> None:
        self.unsubscribe()


class EventEmitter:
    """Synchronous listener registry keyed by event name."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event: str, listener: Listener) -> Subscription:
        listeners = self._listeners.setdefault(event, [])
        listeners.append(listener)

        def detach() -> None:
            current = self._listeners.get(event, [])
            if listener in current:
                current.remove(listener)

        return Subscription(detach)

    def emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners.get(event, ())):
            try:
                listener(*args)
            except Exception:
                logger.exception("Listener for %s event failed", event)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))


class Connector(ABC):
    """Provider of wallet-based signing in interactive mode.

    Implementations emit ``"change"`` with a ``{"accounts": ..., "chain_id": ...}``
    payload whenever the wallet reports new accounts or a new chain, and
    ``"disconnect"`` when the session ends.
    """

    id: str
    name: str

    def __init__(self) -> None:
        self._events = EventEmitter()

    def on(self, event: str, listener: Listener) -> Subscription:
        return self._events.on(event, listener)

    def emit(self, event: str, *args: Any) -> None:
        self._events.emit(event, *args)

    @property
    @abstractmethod
    def web3(self) -> AsyncWeb3:
        """Signing-capable handle routed through the wallet."""

    @abstractmethod
    async def connect(
        self, chain_id: ChainId | None = None
    ) -> tuple[tuple[ChecksumAddress, ...], ChainId]:
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        pass

    @abstractmethod
    async def get_accounts(self) -> tuple[ChecksumAddress, ...]:
        pass

    @abstractmethod
    async def get_chain_id(self) -> ChainId:
        pass

    @abstractmethod
    async def switch_chain(self, chain_id: ChainId) -> ChainId:
        pass

    @abstractmethod
    async def is_authorized(self) -> bool:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"


class RPCWalletConnector(Connector):
    """Connector for wallets exposing an EIP-1193 JSON-RPC endpoint over HTTP.

    Desktop wallets such as Frame serve this interface locally; account
    access and chain switches are approved by the user inside the wallet.
    """

    def __init__(
        self,
        url: str,
        *,
        name: str = "RPC Wallet",
        connector_id: str | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        super().__init__()
        self.url = url
        self.name = name
        self.id = connector_id or name.lower().replace(" ", "-")
        self._web3 = AsyncWeb3(AsyncHTTPProvider(url, request_kwargs={"timeout": request_timeout}))
        self._accounts: tuple[ChecksumAddress, ...] = ()
        self._chain_id: ChainId | None = None

    @property
    def web3(self) -> AsyncWeb3:
        return self._web3

    async def connect(
        self, chain_id: ChainId | None = None
    ) -> tuple[tuple[ChecksumAddress, ...], ChainId]:
        accounts = await self._request_accounts("eth_requestAccounts")
        current_chain = await self.get_chain_id()

        if chain_id is not None and chain_id != current_chain:
            current_chain = await self.switch_chain(chain_id)

        self._accounts = accounts
        self._chain_id = current_chain
        logger.info(
            "Connected %s with %d account(s) on chain %s", self.name, len(accounts), current_chain
        )
        return accounts, current_chain

    async def disconnect(self) -> None:
        self._accounts = ()
        self._chain_id = None
        self.emit(DISCONNECT_EVENT)

    async def get_accounts(self) -> tuple[ChecksumAddress, ...]:
        accounts = await self._request_accounts("eth_accounts")
        if self._accounts and accounts != self._accounts:
            self._accounts = accounts
            self.emit(CHANGE_EVENT, {"accounts": accounts})
        return accounts

    async def get_chain_id(self) -> ChainId:
        raw = await self._request("eth_chainId", [])
        return int(raw, 16) if isinstance(raw, str) else int(raw)

    async def switch_chain(self, chain_id: ChainId) -> ChainId:
        await self._request("wallet_switchEthereumChain", [{"chainId": hex(chain_id)}])
        self._chain_id = chain_id
        self.emit(CHANGE_EVENT, {"chain_id": chain_id})
        return chain_id

    async def is_authorized(self) -> bool:
        try:
            accounts = await self._request_accounts("eth_accounts")
        except ConnectorError:
            return False
        return len(accounts) > 0

    # ------------------------------------------------------------------
    # Internal wiring
    # ------------------------------------------------------------------
    async def _request_accounts(self, method: str) -> tuple[ChecksumAddress, ...]:
        raw = await self._request(method, [])
        return tuple(to_checksum(account) for account in raw or ())

    async def _request(self, method: str, params: list[Any]) -> Any:
        try:
            response = await self._web3.provider.make_request(RPCEndpoint(method), params)
        except Exception as exc:
            raise ConnectorError(
                f"{self.name} is unavailable",
                connector_id=self.id,
                cause=exc,
                details={"method": method, "url": self.url},
            ) from exc

        error = response.get("error")
        if error:
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise ConnectorError(
                f"{self.name} rejected {method}: {message}",
                connector_id=self.id,
                code=code,
                details={"method": method},
            )
        return response.get("result")
