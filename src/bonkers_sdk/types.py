"""Type definitions and data models for the Bonkers SDK."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any

from eth_typing import ABI, ChecksumAddress, HexStr
from web3 import Web3

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .clients.connectors import Connector, Subscription


class Mode(str, Enum):
    """How the SDK signs: with a private key or through a wallet connector."""

    SERVER = "server"
    INTERACTIVE = "interactive"


class ClientType(str, Enum):
    """Kind of connectivity handle owned by the client manager."""

    DIRECT = "direct"
    CONNECTOR = "connector"


class ConnectionState(str, Enum):
    """Connector connection status (interactive mode only)."""

    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTED = "disconnected"
    RECONNECTING = "reconnecting"


class ContractType(str, Enum):
    """Value returned by ``contractType()`` on every managed contract."""

    CONTROLLER = "CONTROLLER"
    VAULT = "VAULT"
    VAULT_FACTORY = "VAULT FACTORY"


class Status(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class ControllerRole(IntEnum):
    """Roles understood by ``Controller.hasControllerRole``."""

    BOT = 0
    CALLER = 1
    ERC = 2


Address = str
ChainId = int
ContractVersion = str
FormattedContractType = str


@dataclass(frozen=True)
class ChainInfo:
    """Normalised view of the chain a client is currently using."""

    id: ChainId
    name: str
    symbol: str | None = None


@dataclass(frozen=True)
class BaseParams:
    """Resolved identity of a deployed contract instance."""

    address: ChecksumAddress
    abi: ABI

    def function_names(self) -> list[str]:
        return [
            item["name"]
            for item in self.abi
            if item.get("type") in ("function", "event", "error") and "name" in item
        ]


@dataclass(frozen=True)
class ContractCall:
    """Parameters for a single contract read or write."""

    address: Address
    abi: ABI
    function_name: str
    args: Sequence[Any] = ()
    value: int = 0


@dataclass(frozen=True)
class ContractInteractionResult:
    """Normalised outcome of a state-changing call."""

    status: Status
    result: Any = None
    tx_hash: HexStr | None = None
    receipt: dict[str, Any] | None = None

    @property
    def success(self) -> bool:
        return self.status is Status.SUCCESS


@dataclass(frozen=True)
class UpgradeParams:
    """Calldata description used by ``upgrade_to_and_call``."""

    function_name: str
    args: Sequence[Any] = ()
    value: int = 0


@dataclass(frozen=True)
class Receiver:
    receiver: Address
    amount: int

    def as_tuple(self) -> tuple[str, int]:
        return (Web3.to_checksum_address(self.receiver), int(self.amount))


@dataclass(frozen=True)
class CallResult:
    """Outcome of one call inside a batch (``Result`` struct on chain)."""

    success: bool
    return_data: HexStr

    @classmethod
    def from_raw(cls, raw: Sequence[Any]) -> CallResult:
        success, data = raw
        if isinstance(data, bytes | bytearray):
            data = "0x" + bytes(data).hex()
        return cls(success=bool(success), return_data=HexStr(data))


@dataclass(frozen=True)
class Call3:
    target: Address
    allow_failure: bool
    call_data: HexStr | bytes

    def as_tuple(self) -> tuple[str, bool, HexStr | bytes]:
        return (Web3.to_checksum_address(self.target), self.allow_failure, self.call_data)


@dataclass(frozen=True)
class Call3Value:
    target: Address
    allow_failure: bool
    value: int
    call_data: HexStr | bytes

    def as_tuple(self) -> tuple[str, bool, int, HexStr | bytes]:
        return (
            Web3.to_checksum_address(self.target),
            self.allow_failure,
            int(self.value),
            self.call_data,
        )


@dataclass(frozen=True)
class VaultInfo:
    id: str
    version: str
    project_owner: Address
    project_name: str
    reward_token: Address
    created_at: str
    deployer: Address

    @classmethod
    def from_raw(cls, raw: Sequence[Any]) -> VaultInfo:
        vault_id, version, project_owner, project_name, reward_token, created_at, deployer = raw
        return cls(
            id=str(vault_id),
            version=str(version),
            project_owner=project_owner,
            project_name=project_name,
            reward_token=reward_token,
            created_at=str(created_at),
            deployer=deployer,
        )


@dataclass(frozen=True)
class ControllerLimits:
    quota: str
    reward_allowance: str


@dataclass(frozen=True)
class ImplementationDetails:
    implementation_address: Address
    contract_type: str
    version: str


@dataclass(frozen=True)
class CreationFee:
    eth_fee: str
    erc20_fee: str


@dataclass(frozen=True)
class Connection:
    """A wallet session held by the connector client."""

    connector: Connector
    accounts: tuple[ChecksumAddress, ...]
    chain_id: ChainId


@dataclass(frozen=True)
class AccountState:
    """Snapshot of the active account as seen by account watchers."""

    address: ChecksumAddress | None
    addresses: tuple[ChecksumAddress, ...] = ()
    chain_id: ChainId | None = None
    connector_id: str | None = None
    status: ConnectionState = ConnectionState.DISCONNECTED


@dataclass(frozen=True)
class ConnectResult:
    accounts: tuple[ChecksumAddress, ...]
    chain_id: ChainId
    unwatch: Subscription | None = None


@dataclass(frozen=True)
class SwitchChainResult:
    chain: ChainInfo
    unwatch: Subscription | None = None


@dataclass(frozen=True)
class SwitchAccountResult:
    account: ChecksumAddress
    chain_id: ChainId
    unwatch: Subscription | None = None


@dataclass(frozen=True)
class ConnectorState:
    """Connector bookkeeping snapshot; replaced on every transition."""

    status: ConnectionState = ConnectionState.DISCONNECTED
    chain_id: ChainId | None = None
    current: str | None = None
    connections: dict[str, Connection] = field(default_factory=dict)
