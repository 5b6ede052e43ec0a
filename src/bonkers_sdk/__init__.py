"""Bonkers SDK - typed asyncio client for Controller, Vault and VaultFactory contracts.

The same API works with a local private key (server mode) or with a
user-operated wallet connector (interactive mode).
"""

from .clients import (
    Chain,
    ClientManager,
    Config,
    Connector,
    ConnectorConfig,
    ContractDispatcher,
    InteractiveOptions,
    RPCWalletConnector,
    ServerOptions,
    Subscription,
    prepare_config,
)
from .contracts import ERC20, BaseContract, Controller, Vault, VaultFactory
from .exceptions import (
    BonkersError,
    ClientNotFound,
    ConnectorError,
    ContractAbiNotFound,
    ContractInteractionFailed,
    ErrorKind,
    InvalidChainId,
    InvalidClientType,
    InvalidContract,
    InvalidContractType,
    InvalidContractVersion,
    InvalidSDKMode,
    MissingConfigRequirement,
    MissingRequiredParams,
    UnknownError,
)
from .registry import DEFAULT_REGISTRY, AbiRegistry
from .resolver import ContractResolver
from .sdk import BonkersSDK
from .types import (
    BaseParams,
    Call3,
    Call3Value,
    CallResult,
    ChainInfo,
    ClientType,
    ConnectionState,
    ContractCall,
    ContractInteractionResult,
    ContractType,
    ControllerRole,
    Mode,
    Receiver,
    Status,
    UpgradeParams,
)
from .utils import base64_decode, base64_encode, format_contract_type

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "BonkersSDK",
    # Clients and configuration
    "Chain",
    "ClientManager",
    "Config",
    "Connector",
    "ConnectorConfig",
    "ContractDispatcher",
    "ContractResolver",
    "InteractiveOptions",
    "RPCWalletConnector",
    "ServerOptions",
    "Subscription",
    "prepare_config",
    # Contracts
    "BaseContract",
    "Controller",
    "ERC20",
    "Vault",
    "VaultFactory",
    "AbiRegistry",
    "DEFAULT_REGISTRY",
    # Types and enums
    "BaseParams",
    "Call3",
    "Call3Value",
    "CallResult",
    "ChainInfo",
    "ClientType",
    "ConnectionState",
    "ContractCall",
    "ContractInteractionResult",
    "ContractType",
    "ControllerRole",
    "Mode",
    "Receiver",
    "Status",
    "UpgradeParams",
    # Exceptions
    "BonkersError",
    "ErrorKind",
    "UnknownError",
    "ConnectorError",
    "ContractInteractionFailed",
    "ContractAbiNotFound",
    "ClientNotFound",
    "MissingConfigRequirement",
    "MissingRequiredParams",
    "InvalidSDKMode",
    "InvalidContract",
    "InvalidContractVersion",
    "InvalidContractType",
    "InvalidChainId",
    "InvalidClientType",
    # Utility functions
    "base64_decode",
    "base64_encode",
    "format_contract_type",
]
