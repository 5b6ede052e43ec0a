"""Connectivity layer: configuration, wallet connectors, clients and dispatch."""

from .config import (
    Chain,
    Config,
    ConnectorConfig,
    InteractiveOptions,
    ServerOptions,
    get_chain_by_id,
    prepare_config,
)
from .connections import ClientManager, DirectClient, Signer, build_web3
from .connectors import Connector, EventEmitter, RPCWalletConnector, Subscription
from .transactions import ContractDispatcher

__all__ = [
    "Chain",
    "ClientManager",
    "Config",
    "Connector",
    "ConnectorConfig",
    "ContractDispatcher",
    "DirectClient",
    "EventEmitter",
    "InteractiveOptions",
    "RPCWalletConnector",
    "ServerOptions",
    "Signer",
    "Subscription",
    "build_web3",
    "get_chain_by_id",
    "prepare_config",
]
