"""Configuration containers for the Bonkers SDK clients."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union

from web3.providers.async_base import AsyncBaseProvider

from ..constants import DEFAULT_LOGGER_NAME, DEFAULT_RECEIPT_TIMEOUT, DEFAULT_REQUEST_TIMEOUT
from ..exceptions import InvalidChainId, InvalidSDKMode, MissingConfigRequirement
from ..types import ChainId, Mode

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .connectors import Connector

Transport = Union[str, AsyncBaseProvider]


@dataclass(frozen=True)
class Chain:
    """A network the SDK is allowed to talk to."""

    id: ChainId
    name: str
    rpc_urls: tuple[str, ...] = ()
    native_symbol: str = "ETH"
    testnet: bool = False


@dataclass(frozen=True)
class ServerOptions:
    """Options for unattended usage signing with a local private key.

    Never ship a private key to an end-user environment; expose a server
    endpoint instead.
    """

    chains: Sequence[Chain]
    private_key: str
    transports: Mapping[ChainId, Transport] | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT


@dataclass(frozen=True)
class ConnectorConfig:
    """Chains and wallet connectors available in interactive mode."""

    chains: Sequence[Chain]
    connectors: Sequence[Connector] = field(default_factory=tuple)
    transports: Mapping[ChainId, Transport] | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT


@dataclass(frozen=True)
class InteractiveOptions:
    """Options for user-operated wallets driven through connectors."""

    connector_config: ConnectorConfig


Options = Union[ServerOptions, InteractiveOptions]


@dataclass(frozen=True)
class Config:
    """Aggregated configuration used to construct the SDK."""

    mode: Mode
    options: Options
    logger: logging.Logger | None = None

    @property
    def chains(self) -> tuple[Chain, ...]:
        return tuple(_chain_source(self).chains)

    @property
    def transports(self) -> Mapping[ChainId, Transport]:
        return _chain_source(self).transports or {}

    @property
    def request_timeout(self) -> float:
        return _chain_source(self).request_timeout

    @property
    def receipt_timeout(self) -> float:
        return _chain_source(self).receipt_timeout


def _chain_source(config: Config) -> ServerOptions | ConnectorConfig:
    options = config.options
    if isinstance(options, ServerOptions):
        return options
    if isinstance(options, InteractiveOptions):
        return options.connector_config
    raise MissingConfigRequirement(
        "Unsupported options object", details={"options": type(options).__name__}
    )


def default_transports(chains: Sequence[Chain]) -> dict[ChainId, Transport]:
    """Map each chain id to the first RPC URL declared on the chain."""
    if not chains:
        raise MissingConfigRequirement("Must Have At Least 1 Chain")

    transports: dict[ChainId, Transport] = {}
    for chain in chains:
        if not chain.rpc_urls:
            raise MissingConfigRequirement(
                f"Chain {chain.name} [{chain.id}] has no RPC url and no transport",
                details={"chain_id": chain.id},
            )
        transports[chain.id] = chain.rpc_urls[0]
    return transports


def prepare_config(config: Config) -> Config:
    """Validate a config and return a copy with defaults filled in.

    Every missing requirement is reported here, at construction time.
    """

    if not isinstance(config.mode, Mode):
        try:
            mode = Mode(config.mode)
        except ValueError as exc:
            raise InvalidSDKMode(
                f"Unknown SDK mode: {config.mode!r}", cause=exc, details={"mode": config.mode}
            ) from exc
        config = replace(config, mode=mode)

    logger = config.logger or logging.getLogger(DEFAULT_LOGGER_NAME)
    options = config.options

    if config.mode is Mode.SERVER:
        if not isinstance(options, ServerOptions):
            raise MissingConfigRequirement(
                "Server mode requires ServerOptions",
                details={"options": type(options).__name__},
            )
        if not options.private_key:
            raise MissingConfigRequirement("Missing PrivateKey")
        if len(options.chains) < 1:
            raise MissingConfigRequirement("Must Have At Least 1 Chain")

        transports = dict(options.transports or {})
        missing = [chain for chain in options.chains if chain.id not in transports]
        if missing:
            transports.update(default_transports(missing))
        options = replace(options, chains=tuple(options.chains), transports=transports)

    elif config.mode is Mode.INTERACTIVE:
        if not isinstance(options, InteractiveOptions):
            raise MissingConfigRequirement(
                "Interactive mode requires InteractiveOptions",
                details={"options": type(options).__name__},
            )
        connector_config = options.connector_config
        if connector_config is None:
            raise MissingConfigRequirement("Missing Connector Config")
        if len(connector_config.chains) < 1:
            raise MissingConfigRequirement("Must Have At Least 1 Chain")
        if len(connector_config.connectors) < 1:
            raise MissingConfigRequirement("Must Have At Least 1 Connector")

        transports = dict(connector_config.transports or {})
        missing = [chain for chain in connector_config.chains if chain.id not in transports]
        if missing:
            transports.update(default_transports(missing))
        options = InteractiveOptions(
            connector_config=replace(
                connector_config,
                chains=tuple(connector_config.chains),
                connectors=tuple(connector_config.connectors),
                transports=transports,
            )
        )

    else:  # pragma: no cover - Mode has two members
        raise InvalidSDKMode(f"Unknown SDK mode: {config.mode!r}")

    return Config(mode=config.mode, options=options, logger=logger)


def get_chain_by_id(config: Config, chain_id: ChainId) -> Chain:
    """Return the configured chain with ``chain_id`` or raise ``InvalidChainId``."""
    for chain in config.chains:
        if chain.id == chain_id:
            return chain

    raise InvalidChainId(
        f"Chain Id [{chain_id}] Does Not Exist On The Provided Chains", chain_id=chain_id
    )
