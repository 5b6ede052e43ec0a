"""Behaviour shared by every contract facade."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any, ClassVar

from eth_typing import ABI, ChecksumAddress, HexStr

from ..clients.connections import ClientManager
from ..clients.transactions import ContractDispatcher
from ..exceptions import BonkersError, InvalidContract, MissingRequiredParams
from ..resolver import ContractResolver
from ..types import (
    Address,
    BaseParams,
    ChainId,
    ContractCall,
    ContractInteractionResult,
    ContractType,
    ContractVersion,
    Mode,
    UpgradeParams,
)
from ..utils import is_zero_address, log_failure, to_checksum


class BaseContract:
    """Hold the resolved contract identity and route calls to the dispatcher.

    ``params`` is replaced as a whole by :meth:`use_new_contract`; facades
    never mutate the address or ABI of an existing instance.
    """

    contract_kind: ClassVar[ContractType | None] = None

    def __init__(
        self,
        clients: ClientManager,
        resolver: ContractResolver,
        dispatcher: ContractDispatcher,
        params: BaseParams | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.clients = clients
        self.resolver = resolver
        self.dispatcher = dispatcher
        self.logger = logger or clients.logger
        self._params = params
        self.logger.debug(
            "%s created for %s with %d ABI entries",
            type(self).__name__,
            params.address if params else None,
            len(params.abi) if params else 0,
        )

    # ------------------------------------------------------------------
    # Contract identity
    # ------------------------------------------------------------------
    @property
    def params(self) -> BaseParams | None:
        return self._params

    @property
    def address(self) -> ChecksumAddress | None:
        return self._params.address if self._params else None

    @property
    def abi(self) -> ABI | None:
        return self._params.abi if self._params else None

    @property
    def mode(self) -> Mode:
        return self.clients.mode

    def use_new_contract(self, chain_id: ChainId, params: BaseParams) -> BaseContract:
        """Point the facade at another contract, switching chain in server mode."""

        try:
            if self.mode is Mode.SERVER:
                self.clients.use_chain(chain_id)
            if is_zero_address(params.address):
                raise InvalidContract("Can Not Be Zero Address")

            self._params = BaseParams(address=to_checksum(params.address), abi=params.abi)
        except BonkersError as exc:
            log_failure(self.logger, type(self).__name__, "use_new_contract", exc)
            raise

        self.logger.info("Contract Changed To: %s", self._params.address)
        return self

    async def get_params(self, chain_id: ChainId, address: Address) -> BaseParams:
        """Verify ``address`` on ``chain_id`` and return its registry ABI."""

        if self.contract_kind is None:
            raise MissingRequiredParams(
                f"{type(self).__name__} has no contract type to verify against"
            )
        chain = self.clients.get_chain(chain_id)
        return await self.resolver.resolve(chain, address, self.contract_kind)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    async def reader(self, call: ContractCall) -> Any:
        return await self.dispatcher.read(call)

    async def writer(self, call: ContractCall) -> ContractInteractionResult:
        return await self.dispatcher.write(call)

    async def _read(self, function_name: str, *args: Any) -> Any:
        params = self._require_params(function_name)
        return await self.reader(ContractCall(params.address, params.abi, function_name, args))

    async def _write(
        self, function_name: str, *args: Any, value: int = 0
    ) -> ContractInteractionResult:
        params = self._require_params(function_name)
        return await self.writer(
            ContractCall(params.address, params.abi, function_name, args, value=value)
        )

    @staticmethod
    def _map_result(
        outcome: ContractInteractionResult, mapper: Callable[[Any], Any]
    ) -> ContractInteractionResult:
        return replace(outcome, result=mapper(outcome.result))

    def _check_params_presence(self) -> BaseParams:
        if self._params is None or not self._params.abi:
            raise MissingRequiredParams("Contract Abi")
        if not self._params.address:
            raise MissingRequiredParams("Contract Address")
        return self._params

    def _require_params(self, function_name: str) -> BaseParams:
        try:
            return self._check_params_presence()
        except MissingRequiredParams as exc:
            log_failure(self.logger, type(self).__name__, function_name, exc)
            raise

    # ------------------------------------------------------------------
    # Shared queries and upgrades
    # ------------------------------------------------------------------
    async def get_contract_type(self, address: Address) -> str:
        return await self.resolver.contract_type(self.clients.chain().id, address)

    async def get_contract_version(self, address: Address) -> ContractVersion:
        return await self.resolver.contract_version(self.clients.chain().id, address)

    async def implementation_address(self) -> Address:
        params = self._require_params("implementation_address")
        return await self.resolver.implementation_address(self.clients.chain().id, params.address)

    async def balance(self) -> int:
        params = self._require_params("balance")
        return await self.clients.balance_of(params.address)

    async def balance_of(self, account: Address) -> int:
        return await self.clients.balance_of(account)

    async def upgrade_to_and_call(
        self,
        new_implementation: Address,
        params: UpgradeParams | HexStr | bytes | None = None,
    ) -> ContractInteractionResult:
        """Upgrade the proxy, optionally calling into the new implementation.

        ``params`` is either ready calldata or an :class:`UpgradeParams`
        encoded against the current ABI; without it no call is made.
        """

        contract_params = self._require_params("upgrade_to_and_call")
        value = 0
        if params is None:
            call_data: HexStr | bytes = HexStr("0x")
        elif isinstance(params, UpgradeParams):
            call_data = self._encode_call(contract_params, params.function_name, params.args)
            value = int(params.value)
        else:
            call_data = params

        return await self._write(
            "upgradeToAndCall", to_checksum(new_implementation), call_data, value=value
        )

    def _encode_call(
        self, params: BaseParams, function_name: str, args: Sequence[Any]
    ) -> HexStr:
        web3, _ = self.clients.reader()
        contract = web3.eth.contract(address=params.address, abi=list(params.abi))
        try:
            return HexStr(contract.encode_abi(function_name, args=list(args)))
        except Exception as exc:
            error = MissingRequiredParams(
                f"Can Not Encode {function_name} With The Given Arguments",
                cause=exc,
                details={"args": list(args)},
            )
            log_failure(self.logger, type(self).__name__, "upgrade_to_and_call", error)
            raise error from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.address!r})"
