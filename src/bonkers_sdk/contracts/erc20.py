"""Generic ERC-20 token helper."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from eth_typing import ABI

from ..abi import ERC20_abi
from ..clients.connections import ClientManager
from ..clients.transactions import ContractDispatcher
from ..exceptions import MissingRequiredParams
from ..resolver import ContractResolver
from ..types import Address, BaseParams, ContractInteractionResult
from ..utils import to_checksum
from .base import BaseContract


class ERC20(BaseContract):
    """Read and move balances of any ERC-20 token.

    The token address is chosen with :meth:`use_token`; the standard ABI is
    used unless a custom one is supplied with :meth:`use_abi`.
    """

    def __init__(
        self,
        clients: ClientManager,
        resolver: ContractResolver,
        dispatcher: ContractDispatcher,
        token: Address | None = None,
        *,
        abi: Sequence[Any] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._token_abi: ABI = tuple(abi or ERC20_abi)  # type: ignore[assignment]
        params = BaseParams(to_checksum(token), self._token_abi) if token else None
        super().__init__(clients, resolver, dispatcher, params, logger=logger)

    def use_token(self, token: Address) -> ERC20:
        self._params = BaseParams(to_checksum(token), self._token_abi)
        return self

    def use_abi(self, abi: Sequence[Any]) -> ERC20:
        self._token_abi = tuple(abi)  # type: ignore[assignment]
        if self._params is not None:
            self._params = BaseParams(self._params.address, self._token_abi)
        return self

    @property
    def has_token(self) -> bool:
        return self._params is not None

    def _check_params_presence(self) -> BaseParams:
        if self._params is None:
            raise MissingRequiredParams("Token Address")
        return self._params

    async def get_params(self, chain_id: int, address: Address) -> BaseParams:
        """Tokens report no contract type; only the chain id is validated."""
        self.clients.get_chain(chain_id)
        return BaseParams(to_checksum(address), self._token_abi)

    # Reads
    async def name(self) -> str:
        return await self._read("name")

    async def symbol(self) -> str:
        return await self._read("symbol")

    async def decimals(self) -> int:
        return await self._read("decimals")

    async def total_supply(self) -> int:
        return await self._read("totalSupply")

    async def balance_of(self, account: Address) -> int:
        return await self._read("balanceOf", to_checksum(account))

    async def allowance(self, owner: Address, spender: Address) -> int:
        return await self._read("allowance", to_checksum(owner), to_checksum(spender))

    # Writes
    async def approve(self, spender: Address, amount: int) -> ContractInteractionResult:
        return await self._write("approve", to_checksum(spender), int(amount))

    async def transfer(self, to: Address, amount: int) -> ContractInteractionResult:
        return await self._write("transfer", to_checksum(to), int(amount))

    async def transfer_from(
        self, sender: Address, to: Address, amount: int
    ) -> ContractInteractionResult:
        return await self._write(
            "transferFrom", to_checksum(sender), to_checksum(to), int(amount)
        )
