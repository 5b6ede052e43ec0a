"""Facade for the permissioned Controller contract."""

from __future__ import annotations

from collections.abc import Sequence

from eth_typing import HexStr

from ..types import (
    Address,
    Call3,
    Call3Value,
    CallResult,
    ContractInteractionResult,
    ContractType,
    ContractVersion,
    ControllerRole,
    Receiver,
)
from ..utils import to_checksum
from .base import BaseContract


def _hex(data: bytes | str | None) -> HexStr | None:
    if data is None or isinstance(data, str):
        return data
    return HexStr("0x" + bytes(data).hex())


def _results(raw: Sequence[Sequence[object]] | None) -> list[CallResult]:
    return [CallResult.from_raw(item) for item in raw or ()]


class Controller(BaseContract):
    """Operate a Controller: role management, batched calls and vault rewards."""

    contract_kind = ContractType.CONTROLLER

    # Reads
    async def contract_type(self) -> str:
        return await self._read("contractType")

    async def version(self) -> ContractVersion:
        return await self._read("version")

    async def owner(self) -> Address:
        return await self._read("owner")

    async def multicall_address(self) -> Address:
        return await self._read("multicallAddress")

    async def fee_receiver(self) -> Address:
        return await self._read("feeReceiver")

    async def has_controller_role(self, role: ControllerRole | int, account: Address) -> bool:
        return await self._read("hasControllerRole", int(role), to_checksum(account))

    # Writes
    async def call(
        self, target_contract: Address, call_data: HexStr | bytes
    ) -> ContractInteractionResult:
        """Forward arbitrary calldata to ``target_contract`` through the controller."""

        outcome = await self._write("call", to_checksum(target_contract), call_data)
        return self._map_result(outcome, _hex)

    async def call_batch(
        self, calls: Sequence[Call3], value: int = 0
    ) -> ContractInteractionResult:
        outcome = await self._write(
            "callBatch", [call.as_tuple() for call in calls], value=int(value)
        )
        return self._map_result(outcome, _results)

    async def call_batch_value(self, calls: Sequence[Call3Value]) -> ContractInteractionResult:
        """Run a batch where each call forwards its own value; the total is attached."""

        total = sum(int(call.value) for call in calls)
        outcome = await self._write(
            "callBatchValue", [call.as_tuple() for call in calls], value=total
        )
        return self._map_result(outcome, _results)

    async def transfer_erc20_token(
        self, token_address: Address, receiver: Address, amount: int
    ) -> ContractInteractionResult:
        return await self._write(
            "transferERC20Token", to_checksum(token_address), to_checksum(receiver), int(amount)
        )

    async def change_controller_owner(self, new_owner: Address) -> ContractInteractionResult:
        return await self._write("changeControllerOwner", to_checksum(new_owner))

    async def add_controller_role(
        self, role: ControllerRole | int, account: Address
    ) -> ContractInteractionResult:
        return await self._write("addControllerRole", int(role), to_checksum(account))

    async def remove_controller_role(
        self, role: ControllerRole | int, account: Address
    ) -> ContractInteractionResult:
        return await self._write("removeControllerRole", int(role), to_checksum(account))

    async def set_fee_receiver(self, new_fee_receiver: Address) -> ContractInteractionResult:
        return await self._write("setFeeReceiver", to_checksum(new_fee_receiver))

    async def set_multicall_address(
        self, new_multicall_address: Address
    ) -> ContractInteractionResult:
        return await self._write("setMulticallAddress", to_checksum(new_multicall_address))

    async def create_vault(
        self,
        target_vault_factory: Address,
        project_owner: Address,
        reward_token: Address,
        project_name: str,
    ) -> ContractInteractionResult:
        """Deploy a vault through ``target_vault_factory``; ``result`` is its address."""

        return await self._write(
            "createVault",
            to_checksum(target_vault_factory),
            to_checksum(project_owner),
            to_checksum(reward_token),
            project_name,
        )

    async def vault_reward(
        self, target_vault: Address, to: Address, amount: int
    ) -> ContractInteractionResult:
        return await self._write(
            "vaultReward", to_checksum(target_vault), to_checksum(to), int(amount)
        )

    async def vault_reward_batch(
        self, target_vault: Address, receivers: Sequence[Receiver]
    ) -> ContractInteractionResult:
        outcome = await self._write(
            "vaultRewardBatch",
            to_checksum(target_vault),
            [receiver.as_tuple() for receiver in receivers],
        )
        return self._map_result(outcome, _results)
