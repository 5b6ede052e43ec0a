"""Facade for reward-distributing Vault contracts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..types import (
    Address,
    CallResult,
    ContractInteractionResult,
    ContractType,
    ContractVersion,
    ControllerLimits,
    Receiver,
    VaultInfo,
)
from ..utils import to_checksum
from .base import BaseContract


def _limits(raw: Sequence[Any]) -> ControllerLimits:
    quota, reward_allowance = raw
    return ControllerLimits(quota=str(quota), reward_allowance=str(reward_allowance))


class Vault(BaseContract):
    """Operate a Vault: controller permits, limits and reward payouts."""

    contract_kind = ContractType.VAULT

    # Reads
    async def contract_type(self) -> str:
        return await self._read("contractType")

    async def version(self) -> ContractVersion:
        return await self._read("version")

    async def get_vault_info(self) -> VaultInfo:
        return VaultInfo.from_raw(await self._read("getVaultInfo"))

    async def reward_pool(self) -> int:
        return await self._read("rewardPool")

    async def controller_limits(self, controller: Address) -> ControllerLimits:
        return _limits(await self._read("controllerLimits", to_checksum(controller)))

    async def default_controller_limits(self) -> ControllerLimits:
        return _limits(await self._read("defaultControllerLimits"))

    async def controller_limits_enabled(self) -> bool:
        return await self._read("controllerLimitsEnabled")

    async def is_controller(self, account: Address) -> bool:
        return await self._read("isController", to_checksum(account))

    # Writes
    async def toggle_controller_limits(self) -> ContractInteractionResult:
        return await self._write("toggleControllerLimits")

    async def set_controller_limits(
        self, controller: Address, quota: int, allowance: int
    ) -> ContractInteractionResult:
        return await self._write(
            "setControllerLimits", to_checksum(controller), int(quota), int(allowance)
        )

    async def set_default_controller_limits(
        self, quota: int, allowance: int
    ) -> ContractInteractionResult:
        return await self._write("setDefaultControllerLimits", int(quota), int(allowance))

    async def update_reward_token(self, token_address: Address) -> ContractInteractionResult:
        return await self._write("updateRewardToken", to_checksum(token_address))

    async def withdraw_token(
        self, token_address: Address, amount: int
    ) -> ContractInteractionResult:
        return await self._write("withdrawToken", to_checksum(token_address), int(amount))

    async def change_vault_owner(self, new_owner: Address) -> ContractInteractionResult:
        return await self._write("changeVaultOwner", to_checksum(new_owner))

    async def reward(self, to: Address, amount: int) -> ContractInteractionResult:
        return await self._write("reward", to_checksum(to), int(amount))

    async def reward_batch(self, receivers: Sequence[Receiver]) -> ContractInteractionResult:
        outcome = await self._write(
            "rewardBatch", [receiver.as_tuple() for receiver in receivers]
        )
        return self._map_result(
            outcome, lambda raw: [CallResult.from_raw(item) for item in raw or ()]
        )

    async def grant_permit(self, controller: Address) -> ContractInteractionResult:
        return await self._write("grantPermit", to_checksum(controller))

    async def revoke_permit(self, controller: Address) -> ContractInteractionResult:
        return await self._write("revokePermit", to_checksum(controller))
