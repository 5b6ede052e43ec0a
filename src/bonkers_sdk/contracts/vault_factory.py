"""Facade for the VaultFactory contract that deploys vaults."""

from __future__ import annotations

from ..types import (
    Address,
    ContractInteractionResult,
    ContractType,
    ContractVersion,
    CreationFee,
    ImplementationDetails,
    VaultInfo,
)
from ..utils import to_checksum
from .base import BaseContract


class VaultFactory(BaseContract):
    """Operate a VaultFactory: deployment fees, implementation and vault registry."""

    contract_kind = ContractType.VAULT_FACTORY

    # Reads
    async def contract_type(self) -> str:
        return await self._read("contractType")

    async def version(self) -> ContractVersion:
        return await self._read("version")

    async def get_vault_info(self, vault: Address) -> VaultInfo:
        return VaultInfo.from_raw(await self._read("getVaultInfo", to_checksum(vault)))

    async def get_implementation_details(self) -> ImplementationDetails:
        implementation, contract_type, version = await self._read("getImplementationDetails")
        return ImplementationDetails(
            implementation_address=implementation,
            contract_type=contract_type,
            version=version,
        )

    async def creation_fee(self) -> CreationFee:
        eth_fee, erc20_fee = await self._read("creationFee")
        return CreationFee(eth_fee=str(eth_fee), erc20_fee=str(erc20_fee))

    async def fee_receiver(self) -> Address:
        return await self._read("feeReceiver")

    async def total_vaults(self) -> int:
        return int(await self._read("totalVaults"))

    async def owner(self) -> Address:
        return await self._read("owner")

    async def erc20_payment_token(self) -> Address:
        return await self._read("erc20PaymentToken")

    async def is_controller(self, account: Address) -> bool:
        return await self._read("isController", to_checksum(account))

    # Writes
    async def change_vault_factory_owner(self, new_owner: Address) -> ContractInteractionResult:
        return await self._write("changeVaultFactoryOwner", to_checksum(new_owner))

    async def update_implementation(
        self, new_implementation: Address
    ) -> ContractInteractionResult:
        return await self._write("updateImplementation", to_checksum(new_implementation))

    async def update_vault_info(self, vault: Address) -> ContractInteractionResult:
        return await self._write("updateVaultInfo", to_checksum(vault))

    async def set_fee_receiver(self, new_fee_receiver: Address) -> ContractInteractionResult:
        return await self._write("setFeeReceiver", to_checksum(new_fee_receiver))

    async def set_erc20_payment_token(
        self, new_payment_token: Address
    ) -> ContractInteractionResult:
        return await self._write("setERC20PaymentToken", to_checksum(new_payment_token))

    async def update_creation_fee(
        self, new_eth_fee: int, new_erc20_fee: int
    ) -> ContractInteractionResult:
        return await self._write("updateCreationFee", int(new_eth_fee), int(new_erc20_fee))

    async def create_vault(
        self,
        project_owner: Address,
        reward_token: Address,
        project_name: str,
        use_token_for_payment: bool = False,
    ) -> ContractInteractionResult:
        """Deploy a new vault.

        The ETH creation fee is read first and attached as value unless the
        fee is paid with the ERC-20 payment token. ``result`` holds the new
        vault address.
        """

        fee = await self.creation_fee()
        value = 0 if use_token_for_payment else int(fee.eth_fee)
        return await self._write(
            "createVault",
            to_checksum(project_owner),
            to_checksum(reward_token),
            project_name,
            bool(use_token_for_payment),
            value=value,
        )

    async def grant_permit(self, controller: Address) -> ContractInteractionResult:
        return await self._write("grantPermit", to_checksum(controller))

    async def revoke_permit(self, controller: Address) -> ContractInteractionResult:
        return await self._write("revokePermit", to_checksum(controller))
