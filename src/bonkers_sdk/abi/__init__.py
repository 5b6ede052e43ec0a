"""Contract ABIs shipped with the SDK, grouped by contract type and version."""

from .base import Base_abi
from .controller import Controller_0_0_1_abi
from .erc20 import ERC20_abi
from .vault import Vault_0_0_1_abi
from .vault_factory import VaultFactory_0_0_1_abi

ABIS = {
    "controller": {
        "0.0.1": Controller_0_0_1_abi,
    },
    "vault": {
        "0.0.1": Vault_0_0_1_abi,
    },
    "vaultFactory": {
        "0.0.1": VaultFactory_0_0_1_abi,
    },
}

__all__ = [
    "ABIS",
    "Base_abi",
    "Controller_0_0_1_abi",
    "ERC20_abi",
    "Vault_0_0_1_abi",
    "VaultFactory_0_0_1_abi",
]
