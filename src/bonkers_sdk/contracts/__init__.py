"""Typed facades over the managed contracts."""

from .base import BaseContract
from .controller import Controller
from .erc20 import ERC20
from .vault import Vault
from .vault_factory import VaultFactory

__all__ = ["BaseContract", "Controller", "ERC20", "Vault", "VaultFactory"]
