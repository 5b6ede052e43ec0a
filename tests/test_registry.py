"""Tests for the versioned ABI registry."""

import pytest

from bonkers_sdk.abi import Controller_0_0_1_abi
from bonkers_sdk.registry import DEFAULT_REGISTRY, AbiRegistry
from bonkers_sdk.types import ContractType


def test_default_registry_contents() -> None:
    assert set(DEFAULT_REGISTRY) == {"controller", "vault", "vaultFactory"}
    assert DEFAULT_REGISTRY.versions(ContractType.VAULT_FACTORY) == ("0.0.1",)


def test_lookup_by_enum_and_formatted_key() -> None:
    by_enum = DEFAULT_REGISTRY.get_abi(ContractType.CONTROLLER, "0.0.1")
    by_key = DEFAULT_REGISTRY.get_abi("controller", "0.0.1")

    assert by_enum is by_key
    assert list(by_enum or ()) == Controller_0_0_1_abi


def test_missing_entries_return_none() -> None:
    assert DEFAULT_REGISTRY.get_abi(ContractType.VAULT, "0.0.2") is None
    assert DEFAULT_REGISTRY.get_abi("unknown", "0.0.1") is None
    assert DEFAULT_REGISTRY.versions("unknown") == ()


def test_registry_is_read_only() -> None:
    registry = AbiRegistry({"vault": {"1.0.0": [{"type": "function", "name": "reward"}]}})

    with pytest.raises(TypeError):
        registry["vault"]["2.0.0"] = ()  # type: ignore[index]
    assert isinstance(registry.get_abi("vault", "1.0.0"), tuple)
