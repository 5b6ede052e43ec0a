"""Versioned ABI registry keyed by formatted contract type."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from eth_typing import ABI

from .abi import ABIS
from .types import ContractType, ContractVersion, FormattedContractType
from .utils import format_contract_type


def _registry_key(contract_type: ContractType | FormattedContractType) -> FormattedContractType:
    if isinstance(contract_type, ContractType):
        return format_contract_type(contract_type)
    return contract_type


def _freeze_abi(abi: Any) -> ABI:
    return tuple(abi)  # type: ignore[return-value]


class AbiRegistry(Mapping[FormattedContractType, Mapping[ContractVersion, ABI]]):
    """Read-only ``type -> version -> ABI`` mapping.

    The registry is populated once at construction and never changes, so it
    can be shared between resolvers and read concurrently.
    """

    def __init__(self, abis: Mapping[str, Mapping[str, Any]]):
        self._abis = MappingProxyType(
            {
                contract_type: MappingProxyType(
                    {version: _freeze_abi(abi) for version, abi in versions.items()}
                )
                for contract_type, versions in abis.items()
            }
        )

    def __getitem__(self, key: FormattedContractType) -> Mapping[ContractVersion, ABI]:
        return self._abis[key]

    def __iter__(self) -> Iterator[FormattedContractType]:
        return iter(self._abis)

    def __len__(self) -> int:
        return len(self._abis)

    def get_abi(
        self, contract_type: ContractType | FormattedContractType, version: ContractVersion
    ) -> ABI | None:
        key = _registry_key(contract_type)
        return self._abis.get(key, MappingProxyType({})).get(version)

    def versions(self, contract_type: ContractType | FormattedContractType) -> tuple[str, ...]:
        key = _registry_key(contract_type)
        return tuple(self._abis.get(key, {}))


DEFAULT_REGISTRY = AbiRegistry(ABIS)
