"""Tests for bonkers_sdk.types value objects."""

from bonkers_sdk.abi import Base_abi
from bonkers_sdk.types import (
    BaseParams,
    Call3,
    Call3Value,
    CallResult,
    ContractInteractionResult,
    ContractType,
    ControllerRole,
    Receiver,
    Status,
    VaultInfo,
)

LOWER = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
CHECKSUM = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_base_params_lists_named_abi_entries() -> None:
    params = BaseParams(address=CHECKSUM, abi=tuple(Base_abi))  # type: ignore[arg-type]
    assert params.function_names() == ["contractType", "version"]


def test_receiver_as_tuple_checksums_address() -> None:
    assert Receiver(receiver=LOWER, amount=5).as_tuple() == (CHECKSUM, 5)


def test_call3_tuples_keep_field_order() -> None:
    assert Call3(LOWER, True, "0x01").as_tuple() == (CHECKSUM, True, "0x01")
    assert Call3Value(LOWER, False, 9, b"\x01").as_tuple() == (CHECKSUM, False, 9, b"\x01")


def test_call_result_from_raw_hexlifies_bytes() -> None:
    result = CallResult.from_raw((True, b"\x12\x34"))
    assert result.success is True
    assert result.return_data == "0x1234"


def test_vault_info_from_raw_stringifies_numbers() -> None:
    info = VaultInfo.from_raw((3, "0.0.1", CHECKSUM, "Bonk", CHECKSUM, 1700000000, CHECKSUM))
    assert info.id == "3"
    assert info.created_at == "1700000000"
    assert info.project_name == "Bonk"


def test_interaction_result_success_flag() -> None:
    assert ContractInteractionResult(status=Status.SUCCESS).success
    assert not ContractInteractionResult(status=Status.FAILED).success


def test_enum_values_match_on_chain_strings() -> None:
    assert ContractType("VAULT FACTORY") is ContractType.VAULT_FACTORY
    assert int(ControllerRole.ERC) == 2
