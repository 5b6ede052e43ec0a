"""Tests for utility functions."""

import logging

import pytest
from hexbytes import HexBytes

from bonkers_sdk.exceptions import InvalidContract, MissingRequiredParams
from bonkers_sdk.types import ContractType
from bonkers_sdk.utils import (
    base64_decode,
    base64_encode,
    censor,
    format_contract_type,
    is_zero_address,
    log_failure,
    serialise_receipt,
)


class TestFormatContractType:
    """Test the registry key projection of contract types."""

    def test_single_word(self):
        assert format_contract_type(ContractType.CONTROLLER) == "controller"
        assert format_contract_type("VAULT") == "vault"

    def test_multi_word(self):
        assert format_contract_type(ContractType.VAULT_FACTORY) == "vaultFactory"
        assert format_contract_type("SOME  NEW   TYPE") == "someNewType"

    def test_empty(self):
        assert format_contract_type("") == ""


class TestBase64:
    """Test base64 helpers."""

    def test_round_trip_url_safe(self):
        encoded = base64_encode("bonk?>", url_safe=True)
        assert "=" not in encoded
        assert "+" not in encoded and "/" not in encoded
        assert base64_decode(encoded) == "bonk?>"

    def test_standard_encoding(self):
        assert base64_encode("hi") == "aGk="

    def test_empty_input_rejected(self):
        with pytest.raises(MissingRequiredParams):
            base64_encode("")
        with pytest.raises(MissingRequiredParams):
            base64_decode("")


def test_censor_masks_every_character():
    assert censor("0xabc") == "*****"
    assert censor(None) is None


def test_is_zero_address():
    assert is_zero_address("0x0000000000000000000000000000000000000000")
    assert is_zero_address("0x0")
    assert is_zero_address(None)
    assert not is_zero_address("0x00000000000000000000000000000000000000c1")
    assert not is_zero_address("not-an-address")


def test_serialise_receipt_hexlifies_bytes():
    receipt = {"transactionHash": HexBytes(b"\x01\x02"), "logs": [{"data": b"\xff"}], "status": 1}
    assert serialise_receipt(receipt) == {
        "transactionHash": "0x0102",
        "logs": [{"data": "0xff"}],
        "status": 1,
    }


def test_log_failure_attaches_traceback_only_when_verbose(caplog):
    logger = logging.getLogger("bonkers_sdk.tests.utils")

    with caplog.at_level(logging.ERROR, logger=logger.name):
        log_failure(logger, "Base", "resolve", InvalidContract("quiet"))
        log_failure(logger, "Base", "resolve", InvalidContract("loud", verbose=True))

    quiet, loud = caplog.records
    assert "FROM: Base Function: resolve InvalidContract quiet" in quiet.getMessage()
    assert quiet.exc_info is None
    assert loud.exc_info is not None
