"""Utility functions for the Bonkers SDK."""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from web3 import Web3

from .constants import ZERO_ADDRESS
from .exceptions import MissingRequiredParams
from .types import ContractType, FormattedContractType


def censor(value: str | None) -> str | None:
    """Replace every character of a secret with ``*``."""
    if value is None:
        return None
    return "*" * len(str(value))


def format_contract_type(contract_type: ContractType | str) -> FormattedContractType:
    """Project an on-chain contract type onto its ABI registry key.

    ``"VAULT FACTORY"`` becomes ``"vaultFactory"``: the first word is
    lower-cased and every following word is capitalised.
    """
    raw = contract_type.value if isinstance(contract_type, ContractType) else contract_type
    words = raw.split()
    if not words:
        return ""

    head, *tail = words
    return head.lower() + "".join(word.lower().capitalize() for word in tail)


def to_checksum(address: str) -> ChecksumAddress:
    """Return the EIP-55 form of an address."""
    return Web3.to_checksum_address(address)


def is_zero_address(address: str | None) -> bool:
    if not address or address == ZERO_ADDRESS:
        return True
    try:
        return int(address, 16) == 0
    except ValueError:
        return False


def serialise_receipt(receipt: Any) -> Any:
    """Serialise web3 receipt objects into JSON-friendly structures."""
    if receipt is None:
        return None
    if isinstance(receipt, Mapping):
        return {key: serialise_receipt(value) for key, value in receipt.items()}
    if isinstance(receipt, Sequence) and not isinstance(
        receipt, str | bytes | bytearray | HexBytes
    ):
        return [serialise_receipt(item) for item in receipt]
    if isinstance(receipt, bytes | bytearray | HexBytes):
        return HexBytes(receipt).to_0x_hex()
    return receipt


def base64_encode(value: str, url_safe: bool = False) -> str:
    """Encode a UTF-8 string as base64, optionally in unpadded url-safe form."""
    if not value:
        raise MissingRequiredParams("Input Can Not Be an Empty String or None")

    encoded = base64.b64encode(value.encode("utf-8")).decode("ascii")
    if url_safe:
        return encoded.replace("+", "-").replace("/", "_").rstrip("=")
    return encoded


def base64_decode(value: str) -> str:
    """Decode standard or url-safe base64 (padding optional) into a string."""
    if not value:
        raise MissingRequiredParams("Input Can Not Be an Empty String or None")

    normalised = value.replace("-", "+").replace("_", "/").rstrip("=")
    normalised += "=" * (-len(normalised) % 4)
    return base64.b64decode(normalised).decode("utf-8")


def log_failure(logger: logging.Logger, source: str, function: str, exc: BaseException) -> None:
    """Log a failed SDK call; the traceback is only attached for verbose errors."""
    name = getattr(exc, "name", type(exc).__name__)
    verbose = bool(getattr(exc, "verbose", False))
    logger.error(
        "FROM: %s Function: %s %s %s",
        source,
        function,
        name,
        exc,
        exc_info=exc if verbose else None,
    )
