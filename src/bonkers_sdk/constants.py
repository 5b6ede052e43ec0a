"""Constants shared across the Bonkers SDK."""

from web3 import Web3

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# keccak256("eip1967.proxy.implementation") - 1
EIP1967_IMPLEMENTATION_SLOT = (
    int.from_bytes(Web3.keccak(text="eip1967.proxy.implementation"), byteorder="big") - 1
)

DEFAULT_LOGGER_NAME = "bonkers_sdk"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_RECEIPT_TIMEOUT = 120.0

SERVER_ONLY_MESSAGE = "This function is only available on Server Mode"
INTERACTIVE_ONLY_MESSAGE = "This function is only available on Interactive Mode"
