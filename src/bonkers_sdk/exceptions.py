"""Exception hierarchy for the Bonkers SDK."""

from __future__ import annotations

import traceback
from enum import Enum
from typing import Any

NON_VERBOSE_STACK = "Non Verbose Mode"


class ErrorKind(str, Enum):
    """Tag identifying the failure kind of a :class:`BonkersError`."""

    UNKNOWN_ERROR = "UnknownError"
    CONTRACT_INTERACTION_FAILED = "ContractInteractionFailed"
    CONTRACT_ABI_NOT_FOUND = "ContractAbiNotFound"
    CLIENT_NOT_FOUND = "ClientNotFound"
    MISSING_CONFIG_REQUIREMENT = "MissingConfigRequirement"
    MISSING_REQUIRED_PARAMS = "MissingRequiredParams"
    INVALID_SDK_MODE = "InvalidSDKMode"
    INVALID_CONTRACT = "InvalidContract"
    INVALID_CONTRACT_VERSION = "InvalidContractVersion"
    INVALID_CONTRACT_TYPE = "InvalidContractType"
    INVALID_CHAIN_ID = "InvalidChainId"
    INVALID_CLIENT_TYPE = "InvalidClientType"


class BonkersError(Exception):
    """Base exception for all SDK errors.

    ``verbose`` controls whether the creation stack is kept on the error.
    Non-verbose errors only carry a placeholder so that production logs do
    not expose internal paths.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __init__(
        self,
        message: str = "",
        *,
        cause: BaseException | None = None,
        verbose: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.verbose = verbose
        self.details = details or {}
        if cause is not None:
            self.__cause__ = cause
            self.details.setdefault("cause", f"{type(cause).__name__} | {cause}")

        if verbose:
            self.stack = "".join(traceback.format_stack()[:-1])
        else:
            self.stack = NON_VERBOSE_STACK

    @property
    def name(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "details": dict(self.details),
            "stack": self.stack,
        }


class UnknownError(BonkersError):
    kind = ErrorKind.UNKNOWN_ERROR


class ContractInteractionFailed(BonkersError):
    """Raised when a read or write call fails after the contract was resolved."""

    kind = ErrorKind.CONTRACT_INTERACTION_FAILED

    def __init__(
        self,
        message: str = "",
        *,
        function_name: str | None = None,
        cause: BaseException | None = None,
        verbose: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message, cause=cause, verbose=verbose, details=details)
        self.function_name = function_name


class ContractAbiNotFound(BonkersError):
    """Raised when the registry has no ABI for a contract type/version pair."""

    kind = ErrorKind.CONTRACT_ABI_NOT_FOUND

    def __init__(
        self,
        message: str = "",
        *,
        contract_type: str | None = None,
        version: str | None = None,
        cause: BaseException | None = None,
        verbose: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message, cause=cause, verbose=verbose, details=details)
        self.contract_type = contract_type
        self.version = version


class ClientNotFound(BonkersError):
    kind = ErrorKind.CLIENT_NOT_FOUND


class MissingConfigRequirement(BonkersError):
    kind = ErrorKind.MISSING_CONFIG_REQUIREMENT


class MissingRequiredParams(BonkersError):
    kind = ErrorKind.MISSING_REQUIRED_PARAMS


class InvalidSDKMode(BonkersError):
    kind = ErrorKind.INVALID_SDK_MODE


class InvalidContract(BonkersError):
    kind = ErrorKind.INVALID_CONTRACT


class InvalidContractVersion(BonkersError):
    kind = ErrorKind.INVALID_CONTRACT_VERSION


class InvalidContractType(BonkersError):
    kind = ErrorKind.INVALID_CONTRACT_TYPE


class InvalidChainId(BonkersError):
    """Raised when a chain id is not part of the configured chains."""

    kind = ErrorKind.INVALID_CHAIN_ID

    def __init__(
        self,
        message: str = "",
        *,
        chain_id: int | None = None,
        cause: BaseException | None = None,
        verbose: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message, cause=cause, verbose=verbose, details=details)
        self.chain_id = chain_id


class InvalidClientType(BonkersError):
    kind = ErrorKind.INVALID_CLIENT_TYPE


class ConnectorError(UnknownError):
    """Raised when a wallet connector rejects or fails a request."""

    def __init__(
        self,
        message: str = "",
        *,
        connector_id: str | None = None,
        code: int | None = None,
        cause: BaseException | None = None,
        verbose: bool = False,
        details: dict | None = None,
    ):
        super().__init__(message, cause=cause, verbose=verbose, details=details)
        self.connector_id = connector_id
        self.code = code
