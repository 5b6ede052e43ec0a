"""Tests for the error taxonomy."""

import pytest

from bonkers_sdk import exceptions
from bonkers_sdk.exceptions import (
    NON_VERBOSE_STACK,
    BonkersError,
    ConnectorError,
    ContractAbiNotFound,
    ContractInteractionFailed,
    ErrorKind,
    InvalidChainId,
    UnknownError,
)


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_kind_has_a_subclass(kind: ErrorKind) -> None:
    error_class = getattr(exceptions, kind.value)
    error = error_class("boom")

    assert isinstance(error, BonkersError)
    assert error.kind is kind
    assert error.name == kind.value
    assert str(error) == "boom"


def test_non_verbose_error_hides_stack() -> None:
    error = ContractInteractionFailed("failed", function_name="reward")

    assert error.stack == NON_VERBOSE_STACK
    assert error.function_name == "reward"
    assert error.to_dict()["stack"] == NON_VERBOSE_STACK


def test_verbose_error_captures_creation_stack() -> None:
    error = InvalidChainId("unknown chain", chain_id=5, verbose=True)

    assert error.stack != NON_VERBOSE_STACK
    assert "test_verbose_error_captures_creation_stack" in error.stack
    assert error.chain_id == 5


def test_cause_is_chained_and_described() -> None:
    cause = TimeoutError("rpc timed out")
    error = ContractAbiNotFound("missing", contract_type="VAULT", version="0.0.2", cause=cause)

    assert error.cause is cause
    assert error.__cause__ is cause
    assert error.details["cause"] == "TimeoutError | rpc timed out"
    assert (error.contract_type, error.version) == ("VAULT", "0.0.2")


def test_connector_error_is_unknown_kind() -> None:
    error = ConnectorError("rejected", connector_id="frame", code=4001)

    assert isinstance(error, UnknownError)
    assert error.name == "UnknownError"
    assert (error.connector_id, error.code) == ("frame", 4001)
