from __future__ import annotations

import logging

import pytest
from eth_account import Account
from fakes import PRIVATE_KEY, FakeWeb3Factory


@pytest.fixture
def web3_factory() -> FakeWeb3Factory:
    return FakeWeb3Factory()


@pytest.fixture
def signer_address() -> str:
    return Account.from_key(PRIVATE_KEY).address


@pytest.fixture
def test_logger() -> logging.Logger:
    return logging.getLogger("bonkers_sdk.tests")
