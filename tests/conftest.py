"""Test configuration and fixtures."""

import logging

import pytest

from mondoconnect import MondoAppConnect
from mondoconnect.testing import DummyTransport, TestDataFactory

TEST_HOST = "https://api.test.example.com"
TEST_TOKEN = "test-access-token-123"


@pytest.fixture
def transport() -> DummyTransport:
    """Transport with an empty response queue (200, empty body)."""
    return DummyTransport()


@pytest.fixture
def client(transport: DummyTransport) -> MondoAppConnect:
    """Client pointed at the test host and wired to the dummy transport."""
    return MondoAppConnect(access_token=TEST_TOKEN, host=TEST_HOST, transport=transport)


@pytest.fixture
def data() -> TestDataFactory:
    return TestDataFactory()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers added by configure_logging so tests stay independent."""
    yield
    logger = logging.getLogger("mondoconnect")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


ENV_VARS = ["MONDO_ACCESS_TOKEN", "MONDO_HOST", "MONDO_LOG_LEVEL", "MONDO_TIMEOUT_S"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No MONDO_* variables and no .env file in the working directory.

    Each variable is registered with monkeypatch first, so values loaded
    from a .env file during the test are removed afterwards.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
