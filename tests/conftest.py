"""
Pytest configuration and shared fixtures for YCLIENTS SDK testing.

Provides a recording transport double and preconfigured clients so tests
never touch the network.
"""

import logging

import pytest

from yclients.api.client import YclientsClient
from yclients.core.logging_manager import LoggingManager

from tests.fixtures.sample_data import PARTNER_TOKEN
from tests.fixtures.transport import RecordingTransport


@pytest.fixture
def transport():
    """Recording transport returning a generic success envelope"""
    return RecordingTransport()


@pytest.fixture
def client(transport):
    """Client with a partner token and the recording transport"""
    return YclientsClient(partner_token=PARTNER_TOKEN, transport=transport)


@pytest.fixture
def anonymous_client(transport):
    """Client without a partner token"""
    return YclientsClient(transport=transport)


@pytest.fixture(autouse=True)
def reset_logging_manager():
    """Let every test configure logging from scratch"""
    yield
    LoggingManager.reset()
    package_logger = logging.getLogger("yclients")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
