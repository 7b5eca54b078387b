"""
Pytest configuration and shared fixtures
"""

import logging

import pytest

from tests.test_helpers import CallbackRecorder, create_mock_http_client, create_test_config
from urlloader.config import Config
from urlloader.engine import reset_shared_engine


@pytest.fixture
def test_config():
    """Config built from the default test dictionary (no file access)"""
    return Config(create_test_config())


@pytest.fixture
def mock_http_client():
    """Mock HTTP client answering every GET with 200 and a small body"""
    return create_mock_http_client(content=b"Hello world")


@pytest.fixture
def recorder():
    """Completion handler that records its calls"""
    return CallbackRecorder()


@pytest.fixture(autouse=True)
def clean_shared_engine():
    """Make sure no test sees another test's shared engine"""
    reset_shared_engine()
    yield
    reset_shared_engine()


@pytest.fixture(autouse=True)
def clean_package_logger():
    """Drop handlers added by setup_logging() so they don't outlive the test"""
    yield
    logger = logging.getLogger("urlloader")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
