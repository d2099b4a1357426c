"""Shared fixtures for the executor encoder tests."""

import logging

import pytest

from executor_encoder import ExecutorEncoder
from tests.helpers import EXECUTOR


@pytest.fixture
def executor_address():
    return EXECUTOR


@pytest.fixture
def encoder(executor_address):
    return ExecutorEncoder(executor_address)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by the CLI so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("executor_encoder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
