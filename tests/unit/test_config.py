"""Tests for configuration, settings and ABI helpers."""

import logging

import pytest
from web3 import Web3

from executor_encoder.abi import abi_input_types, abi_signature, find_function
from executor_encoder.config import (
    CONTRACT_ADDRESSES,
    EXECUTOR_ABI,
    get_contract_address,
    get_executor_address,
    get_log_level,
)
from executor_encoder.config.logging_config import get_cli_logger, setup_logger
from tests.helpers import EXECUTOR


def test_placeholder_tuple_array_type():
    assert abi_input_types(EXECUTOR_ABI, "callWithPlaceholders4845164670")[-1] == (
        "(address,bytes,uint64,uint64,uint64)[]"
    )
    assert abi_signature(EXECUTOR_ABI, "transfer") == "transfer(address,uint256)"


def test_find_function_missing():
    with pytest.raises(KeyError):
        find_function(EXECUTOR_ABI, "multicall")


def test_contract_addresses_are_checksummed():
    for name, address in CONTRACT_ADDRESSES.items():
        assert Web3.is_checksum_address(address), name
    assert get_contract_address("balancerVault") == "0xBA12222222228d8Ba445958a75a0704d566BF2C8"


def test_unknown_contract():
    with pytest.raises(KeyError):
        get_contract_address("sushiRouter")


class TestSettings:

    def test_explicit_address_wins(self, monkeypatch):
        monkeypatch.setenv("EXECUTOR_ADDRESS", "0x2222222222222222222222222222222222222222")
        assert get_executor_address(EXECUTOR) == EXECUTOR

    def test_address_from_env(self, monkeypatch):
        monkeypatch.setenv("EXECUTOR_ADDRESS", EXECUTOR)
        assert get_executor_address() == EXECUTOR

    def test_missing_address(self, monkeypatch):
        monkeypatch.delenv("EXECUTOR_ADDRESS", raising=False)
        with pytest.raises(ValueError):
            get_executor_address()

    def test_invalid_address(self):
        with pytest.raises(ValueError):
            get_executor_address("0x1234")

    def test_log_level(self, monkeypatch):
        monkeypatch.delenv("EXECUTOR_ENCODER_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO
        monkeypatch.setenv("EXECUTOR_ENCODER_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG
        monkeypatch.setenv("EXECUTOR_ENCODER_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError):
            get_log_level()


class TestLogging:

    def test_setup_logger_with_file(self, tmp_path):
        logger = setup_logger("executor_encoder.tests.file", level=logging.DEBUG, log_file="run.log", log_dir=tmp_path)
        try:
            assert len(logger.handlers) == 2
            logger.debug("hello")
            for handler in logger.handlers:
                handler.flush()
            assert "hello" in (tmp_path / "run.log").read_text()

            # no duplicate handlers on a second call
            assert setup_logger("executor_encoder.tests.file", log_file="run.log", log_dir=tmp_path) is logger
            assert len(logger.handlers) == 2
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_cli_logger_levels(self):
        assert get_cli_logger().level == logging.WARNING
        logger = get_cli_logger(debug=True)
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
