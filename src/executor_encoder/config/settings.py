"""
Environment-driven settings.

Environment variables:
  • EXECUTOR_ADDRESS             default executor contract for the CLI
  • EXECUTOR_ENCODER_LOG_LEVEL   DEBUG / INFO / WARNING (default INFO)
"""

import logging
import os

from eth_typing import ChecksumAddress
from web3 import Web3


def get_executor_address(explicit: str | None = None) -> ChecksumAddress:
    """
    Resolve the executor address from an explicit value or EXECUTOR_ADDRESS.

    Raises:
        ValueError: If neither is set or the address is malformed
    """
    candidate = explicit or os.getenv("EXECUTOR_ADDRESS")
    if not candidate:
        raise ValueError("Missing executor address: pass --executor or set EXECUTOR_ADDRESS")
    if not Web3.is_address(candidate):
        raise ValueError(f"Invalid executor address: {candidate}")
    return Web3.to_checksum_address(candidate)


def get_log_level(default: int = logging.INFO) -> int:
    name = os.getenv("EXECUTOR_ENCODER_LOG_LEVEL")
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid EXECUTOR_ENCODER_LOG_LEVEL: {name}")
    return level
