"""
Contract ABI package for the executor encoder.

Contains the ABIs the encoder derives selectors and argument types from.
"""

from .erc20 import ERC20_ABI
from .executor import EXECUTOR_ABI, PLACEHOLDER_COMPONENTS

__all__ = [
    'ERC20_ABI',
    'EXECUTOR_ABI',
    'PLACEHOLDER_COMPONENTS',
]
