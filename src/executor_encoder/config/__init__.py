"""
Configuration package for the executor encoder.

Protocol constants, well-known addresses, environment settings and logging.
"""

from .callbacks import (
    CALLBACK_SPECS,
    ERC3156_CALLBACK_SUCCESS,
    TRUE_WORD,
    CallbackSpec,
    callback_context,
    get_callback_spec,
)

from .contracts import (
    CONTRACT_ADDRESSES,
    get_contract_address,
)

from .settings import (
    get_executor_address,
    get_log_level,
)

from .abis import (
    ERC20_ABI,
    EXECUTOR_ABI,
)

__all__ = [
    # Callbacks
    'CALLBACK_SPECS',
    'ERC3156_CALLBACK_SUCCESS',
    'TRUE_WORD',
    'CallbackSpec',
    'callback_context',
    'get_callback_spec',

    # Contracts
    'CONTRACT_ADDRESSES',
    'get_contract_address',

    # Settings
    'get_executor_address',
    'get_log_level',

    # ABIs
    'ERC20_ABI',
    'EXECUTOR_ABI',
]
