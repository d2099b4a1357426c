"""
Off-chain encoder for batched, dynamically patchable Executor transactions.

Public API
----------
ExecutorEncoder(address)
    Accumulates sub-calls and produces an exec_606BaXt transaction.
build_call / encode_callback_data
    Stateless encoders for one sub-call and for flash-loan callback data.
encode_context / decode_context
    bytes32 callback authorisation packing.
percent_mul / mul_div_up
    On-chain compatible fee math.
"""

from .calls import (
    build_call,
    decode_call,
    decode_callback_data,
    decode_exec,
    encode_callback_data,
)
from .context import ZERO_CONTEXT, decode_context, encode_context
from .encoder import ExecutorEncoder
from .errors import EncoderError, InvalidRecipientError, MalformedInputError
from .fixed_point import mul_div_up, percent_mul
from .types import (
    ZERO_ADDRESS,
    AssetRequest,
    CallbackContext,
    DecodedCall,
    EncodedExec,
    MarketParams,
    Placeholder,
)

__version__ = "0.1.0"

__all__ = [
    "ExecutorEncoder",
    "build_call",
    "decode_call",
    "decode_callback_data",
    "decode_exec",
    "encode_callback_data",
    "ZERO_CONTEXT",
    "decode_context",
    "encode_context",
    "EncoderError",
    "InvalidRecipientError",
    "MalformedInputError",
    "mul_div_up",
    "percent_mul",
    "ZERO_ADDRESS",
    "AssetRequest",
    "CallbackContext",
    "DecodedCall",
    "EncodedExec",
    "MarketParams",
    "Placeholder",
]
