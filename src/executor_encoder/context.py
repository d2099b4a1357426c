"""
Callback context packing.

The executor authorises a reentrant callback by comparing msg.sender with the
address packed in a bytes32 context, and reads the callback's `bytes`
argument at the packed index. Solidity side:

    uint256 dataIndex = uint256(context >> 160);
    address sender = address(uint160(uint256(context)));

Layout (big-endian, 32 bytes):
    [0:4)    zero padding (data_index is a uint64)
    [4:12)   data_index
    [12:32)  sender
"""

from eth_utils import to_canonical_address

from .errors import MalformedInputError
from .types import CallbackContext, to_address

CONTEXT_SIZE = 32
ZERO_CONTEXT: bytes = bytes(CONTEXT_SIZE)
MAX_DATA_INDEX: int = (1 << 64) - 1


def encode_context(sender: str, data_index: int) -> bytes:
    """
    Encode a callback context as a bytes32 value.

    Args:
        sender: Address expected to call the executor back
        data_index: Position of the `bytes` parameter in the callback signature

    Returns:
        32-byte context
    """
    if not 0 <= data_index <= MAX_DATA_INDEX:
        raise ValueError(f"data_index must fit in uint64, got {data_index}")
    return bytes(4) + data_index.to_bytes(8, "big") + to_canonical_address(sender)


def encode_callback_context(context: CallbackContext | None) -> bytes:
    """Encode an optional CallbackContext; None means the zero context."""
    if context is None:
        return ZERO_CONTEXT
    return encode_context(context.sender, context.data_index)


def decode_context(context: bytes) -> CallbackContext:
    """Decode a bytes32 context the way the executor contract does."""
    if len(context) != CONTEXT_SIZE:
        raise MalformedInputError(f"context must be {CONTEXT_SIZE} bytes, got {len(context)}")
    if any(context[:4]):
        raise MalformedInputError("context padding bytes [0:4) must be zero")
    return CallbackContext(
        sender=to_address(context[12:32]),
        data_index=int.from_bytes(context[4:12], "big"),
    )
