"""
Encoding of single executor instructions and of callback data.

A sub-call is the ABI-encoded calldata of one of the executor's call entry
points:

    call_g0oyU7o(address target, uint256 value, bytes32 context, bytes callData)
    callWithPlaceholders4845164670(address target, uint256 value, bytes32 context,
                                   bytes callData, Placeholder[] placeholders)

The batch itself is exec_606BaXt(bytes[] data). Callback data handed to
flash-loan style protocols is abi.encode(bytes[] calls, bytes returnValue).
"""

from __future__ import annotations

from typing import Iterable, Sequence

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError

from .abi import abi_input_types, abi_selector
from .config.abis import EXECUTOR_ABI
from .context import encode_callback_context, decode_context
from .errors import MalformedInputError
from .fixed_point import ensure_uint256
from .types import CallbackContext, DecodedCall, Placeholder, to_address

EXEC_FUNCTION = "exec_606BaXt"
CALL_FUNCTION = "call_g0oyU7o"
CALL_WITH_PLACEHOLDERS_FUNCTION = "callWithPlaceholders4845164670"

EXEC_TYPES: list[str] = abi_input_types(EXECUTOR_ABI, EXEC_FUNCTION)
CALL_TYPES: list[str] = abi_input_types(EXECUTOR_ABI, CALL_FUNCTION)
CALL_WITH_PLACEHOLDERS_TYPES: list[str] = abi_input_types(EXECUTOR_ABI, CALL_WITH_PLACEHOLDERS_FUNCTION)

EXEC_SELECTOR: bytes = abi_selector(EXECUTOR_ABI, EXEC_FUNCTION)
CALL_SELECTOR: bytes = abi_selector(EXECUTOR_ABI, CALL_FUNCTION)
CALL_WITH_PLACEHOLDERS_SELECTOR: bytes = abi_selector(EXECUTOR_ABI, CALL_WITH_PLACEHOLDERS_FUNCTION)

CALLBACK_DATA_TYPES = ["bytes[]", "bytes"]


def build_call(
    target: str,
    value: int,
    call_data: bytes,
    context: CallbackContext | None = None,
    placeholders: Sequence[Placeholder] | None = None,
) -> bytes:
    """
    Encode a single call instruction for the executor.

    If `placeholders` is non-empty, encodes as callWithPlaceholders4845164670,
    otherwise as call_g0oyU7o.

    Args:
        target: Contract the executor calls
        value: Native value forwarded with the call (in wei)
        call_data: Calldata for the target
        context: Expected callback; None means no callback is expected
        placeholders: Staticcall results to splice into call_data first

    Returns:
        Encoded sub-call bytes
    """
    args = [
        to_address(target),
        ensure_uint256(value, "value"),
        encode_callback_context(context),
        bytes(call_data),
    ]
    if placeholders:
        return CALL_WITH_PLACEHOLDERS_SELECTOR + encode(
            CALL_WITH_PLACEHOLDERS_TYPES,
            args + [[p.as_abi_tuple() for p in placeholders]],
        )
    return CALL_SELECTOR + encode(CALL_TYPES, args)


def encode_exec_data(calls: Iterable[bytes]) -> bytes:
    """Calldata for exec_606BaXt(bytes[])."""
    return EXEC_SELECTOR + encode(EXEC_TYPES, [[bytes(c) for c in calls]])


def encode_callback_data(calls: Iterable[bytes], return_value: bytes = b"") -> bytes:
    """
    Encode callback data as abi.encode(bytes[], bytes).

    This is the standard pattern for all flash loan callbacks: the first
    element is the list of calls to execute inside the callback, the second
    the value the executor returns to the caller (often empty or a hash).
    """
    return encode(CALLBACK_DATA_TYPES, [[bytes(c) for c in calls], bytes(return_value)])


def decode_callback_data(data: bytes) -> tuple[list[bytes], bytes]:
    """Inverse of encode_callback_data."""
    try:
        calls, return_value = decode(CALLBACK_DATA_TYPES, bytes(data))
    except DecodingError as e:
        raise MalformedInputError(f"Invalid callback data: {e}") from e
    return list(calls), return_value


def _split_selector(data: bytes) -> tuple[bytes, bytes]:
    data = bytes(data)
    if len(data) < 4:
        raise MalformedInputError(f"Calldata too short for a selector: {len(data)} bytes")
    return data[:4], data[4:]


def decode_exec(data: bytes) -> list[bytes]:
    """Return the sub-calls of an exec_606BaXt calldata."""
    selector, body = _split_selector(data)
    if selector != EXEC_SELECTOR:
        raise MalformedInputError(f"Not an {EXEC_FUNCTION} call: selector 0x{selector.hex()}")
    try:
        (calls,) = decode(EXEC_TYPES, body)
    except DecodingError as e:
        raise MalformedInputError(f"Invalid {EXEC_FUNCTION} calldata: {e}") from e
    return list(calls)


def decode_call(encoded: bytes) -> DecodedCall:
    """
    Decode a sub-call produced by build_call.

    Raises:
        MalformedInputError: If the selector is not one of the executor's call
            entry points or the arguments do not decode
    """
    selector, body = _split_selector(encoded)
    try:
        if selector == CALL_SELECTOR:
            target, value, context, call_data = decode(CALL_TYPES, body)
            placeholders: tuple[Placeholder, ...] = ()
        elif selector == CALL_WITH_PLACEHOLDERS_SELECTOR:
            target, value, context, call_data, raw = decode(CALL_WITH_PLACEHOLDERS_TYPES, body)
            placeholders = tuple(
                Placeholder(to=to, data=ph_data, offset=offset, length=length, res_offset=res_offset)
                for to, ph_data, offset, length, res_offset in raw
            )
        else:
            raise MalformedInputError(f"Unknown executor call selector 0x{selector.hex()}")
    except DecodingError as e:
        raise MalformedInputError(f"Invalid sub-call encoding: {e}") from e

    return DecodedCall(
        target=to_address(target),
        value=value,
        context=decode_context(context),
        call_data=call_data,
        placeholders=placeholders,
    )
