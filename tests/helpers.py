"""Addresses and decoding helpers shared by the tests."""

from eth_abi import decode

from executor_encoder.calls import decode_call, decode_exec

# Digit-only addresses are their own checksum form
EXECUTOR = "0x1111111111111111111111111111111111111111"
VAULT = "0x2222222222222222222222222222222222222222"
WETH = "0x3333333333333333333333333333333333333333"
DAI = "0x4444444444444444444444444444444444444444"
USDC = "0x5555555555555555555555555555555555555555"
RECIPIENT = "0x6666666666666666666666666666666666666666"
ROUTER = "0x7777777777777777777777777777777777777777"
POOL = "0x8888888888888888888888888888888888888888"

SENTINEL = 0xDEADBEEF_0000_0000_0000_0000_0000_0000_0000_0000_0000_0000_0000_0000_0000_CAFE


def single_call(encoder):
    """Flush `encoder` and decode its only sub-call."""
    calls = encoder.flush()
    assert len(calls) == 1
    return decode_call(calls[0])


def exec_calls(tx):
    return [decode_call(c) for c in decode_exec(tx.data)]


def decode_args(types, call_data):
    """Decode the arguments of target calldata (selector stripped)."""
    return decode(types, call_data[4:])
