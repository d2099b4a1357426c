"""CLI commands for inspecting executor calldata.

This module provides command-line tools for packing and unpacking callback
contexts and for decoding exec batches, single sub-calls and callback data.

Usage:
    executor-encoder context encode --sender 0xBA12... --index 3
    executor-encoder context decode 0x000000000000000000000003ba12...
    executor-encoder decode 0x<exec calldata>
    executor-encoder call 0x<sub-call>
    executor-encoder callback 0x<callback data>
"""

import argparse
import json
import logging
import os
import sys
from typing import Any

from dotenv import load_dotenv
from eth_utils import to_bytes
from web3 import Web3

from .calls import decode_call, decode_callback_data, decode_exec
from .config.logging_config import get_cli_logger
from .config.settings import get_executor_address, get_log_level
from .context import decode_context, encode_context
from .errors import EncoderError

logger = logging.getLogger(__name__)


def _hex_arg(value: str) -> bytes:
    try:
        return to_bytes(hexstr=value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid hex data: {value}") from e


def _address_arg(value: str) -> str:
    if not Web3.is_address(value):
        raise argparse.ArgumentTypeError(f"Invalid address: {value}")
    return Web3.to_checksum_address(value)


def _print_json(payload: Any):
    print(json.dumps(payload, indent=2))


def context_encode(args):
    """Pack a sender and data index into a bytes32 context."""
    print("0x" + encode_context(args.sender, args.index).hex())


def context_decode(args):
    """Unpack a bytes32 context."""
    ctx = decode_context(args.context)
    _print_json({"sender": ctx.sender, "data_index": ctx.data_index})


def decode_batch(args):
    """Decode every sub-call of an exec_606BaXt calldata."""
    calls = decode_exec(args.data)
    logger.debug(f"Decoded exec with {len(calls)} sub-calls")
    payload: dict[str, Any] = {"calls": [decode_call(c).as_dict() for c in calls]}
    executor = args.executor or os.getenv("EXECUTOR_ADDRESS")
    if executor:
        payload["to"] = get_executor_address(executor)
    _print_json(payload)


def decode_sub_call(args):
    """Decode a single sub-call."""
    _print_json(decode_call(args.data).as_dict())


def decode_callback(args):
    """Decode callback data into its calls and return value."""
    calls, return_value = decode_callback_data(args.data)
    _print_json({
        "calls": [decode_call(c).as_dict() for c in calls],
        "return_value": "0x" + return_value.hex(),
    })


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="executor-encoder",
        description="Inspect Executor contract calldata",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    context_parser = subparsers.add_parser("context", help="Pack or unpack callback contexts")
    context_sub = context_parser.add_subparsers(dest="context_command", required=True)

    encode_parser = context_sub.add_parser("encode", help="Pack sender and data index")
    encode_parser.add_argument("--sender", type=_address_arg, required=True, help="Expected callback sender")
    encode_parser.add_argument("--index", type=int, required=True, help="Index of the callback's bytes argument")
    encode_parser.set_defaults(func=context_encode)

    decode_ctx_parser = context_sub.add_parser("decode", help="Unpack a bytes32 context")
    decode_ctx_parser.add_argument("context", type=_hex_arg, help="0x-prefixed bytes32")
    decode_ctx_parser.set_defaults(func=context_decode)

    decode_parser = subparsers.add_parser("decode", help="Decode exec_606BaXt calldata")
    decode_parser.add_argument("data", type=_hex_arg, help="0x-prefixed calldata")
    decode_parser.add_argument("--executor", help="Executor address (defaults to EXECUTOR_ADDRESS if set)")
    decode_parser.set_defaults(func=decode_batch)

    call_parser = subparsers.add_parser("call", help="Decode a single encoded sub-call")
    call_parser.add_argument("data", type=_hex_arg, help="0x-prefixed sub-call")
    call_parser.set_defaults(func=decode_sub_call)

    callback_parser = subparsers.add_parser("callback", help="Decode flash loan callback data")
    callback_parser.add_argument("data", type=_hex_arg, help="0x-prefixed callback data")
    callback_parser.set_defaults(func=decode_callback)

    return parser


def main(argv: list[str] | None = None) -> int:
    # Load environment variables from .env if present so commands work out of the box.
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else get_log_level(logging.WARNING)
        get_cli_logger(debug=args.verbose, level=level)
        args.func(args)
    except (EncoderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
