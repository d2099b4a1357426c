"""
Small helpers around eth_abi for building function calldata.

Public API
----------
function_selector(signature)
    First 4 bytes of keccak256(signature).
encode_function_call(name, arg_types, args)
    selector + abi.encode(args) for `name(arg_types...)`.
find_function(abi, name) / abi_input_types(abi, name) / abi_signature(abi, name)
    Resolve canonical types from a JSON ABI, expanding tuple components.
"""
from __future__ import annotations

from typing import Any, Sequence

from eth_abi import encode
from web3 import Web3

__all__ = [
    "function_selector",
    "encode_function_call",
    "find_function",
    "abi_input_types",
    "abi_signature",
    "abi_selector",
]


def function_selector(signature: str) -> bytes:
    """Return the 4-byte selector of a canonical function signature."""
    return bytes(Web3.keccak(text=signature)[:4])


def encode_function_call(name: str, arg_types: Sequence[str], args: Sequence[Any]) -> bytes:
    """
    Encode a call to `name(arg_types...)`.

    Args:
        name: Function name
        arg_types: Canonical ABI types, tuples written as "(address,uint256)"
        args: Values in declaration order

    Returns:
        Selector followed by the ABI-encoded arguments
    """
    signature = f"{name}({','.join(arg_types)})"
    return function_selector(signature) + encode(list(arg_types), list(args))


def _resolve_abi_type(inp: dict[str, Any]) -> str:
    typ = inp["type"]
    if typ.startswith("tuple"):
        inner = ",".join(_resolve_abi_type(c) for c in inp.get("components", []))
        # keep any array suffix: tuple[] -> (..)[]
        return f"({inner}){typ[len('tuple'):]}"
    return typ


def find_function(abi: list[dict[str, Any]], name: str) -> dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == name:
            return entry
    raise KeyError(f"Function '{name}' not found in ABI")


def abi_input_types(abi: list[dict[str, Any]], name: str) -> list[str]:
    """Canonical input types of function `name` in `abi`."""
    return [_resolve_abi_type(inp) for inp in find_function(abi, name).get("inputs", [])]


def abi_signature(abi: list[dict[str, Any]], name: str) -> str:
    return f"{name}({','.join(abi_input_types(abi, name))})"


def abi_selector(abi: list[dict[str, Any]], name: str) -> bytes:
    return function_selector(abi_signature(abi, name))
