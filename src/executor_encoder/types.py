"""
Value types shared by the encoder, the protocol builders and the CLI.

Addresses are stored as checksum strings so that two instances built from
differently-cased input compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from eth_typing import ChecksumAddress
from web3 import Web3

ZERO_ADDRESS: ChecksumAddress = Web3.to_checksum_address("0x" + "00" * 20)


def to_address(value: str | bytes) -> ChecksumAddress:
    """Normalise a hex string or 20 raw bytes to a checksum address."""
    return Web3.to_checksum_address(value)


@dataclass(frozen=True)
class CallbackContext:
    """
    Who is expected to call the executor back, and where to find the data.

    `sender` is the address expected to call back.
    `data_index` is the position of the `bytes` parameter in the callback
    function signature.
    """
    sender: ChecksumAddress = ZERO_ADDRESS
    data_index: int = 0

    def __post_init__(self):
        object.__setattr__(self, "sender", to_address(self.sender))


@dataclass(frozen=True)
class Placeholder:
    """
    Staticcall `to` with `data`, then copy `length` bytes from `res_offset` of
    the result into the call data at `offset`.
    """
    to: ChecksumAddress
    data: bytes
    offset: int
    length: int = 32
    res_offset: int = 0

    def __post_init__(self):
        object.__setattr__(self, "to", to_address(self.to))
        object.__setattr__(self, "data", bytes(self.data))

    def as_abi_tuple(self) -> tuple[str, bytes, int, int, int]:
        return (self.to, self.data, self.offset, self.length, self.res_offset)


@dataclass(frozen=True)
class AssetRequest:
    """A request for a specific amount of an asset (used in flash loans)."""
    asset: ChecksumAddress
    amount: int

    def __post_init__(self):
        object.__setattr__(self, "asset", to_address(self.asset))


@dataclass(frozen=True)
class MarketParams:
    """Morpho Blue market parameters."""
    loan_token: ChecksumAddress
    collateral_token: ChecksumAddress
    oracle: ChecksumAddress
    irm: ChecksumAddress
    lltv: int

    def __post_init__(self):
        for name in ("loan_token", "collateral_token", "oracle", "irm"):
            object.__setattr__(self, name, to_address(getattr(self, name)))

    def as_abi_tuple(self) -> tuple[str, str, str, str, int]:
        return (self.loan_token, self.collateral_token, self.oracle, self.irm, self.lltv)


@dataclass(frozen=True)
class EncodedExec:
    """The encoded transaction data ready to be sent."""
    to: ChecksumAddress
    data: bytes
    value: int

    def as_dict(self) -> dict[str, Any]:
        # Shape expected by web3's build_transaction / send_transaction
        return {"to": self.to, "data": "0x" + self.data.hex(), "value": self.value}


@dataclass(frozen=True)
class DecodedCall:
    """A sub-call decoded back from its executor encoding."""
    target: ChecksumAddress
    value: int
    context: CallbackContext
    call_data: bytes
    placeholders: tuple[Placeholder, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "value": self.value,
            "context": {
                "sender": self.context.sender,
                "data_index": self.context.data_index,
            },
            "call_data": "0x" + self.call_data.hex(),
            "placeholders": [
                {
                    "to": p.to,
                    "data": "0x" + p.data.hex(),
                    "offset": p.offset,
                    "length": p.length,
                    "res_offset": p.res_offset,
                }
                for p in self.placeholders
            ],
        }
