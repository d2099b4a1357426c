"""
ERC20 calls routed through the executor.

Placeholder offsets: approve(address,uint256) and transfer(address,uint256)
both carry the amount in the second slot, at 4 + 32.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import abi_input_types, encode_function_call
from ..calls import build_call
from ..config.abis import ERC20_ABI
from ..types import Placeholder

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

BALANCE_OF_TYPES = abi_input_types(ERC20_ABI, "balanceOf")
APPROVE_TYPES = abi_input_types(ERC20_ABI, "approve")
TRANSFER_TYPES = abi_input_types(ERC20_ABI, "transfer")
TRANSFER_FROM_TYPES = abi_input_types(ERC20_ABI, "transferFrom")

# Offset of the second static argument (selector + one slot)
SECOND_ARG_OFFSET = 4 + 32


def encode_approve(spender: str, amount: int) -> bytes:
    return encode_function_call("approve", APPROVE_TYPES, [spender, amount])


def encode_transfer(recipient: str, amount: int) -> bytes:
    return encode_function_call("transfer", TRANSFER_TYPES, [recipient, amount])


def encode_balance_of(owner: str) -> bytes:
    return encode_function_call("balanceOf", BALANCE_OF_TYPES, [owner])


class Erc20Mixin:
    """ERC20 approve/transfer helpers for ExecutorEncoder."""

    @staticmethod
    def build_erc20_approve(asset: str, spender: str, amount: int) -> bytes:
        """
        Build an ERC20 approve call wrapped in the executor call.

        Used by flash loan methods to construct repayment calls.
        """
        return build_call(asset, 0, encode_approve(spender, amount))

    @staticmethod
    def build_erc20_transfer(asset: str, recipient: str, amount: int) -> bytes:
        """
        Build an ERC20 transfer call wrapped in the executor call.

        Used by flash loan methods to construct repayment calls.
        """
        return build_call(asset, 0, encode_transfer(recipient, amount))

    def erc20_balance_of(self, asset: str, owner: str, offset: int) -> Placeholder:
        """
        Create a Placeholder that reads balanceOf(owner) from `asset`.

        The 32-byte result (response offset 0) is written at `offset` in the
        call data of the call it is attached to.
        """
        return Placeholder(to=asset, data=encode_balance_of(owner), offset=offset, length=32, res_offset=0)

    def erc20_approve(self, asset: str, spender: str, allowance: int) -> "ExecutorEncoder":
        """Approve `spender` to spend `allowance` of `asset`."""
        return self.push_call(asset, 0, encode_approve(spender, allowance))

    def erc20_approve_all(self, asset: str, spender: str) -> "ExecutorEncoder":
        """Approve `spender` for the executor's entire balance of `asset`, read at execution time."""
        placeholder = self.erc20_balance_of(asset, self.address, SECOND_ARG_OFFSET)
        return self.push_call(asset, 0, encode_approve(spender, 0), placeholders=[placeholder])

    def erc20_transfer(self, asset: str, recipient: str, amount: int) -> "ExecutorEncoder":
        return self.push_call(asset, 0, encode_transfer(recipient, amount))

    def erc20_transfer_from(self, asset: str, owner: str, recipient: str, amount: int) -> "ExecutorEncoder":
        call_data = encode_function_call("transferFrom", TRANSFER_FROM_TYPES, [owner, recipient, amount])
        return self.push_call(asset, 0, call_data)

    def erc20_skim(self, asset: str, recipient: str) -> "ExecutorEncoder":
        """Transfer the executor's entire balance of `asset` to `recipient`."""
        placeholder = self.erc20_balance_of(asset, self.address, SECOND_ARG_OFFSET)
        return self.push_call(asset, 0, encode_transfer(recipient, 0), placeholders=[placeholder])
