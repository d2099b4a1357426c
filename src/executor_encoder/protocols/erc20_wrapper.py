"""
ERC20Wrapper (OpenZeppelin) deposits and withdrawals.

depositFor(address,uint256) and withdrawTo(address,uint256) carry the amount
in the second slot, at 4 + 32.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call
from .erc20 import SECOND_ARG_OFFSET

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

DEPOSIT_FOR_TYPES = ["address", "uint256"]
WITHDRAW_TO_TYPES = ["address", "uint256"]


class Erc20WrapperMixin:

    def erc20_wrapper_deposit_for(self, asset: str, on_behalf: str, amount: int) -> "ExecutorEncoder":
        """Deposit `amount` of the underlying into wrapper `asset`, crediting `on_behalf`."""
        call_data = encode_function_call("depositFor", DEPOSIT_FOR_TYPES, [on_behalf, amount])
        return self.push_call(asset, 0, call_data)

    def erc20_wrapper_deposit_all_for(self, asset: str, underlying: str, on_behalf: str) -> "ExecutorEncoder":
        """Deposit the executor's entire `underlying` balance, read at execution time."""
        placeholder = self.erc20_balance_of(underlying, self.address, SECOND_ARG_OFFSET)
        call_data = encode_function_call("depositFor", DEPOSIT_FOR_TYPES, [on_behalf, 0])
        return self.push_call(asset, 0, call_data, placeholders=[placeholder])

    def erc20_wrapper_withdraw_to(self, asset: str, receiver: str, amount: int) -> "ExecutorEncoder":
        call_data = encode_function_call("withdrawTo", WITHDRAW_TO_TYPES, [receiver, amount])
        return self.push_call(asset, 0, call_data)

    def erc20_wrapper_withdraw_all_to(self, asset: str, receiver: str) -> "ExecutorEncoder":
        """Withdraw the executor's entire wrapper balance to `receiver`."""
        placeholder = self.erc20_balance_of(asset, self.address, SECOND_ARG_OFFSET)
        call_data = encode_function_call("withdrawTo", WITHDRAW_TO_TYPES, [receiver, 0])
        return self.push_call(asset, 0, call_data, placeholders=[placeholder])
