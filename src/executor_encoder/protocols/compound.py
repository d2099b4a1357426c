"""Compound V2 cToken calls."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder


class CompoundMixin:

    def compound_supply(self, c_token: str, amount: int) -> "ExecutorEncoder":
        """Supply `amount` to the cToken (calls mint)."""
        return self.push_call(c_token, 0, encode_function_call("mint", ["uint256"], [amount]))

    def compound_borrow(self, c_token: str, amount: int) -> "ExecutorEncoder":
        return self.push_call(c_token, 0, encode_function_call("borrow", ["uint256"], [amount]))

    def compound_repay(self, c_token: str, amount: int, on_behalf_of: str | None = None) -> "ExecutorEncoder":
        """Repay `amount`; uses repayBorrowBehalf when `on_behalf_of` is given."""
        if on_behalf_of is not None:
            call_data = encode_function_call("repayBorrowBehalf", ["address", "uint256"], [on_behalf_of, amount])
        else:
            call_data = encode_function_call("repayBorrow", ["uint256"], [amount])
        return self.push_call(c_token, 0, call_data)

    def compound_withdraw(self, c_token: str, amount: int) -> "ExecutorEncoder":
        """Withdraw `amount` of underlying (calls redeemUnderlying)."""
        return self.push_call(c_token, 0, encode_function_call("redeemUnderlying", ["uint256"], [amount]))
