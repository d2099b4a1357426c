"""WETH wrap/unwrap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder


class WethMixin:

    def wrap_eth(self, weth: str, amount: int) -> "ExecutorEncoder":
        """Wrap ETH by calling deposit() with `amount` as msg.value."""
        # deposit()
        return self.push_call(weth, amount, encode_function_call("deposit", [], []))

    def unwrap_eth(self, weth: str, amount: int) -> "ExecutorEncoder":
        # withdraw(uint256)
        return self.push_call(weth, 0, encode_function_call("withdraw", ["uint256"], [amount]))
