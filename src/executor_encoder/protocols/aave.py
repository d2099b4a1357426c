"""
Aave pool calls (V2 `deposit` naming, also accepted by V3 pools).

Referral code is always 0. `on_behalf_of` / `to` default to the executor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

# deposit(address asset, uint256 amount, address onBehalfOf, uint16 referralCode)
DEPOSIT_TYPES = ["address", "uint256", "address", "uint16"]
# borrow(address asset, uint256 amount, uint256 interestRateMode, uint16 referralCode, address onBehalfOf)
BORROW_TYPES = ["address", "uint256", "uint256", "uint16", "address"]
# repay(address asset, uint256 amount, uint256 interestRateMode, address onBehalfOf)
REPAY_TYPES = ["address", "uint256", "uint256", "address"]
# withdraw(address asset, uint256 amount, address to)
WITHDRAW_TYPES = ["address", "uint256", "address"]
# liquidationCall(address collateralAsset, address debtAsset, address user, uint256 debtToCover, bool receiveAToken)
LIQUIDATION_CALL_TYPES = ["address", "address", "address", "uint256", "bool"]

VARIABLE_RATE_MODE = 2


class AaveMixin:

    def aave_supply(self, pool: str, asset: str, amount: int, on_behalf_of: str | None = None) -> "ExecutorEncoder":
        on_behalf_of = on_behalf_of or self.address
        call_data = encode_function_call("deposit", DEPOSIT_TYPES, [asset, amount, on_behalf_of, 0])
        return self.push_call(pool, 0, call_data)

    def aave_borrow(
        self,
        pool: str,
        asset: str,
        amount: int,
        interest_rate_mode: int = VARIABLE_RATE_MODE,
        on_behalf_of: str | None = None,
    ) -> "ExecutorEncoder":
        on_behalf_of = on_behalf_of or self.address
        call_data = encode_function_call(
            "borrow", BORROW_TYPES, [asset, amount, interest_rate_mode, 0, on_behalf_of]
        )
        return self.push_call(pool, 0, call_data)

    def aave_repay(
        self,
        pool: str,
        asset: str,
        amount: int,
        interest_rate_mode: int = VARIABLE_RATE_MODE,
        on_behalf_of: str | None = None,
    ) -> "ExecutorEncoder":
        on_behalf_of = on_behalf_of or self.address
        call_data = encode_function_call("repay", REPAY_TYPES, [asset, amount, interest_rate_mode, on_behalf_of])
        return self.push_call(pool, 0, call_data)

    def aave_withdraw(self, pool: str, asset: str, amount: int, to: str | None = None) -> "ExecutorEncoder":
        to = to or self.address
        call_data = encode_function_call("withdraw", WITHDRAW_TYPES, [asset, amount, to])
        return self.push_call(pool, 0, call_data)

    def aave_liquidate(
        self, pool: str, collateral: str, debt: str, user: str, amount: int
    ) -> "ExecutorEncoder":
        """Liquidate `user`, receiving the underlying collateral (not aTokens)."""
        call_data = encode_function_call(
            "liquidationCall", LIQUIDATION_CALL_TYPES, [collateral, debt, user, amount, False]
        )
        return self.push_call(pool, 0, call_data)
