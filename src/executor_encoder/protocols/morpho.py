"""
Morpho optimizer liquidations.

Morpho-Compound, Morpho-AaveV2 and Morpho-AaveV3 share the selector
liquidate(address,address,address,uint256); V3 takes underlyings where the
older optimizers take pool tokens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

LIQUIDATE_TYPES = ["address", "address", "address", "uint256"]


def encode_liquidate(borrowed: str, collateral: str, borrower: str, amount: int) -> bytes:
    return encode_function_call("liquidate", LIQUIDATE_TYPES, [borrowed, collateral, borrower, amount])


class MorphoMixin:

    def morpho_compound_liquidate(
        self, morpho_compound: str, borrowed_pool_token: str, collateral_pool_token: str, borrower: str, amount: int
    ) -> "ExecutorEncoder":
        call_data = encode_liquidate(borrowed_pool_token, collateral_pool_token, borrower, amount)
        return self.push_call(morpho_compound, 0, call_data)

    def morpho_aave_v2_liquidate(
        self, morpho_aave_v2: str, borrowed_pool_token: str, collateral_pool_token: str, borrower: str, amount: int
    ) -> "ExecutorEncoder":
        call_data = encode_liquidate(borrowed_pool_token, collateral_pool_token, borrower, amount)
        return self.push_call(morpho_aave_v2, 0, call_data)

    def morpho_aave_v3_liquidate(
        self, morpho_aave_v3: str, underlying_borrowed: str, underlying_collateral: str, borrower: str, amount: int
    ) -> "ExecutorEncoder":
        call_data = encode_liquidate(underlying_borrowed, underlying_collateral, borrower, amount)
        return self.push_call(morpho_aave_v3, 0, call_data)
