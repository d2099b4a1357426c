"""
Morpho Blue market calls.

supply, supplyCollateral, repay and liquidate accept a `bytes data` argument
and, when it is non-empty, call back onMorpho<Action>(uint256, bytes). The
executor expects the callback data at index 1, encoded as callback data with
an empty return value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..abi import encode_function_call
from ..calls import encode_callback_data
from ..config.callbacks import callback_context, get_callback_spec
from ..types import MarketParams

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

MARKET_PARAMS_TYPE = "(address,address,address,address,uint256)"

SUPPLY_COLLATERAL_TYPES = [MARKET_PARAMS_TYPE, "uint256", "address", "bytes"]
WITHDRAW_COLLATERAL_TYPES = [MARKET_PARAMS_TYPE, "uint256", "address", "address"]
SUPPLY_TYPES = [MARKET_PARAMS_TYPE, "uint256", "uint256", "address", "bytes"]
WITHDRAW_TYPES = [MARKET_PARAMS_TYPE, "uint256", "uint256", "address", "address"]
REPAY_TYPES = [MARKET_PARAMS_TYPE, "uint256", "uint256", "address", "bytes"]
BORROW_TYPES = [MARKET_PARAMS_TYPE, "uint256", "uint256", "address", "address"]
LIQUIDATE_TYPES = [MARKET_PARAMS_TYPE, "address", "uint256", "uint256", "bytes"]


class MorphoBlueMixin:

    def _push_morpho_blue_callback_call(
        self, morpho_blue: str, protocol: str, call_data: bytes
    ) -> "ExecutorEncoder":
        return self.push_call(morpho_blue, 0, call_data, context=callback_context(protocol, morpho_blue))

    @staticmethod
    def _morpho_blue_callback_data(protocol: str, callback_calls: Sequence[bytes] | None) -> bytes:
        return encode_callback_data(callback_calls or [], get_callback_spec(protocol).return_value)

    def morpho_blue_supply_collateral(
        self,
        morpho_blue: str,
        market: MarketParams,
        collateral: int,
        on_behalf: str,
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        data = self._morpho_blue_callback_data("morpho_blue_supply_collateral", callback_calls)
        call_data = encode_function_call(
            "supplyCollateral", SUPPLY_COLLATERAL_TYPES, [market.as_abi_tuple(), collateral, on_behalf, data]
        )
        return self._push_morpho_blue_callback_call(morpho_blue, "morpho_blue_supply_collateral", call_data)

    def morpho_blue_withdraw_collateral(
        self, morpho_blue: str, market: MarketParams, collateral: int, on_behalf: str, receiver: str
    ) -> "ExecutorEncoder":
        call_data = encode_function_call(
            "withdrawCollateral", WITHDRAW_COLLATERAL_TYPES, [market.as_abi_tuple(), collateral, on_behalf, receiver]
        )
        return self.push_call(morpho_blue, 0, call_data)

    def morpho_blue_supply(
        self,
        morpho_blue: str,
        market: MarketParams,
        assets: int,
        shares: int,
        on_behalf: str,
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        data = self._morpho_blue_callback_data("morpho_blue_supply", callback_calls)
        call_data = encode_function_call(
            "supply", SUPPLY_TYPES, [market.as_abi_tuple(), assets, shares, on_behalf, data]
        )
        return self._push_morpho_blue_callback_call(morpho_blue, "morpho_blue_supply", call_data)

    def morpho_blue_withdraw(
        self, morpho_blue: str, market: MarketParams, assets: int, shares: int, on_behalf: str, receiver: str
    ) -> "ExecutorEncoder":
        call_data = encode_function_call(
            "withdraw", WITHDRAW_TYPES, [market.as_abi_tuple(), assets, shares, on_behalf, receiver]
        )
        return self.push_call(morpho_blue, 0, call_data)

    def morpho_blue_repay(
        self,
        morpho_blue: str,
        market: MarketParams,
        assets: int,
        shares: int,
        on_behalf: str,
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        data = self._morpho_blue_callback_data("morpho_blue_repay", callback_calls)
        call_data = encode_function_call(
            "repay", REPAY_TYPES, [market.as_abi_tuple(), assets, shares, on_behalf, data]
        )
        return self._push_morpho_blue_callback_call(morpho_blue, "morpho_blue_repay", call_data)

    def morpho_blue_borrow(
        self, morpho_blue: str, market: MarketParams, assets: int, shares: int, on_behalf: str, receiver: str
    ) -> "ExecutorEncoder":
        call_data = encode_function_call(
            "borrow", BORROW_TYPES, [market.as_abi_tuple(), assets, shares, on_behalf, receiver]
        )
        return self.push_call(morpho_blue, 0, call_data)

    def morpho_blue_liquidate(
        self,
        morpho_blue: str,
        market: MarketParams,
        borrower: str,
        seized_assets: int,
        repaid_shares: int,
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        data = self._morpho_blue_callback_data("morpho_blue_liquidate", callback_calls)
        call_data = encode_function_call(
            "liquidate", LIQUIDATE_TYPES, [market.as_abi_tuple(), borrower, seized_assets, repaid_shares, data]
        )
        return self._push_morpho_blue_callback_call(morpho_blue, "morpho_blue_liquidate", call_data)
