"""
Flash loans.

Every flash loan is one executor call to the lender, whose `bytes` argument is
callback data: the caller's calls followed by the repayment calls the lender
requires, plus the lender's expected callback return value. The call carries
a callback context authorising the lender to call the executor back; the
data index and return value come from config.callbacks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ..abi import encode_function_call
from ..calls import encode_callback_data
from ..config.callbacks import callback_context, get_callback_spec
from ..fixed_point import checked_add, mul_div_up, percent_mul
from ..types import AssetRequest

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

logger = logging.getLogger(__name__)

# flashLoan(address recipient, address[] tokens, uint256[] amounts, bytes userData)
BALANCER_FLASH_LOAN_TYPES = ["address", "address[]", "uint256[]", "bytes"]
# ERC-3156 flashLoan(address receiver, address token, uint256 amount, bytes data)
MAKER_FLASH_LOAN_TYPES = ["address", "address", "uint256", "bytes"]
# flashLoan(address receiverAddress, address[] assets, uint256[] amounts, uint256[] modes,
#           address onBehalfOf, bytes params, uint16 referralCode)
AAVE_FLASH_LOAN_TYPES = ["address", "address[]", "uint256[]", "uint256[]", "address", "bytes", "uint16"]
# flash(address recipient, uint256 amount0, uint256 amount1, bytes data)
UNISWAP_V3_FLASH_TYPES = ["address", "uint256", "uint256", "bytes"]
# flashLoan(address token, uint256 assets, bytes data)
MORPHO_BLUE_FLASH_LOAN_TYPES = ["address", "uint256", "bytes"]

# Uniswap V3 fees are expressed in hundredths of a bip
UNISWAP_V3_FEE_DENOMINATOR = 1_000_000

# Aave mode 0: no debt is opened, the loan must be repaid in the callback
AAVE_NO_DEBT_MODE = 0


class FlashLoanMixin:

    def _push_flash_loan(
        self,
        protocol: str,
        lender: str,
        call_data_builder,
        callback_calls: Sequence[bytes] | None,
        repayment_calls: Sequence[bytes],
    ) -> "ExecutorEncoder":
        spec = get_callback_spec(protocol)
        calls = list(callback_calls or []) + list(repayment_calls)
        data = encode_callback_data(calls, spec.return_value)
        logger.debug(
            f"{protocol} flash loan from {lender}: {len(calls)} callback calls "
            f"({len(repayment_calls)} repayment)"
        )
        return self.push_call(lender, 0, call_data_builder(data), context=callback_context(protocol, lender))

    def balancer_flash_loan(
        self, vault: str, requests: Sequence[AssetRequest], callback_calls: Sequence[bytes] | None = None
    ) -> "ExecutorEncoder":
        """
        Balancer V2 flash loan. Balancer charges no fee; repayment is a transfer
        of each borrowed amount back to the vault.
        """
        repayments = [self.build_erc20_transfer(r.asset, vault, r.amount) for r in requests]
        tokens = [r.asset for r in requests]
        amounts = [r.amount for r in requests]
        return self._push_flash_loan(
            "balancer",
            vault,
            lambda data: encode_function_call(
                "flashLoan", BALANCER_FLASH_LOAN_TYPES, [self.address, tokens, amounts, data]
            ),
            callback_calls,
            repayments,
        )

    def maker_flash_loan(
        self, vault: str, asset: str, amount: int, callback_calls: Sequence[bytes] | None = None
    ) -> "ExecutorEncoder":
        """
        ERC-3156 flash loan (Maker DssFlash). The lender pulls the repayment, so
        an approval is appended, and the callback must return
        keccak256("ERC3156FlashBorrower.onFlashLoan").
        """
        repayments = [self.build_erc20_approve(asset, vault, amount)]
        return self._push_flash_loan(
            "maker",
            vault,
            lambda data: encode_function_call(
                "flashLoan", MAKER_FLASH_LOAN_TYPES, [self.address, asset, amount, data]
            ),
            callback_calls,
            repayments,
        )

    def aave_flash_loan(
        self,
        pool: str,
        requests: Sequence[AssetRequest],
        premium: int,
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        """
        Aave flash loan.

        Args:
            pool: Aave pool
            requests: Assets and amounts to borrow
            premium: Flash loan premium in basis points (5 = 0.05%)
            callback_calls: Calls to run once the funds arrive

        The pool pulls amount + percentMul(amount, premium) for each asset.
        """
        repayments = [
            self.build_erc20_approve(r.asset, pool, checked_add(r.amount, percent_mul(r.amount, premium)))
            for r in requests
        ]
        assets = [r.asset for r in requests]
        amounts = [r.amount for r in requests]
        modes = [AAVE_NO_DEBT_MODE] * len(requests)
        return self._push_flash_loan(
            "aave",
            pool,
            lambda data: encode_function_call(
                "flashLoan",
                AAVE_FLASH_LOAN_TYPES,
                [self.address, assets, amounts, modes, self.address, data, 0],
            ),
            callback_calls,
            repayments,
        )

    def uni_v2_flash_swap(
        self,
        pool: str,
        assets: Sequence[str],
        amounts: Sequence[int],
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        """
        Uniswap V2 flash swap: not supported.

        A V2 flash swap goes through the pair's swap() entry point and must
        repay enough to restore the fee-adjusted invariant; neither is modelled
        yet, and reusing the V3 flash() shape would revert on a V2 pair.
        """
        raise NotImplementedError(
            "Uniswap V2 flash swaps are not supported: swap() entry point and fee repayment are not implemented"
        )

    def uni_v3_flash_loan(
        self,
        pool: str,
        assets: Sequence[str],
        amounts: Sequence[int],
        fee: int,
        callback_calls: Sequence[bytes] | None = None,
    ) -> "ExecutorEncoder":
        """
        Uniswap V3 pool flash.

        Args:
            pool: Uniswap V3 pool
            assets: (token0, token1) of the pool
            amounts: (amount0, amount1) to borrow
            fee: Pool fee in hundredths of a bip (500 = 0.05%)
            callback_calls: Calls to run once the funds arrive

        The pool expects amount + ceil(amount * fee / 1e6) of each token to be
        transferred back before the callback returns.
        """
        if len(assets) != 2 or len(amounts) != 2:
            raise ValueError("uni_v3_flash_loan expects exactly two assets and two amounts")
        repayments = [
            self.build_erc20_transfer(
                asset, pool, checked_add(amount, mul_div_up(amount, fee, UNISWAP_V3_FEE_DENOMINATOR))
            )
            for asset, amount in zip(assets, amounts)
        ]
        return self._push_flash_loan(
            "uniswap_v3",
            pool,
            lambda data: encode_function_call(
                "flash", UNISWAP_V3_FLASH_TYPES, [self.address, amounts[0], amounts[1], data]
            ),
            callback_calls,
            repayments,
        )

    def blue_flash_loan(
        self, morpho_blue: str, asset: str, amount: int, callback_calls: Sequence[bytes] | None = None
    ) -> "ExecutorEncoder":
        """Morpho Blue flash loan (free; Morpho pulls the amount back)."""
        repayments = [self.build_erc20_approve(asset, morpho_blue, amount)]
        return self._push_flash_loan(
            "morpho_blue_flash_loan",
            morpho_blue,
            lambda data: encode_function_call(
                "flashLoan", MORPHO_BLUE_FLASH_LOAN_TYPES, [asset, amount, data]
            ),
            callback_calls,
            repayments,
        )
