"""
Batch builder for the Executor contract.

Accumulates encoded sub-calls and the native value they forward, then wraps
them into a single exec_606BaXt(bytes[]) transaction.

Example:
    encoder = ExecutorEncoder(executor_address)
    encoder.erc20_approve(dai, aave_pool, amount).aave_supply(aave_pool, dai, amount)
    tx = encoder.encode_exec()
"""

from __future__ import annotations

import logging
from typing import Sequence

from eth_typing import ChecksumAddress

from .abi import abi_input_types, encode_function_call
from .calls import build_call, encode_exec_data
from .config.abis import EXECUTOR_ABI
from .errors import InvalidRecipientError
from .fixed_point import checked_add, ensure_uint256
from .protocols import (
    AaveMixin,
    CompoundMixin,
    Erc20Mixin,
    Erc20WrapperMixin,
    Erc4626Mixin,
    FlashLoanMixin,
    MorphoBlueMixin,
    MorphoMixin,
    UniswapV3Mixin,
    WethMixin,
)
from .types import ZERO_ADDRESS, CallbackContext, EncodedExec, Placeholder, to_address

logger = logging.getLogger(__name__)

TRANSFER_TYPES: list[str] = abi_input_types(EXECUTOR_ABI, "transfer")


class ExecutorEncoder(
    Erc20Mixin,
    WethMixin,
    Erc20WrapperMixin,
    Erc4626Mixin,
    AaveMixin,
    CompoundMixin,
    MorphoMixin,
    MorphoBlueMixin,
    UniswapV3Mixin,
    FlashLoanMixin,
):
    """Builder for encoding batched calls to the Executor contract."""

    build_call = staticmethod(build_call)

    def __init__(self, address: str):
        """
        Args:
            address: Executor contract address
        """
        self._address = to_address(address)
        self._calls: list[bytes] = []
        self._total_value = 0

    @property
    def address(self) -> ChecksumAddress:
        """The executor contract address."""
        return self._address

    @property
    def total_value(self) -> int:
        """Sum of the native value of all pending calls."""
        return self._total_value

    @property
    def pending_calls(self) -> tuple[bytes, ...]:
        return tuple(self._calls)

    def __len__(self) -> int:
        return len(self._calls)

    def push_call(
        self,
        target: str,
        value: int,
        call_data: bytes,
        context: CallbackContext | None = None,
        placeholders: Sequence[Placeholder] | None = None,
    ) -> "ExecutorEncoder":
        """
        Encode a call and append it to the pending batch.

        Args:
            target: Contract the executor calls
            value: Native value forwarded with the call (in wei)
            call_data: Calldata for the target
            context: Expected callback, if the target calls the executor back
            placeholders: Staticcall results to splice into call_data

        Returns:
            self, for chaining
        """
        encoded = build_call(target, value, call_data, context, placeholders)
        # Only commit once encoding and the value check have both succeeded
        self._total_value = checked_add(self._total_value, value)
        self._calls.append(encoded)
        logger.debug(
            f"Queued call #{len(self._calls)} to {to_address(target)} "
            f"(value={value}, placeholders={len(placeholders or ())})"
        )
        return self

    def flush(self) -> list[bytes]:
        """Drain and return all accumulated calls, resetting internal state."""
        calls, self._calls = self._calls, []
        self._total_value = 0
        logger.debug(f"Flushed {len(calls)} calls")
        return calls

    def transfer(self, recipient: str, amount: int) -> "ExecutorEncoder":
        """
        Transfer native currency from the executor to `recipient`.

        Raises:
            InvalidRecipientError: If recipient is the zero address (use tip())
        """
        recipient = to_address(recipient)
        if recipient == ZERO_ADDRESS:
            raise InvalidRecipientError("recipient should not be zero: use tip() instead")
        return self._push_executor_transfer(recipient, amount)

    def tip(self, amount: int) -> "ExecutorEncoder":
        """Send native currency to block.coinbase (the executor treats recipient 0 as coinbase)."""
        return self._push_executor_transfer(ZERO_ADDRESS, amount)

    def _push_executor_transfer(self, recipient: str, amount: int) -> "ExecutorEncoder":
        call_data = encode_function_call("transfer", TRANSFER_TYPES, [recipient, ensure_uint256(amount, "amount")])
        return self.push_call(self.address, 0, call_data)

    def encode_exec(self, extra_value: int = 0) -> EncodedExec:
        """
        Encode the full exec_606BaXt(bytes[]) transaction.

        Consumes all accumulated calls (like flush()); the encoder is reset and
        ready for the next batch afterwards.

        Args:
            extra_value: Native value sent on top of the sub-calls' values

        Returns:
            EncodedExec with the executor as `to`
        """
        value = checked_add(self._total_value, extra_value)
        calls = self.flush()
        tx = EncodedExec(to=self.address, data=encode_exec_data(calls), value=value)
        logger.info(f"Encoded exec with {len(calls)} calls, value {value}")
        return tx
