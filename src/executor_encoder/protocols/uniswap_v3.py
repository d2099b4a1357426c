"""
Uniswap V3 SwapRouter exactInput / exactOutput.

exactInput((bytes path, address recipient, uint256 deadline, uint256 amountIn,
uint256 amountOutMinimum)) takes one dynamic struct, so its calldata is
selector | struct offset | path offset | recipient | deadline | amountIn | ...
and amountIn sits at 4 + 32 * 4.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call
from ..errors import MalformedInputError
from ..types import to_address

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

EXACT_INPUT_PARAMS_TYPE = "(bytes,address,uint256,uint256,uint256)"
EXACT_OUTPUT_PARAMS_TYPE = "(bytes,address,uint256,uint256,uint256)"

EXACT_INPUT_AMOUNT_IN_OFFSET = 4 + 32 * 4

ADDRESS_SIZE = 20


def path_input_token(path: bytes) -> str:
    """
    First token of an encoded V3 path (token | fee | token | ...).

    Raises:
        MalformedInputError: If the path is shorter than one address
    """
    if len(path) < ADDRESS_SIZE:
        raise MalformedInputError(f"path must be at least {ADDRESS_SIZE} bytes, got {len(path)}")
    return to_address(bytes(path[:ADDRESS_SIZE]))


class UniswapV3Mixin:

    def uni_v3_exact_input(
        self,
        router: str,
        path: bytes,
        amount_in: int,
        amount_out_minimum: int,
        deadline: int,
        recipient: str | None = None,
    ) -> "ExecutorEncoder":
        recipient = recipient or self.address
        params = (bytes(path), recipient, deadline, amount_in, amount_out_minimum)
        call_data = encode_function_call("exactInput", [EXACT_INPUT_PARAMS_TYPE], [params])
        return self.push_call(router, 0, call_data)

    def uni_v3_exact_input_all(
        self,
        router: str,
        path: bytes,
        amount_out_minimum: int,
        deadline: int,
        recipient: str | None = None,
    ) -> "ExecutorEncoder":
        """
        exactInput with the executor's entire balance of the path's input token.

        Raises:
            MalformedInputError: If path is shorter than 20 bytes
        """
        input_token = path_input_token(path)
        recipient = recipient or self.address
        placeholder = self.erc20_balance_of(input_token, self.address, EXACT_INPUT_AMOUNT_IN_OFFSET)
        params = (bytes(path), recipient, deadline, 0, amount_out_minimum)
        call_data = encode_function_call("exactInput", [EXACT_INPUT_PARAMS_TYPE], [params])
        return self.push_call(router, 0, call_data, placeholders=[placeholder])

    def uni_v3_exact_output(
        self,
        router: str,
        path: bytes,
        amount_out: int,
        amount_in_maximum: int,
        deadline: int,
        recipient: str | None = None,
    ) -> "ExecutorEncoder":
        recipient = recipient or self.address
        params = (bytes(path), recipient, deadline, amount_out, amount_in_maximum)
        call_data = encode_function_call("exactOutput", [EXACT_OUTPUT_PARAMS_TYPE], [params])
        return self.push_call(router, 0, call_data)
