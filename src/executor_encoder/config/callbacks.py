"""
Callback conventions of the protocols that call the executor back.

Each entry records the callback entry point the protocol invokes, the
zero-based index of its `bytes` argument (packed into the callback context so
the executor knows where to find the injected calls) and the value the
executor must return from the callback.
"""

from typing import NamedTuple

from eth_utils import keccak

from ..types import CallbackContext


class CallbackSpec(NamedTuple):
    callback: str
    data_index: int
    return_value: bytes = b""
    supported: bool = True


# keccak256("ERC3156FlashBorrower.onFlashLoan")
ERC3156_CALLBACK_SUCCESS: bytes = keccak(text="ERC3156FlashBorrower.onFlashLoan")

# abi.encode(true)
TRUE_WORD: bytes = (1).to_bytes(32, "big")

CALLBACK_SPECS: dict[str, CallbackSpec] = {
    "balancer": CallbackSpec(
        "receiveFlashLoan(address[],uint256[],uint256[],bytes)", 3,
    ),
    "maker": CallbackSpec(
        "onFlashLoan(address,address,uint256,uint256,bytes)", 4, ERC3156_CALLBACK_SUCCESS,
    ),
    "aave": CallbackSpec(
        "executeOperation(address[],uint256[],uint256[],address,bytes)", 4, TRUE_WORD,
    ),
    # Flash swaps go through swap(), not flash(); see DESIGN.md
    "uniswap_v2": CallbackSpec(
        "uniswapV2Call(address,uint256,uint256,bytes)", 3, supported=False,
    ),
    "uniswap_v3": CallbackSpec(
        "uniswapV3FlashCallback(uint256,uint256,bytes)", 2,
    ),
    "morpho_blue_flash_loan": CallbackSpec("onMorphoFlashLoan(uint256,bytes)", 1),
    "morpho_blue_supply": CallbackSpec("onMorphoSupply(uint256,bytes)", 1),
    "morpho_blue_supply_collateral": CallbackSpec("onMorphoSupplyCollateral(uint256,bytes)", 1),
    "morpho_blue_repay": CallbackSpec("onMorphoRepay(uint256,bytes)", 1),
    "morpho_blue_liquidate": CallbackSpec("onMorphoLiquidate(uint256,bytes)", 1),
}


def get_callback_spec(protocol: str) -> CallbackSpec:
    """
    Look up the callback convention of `protocol`.

    Raises:
        KeyError: If the protocol is unknown
    """
    try:
        return CALLBACK_SPECS[protocol]
    except KeyError:
        raise KeyError(
            f"Unknown callback protocol '{protocol}'. Known: {', '.join(sorted(CALLBACK_SPECS))}"
        ) from None


def callback_context(protocol: str, sender: str) -> CallbackContext:
    """Context authorising `sender` to call back with `protocol`'s convention."""
    return CallbackContext(sender=sender, data_index=get_callback_spec(protocol).data_index)
