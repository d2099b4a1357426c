"""
Protocol call builders.

Each mixin adds methods to ExecutorEncoder that ABI-encode one protocol
function and push it through the executor.
"""

from .aave import AaveMixin
from .compound import CompoundMixin
from .erc20 import Erc20Mixin
from .erc20_wrapper import Erc20WrapperMixin
from .erc4626 import Erc4626Mixin
from .flashloans import FlashLoanMixin
from .morpho import MorphoMixin
from .morpho_blue import MorphoBlueMixin
from .uniswap_v3 import UniswapV3Mixin
from .weth import WethMixin

__all__ = [
    'AaveMixin',
    'CompoundMixin',
    'Erc20Mixin',
    'Erc20WrapperMixin',
    'Erc4626Mixin',
    'FlashLoanMixin',
    'MorphoMixin',
    'MorphoBlueMixin',
    'UniswapV3Mixin',
    'WethMixin',
]
