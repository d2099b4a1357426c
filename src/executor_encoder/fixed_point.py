"""
Integer math matching the rounding of on-chain fee libraries.

Python ints never wrap, so results are checked against the uint256 range the
contracts revert on instead.
"""

UINT256_MAX: int = (1 << 256) - 1

# Aave PercentageMath: percentages carry two decimals (10_000 = 100.00%)
PERCENTAGE_FACTOR: int = 10_000
HALF_PERCENTAGE_FACTOR: int = 5_000


def ensure_uint256(value: int, name: str = "value") -> int:
    """
    Validate that `value` fits in a uint256.

    Raises:
        TypeError: If value is not an int (bools are rejected too)
        ValueError: If value is negative
        OverflowError: If value exceeds 2**256 - 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value > UINT256_MAX:
        raise OverflowError(f"{name} overflows uint256: {value}")
    return value


def checked_add(a: int, b: int) -> int:
    """Add two uint256 values, raising OverflowError instead of wrapping."""
    return ensure_uint256(ensure_uint256(a, "a") + ensure_uint256(b, "b"), "sum")


def percent_mul(value: int, percentage: int) -> int:
    """
    Equivalent to Aave's PercentageMath.percentMul.

    Returns (value * percentage + HALF_PERCENTAGE_FACTOR) / PERCENTAGE_FACTOR,
    i.e. half-up rounding.

    Args:
        value: Amount to scale
        percentage: Percentage in basis points (5 = 0.05%)
    """
    ensure_uint256(value, "value")
    ensure_uint256(percentage, "percentage")
    numerator = ensure_uint256(value * percentage + HALF_PERCENTAGE_FACTOR, "value * percentage")
    return numerator // PERCENTAGE_FACTOR


def mul_div_up(x: int, y: int, d: int) -> int:
    """
    Ceiling division of x * y by d: (x * y + d - 1) / d.

    Used for Uniswap V3 flash fees, where rounding down would underpay the pool.

    Raises:
        ZeroDivisionError: If d is zero
    """
    ensure_uint256(x, "x")
    ensure_uint256(y, "y")
    ensure_uint256(d, "d")
    if d == 0:
        raise ZeroDivisionError("mul_div_up divisor must be non-zero")
    numerator = ensure_uint256(x * y + d - 1, "x * y")
    return numerator // d
