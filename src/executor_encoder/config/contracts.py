"""
Well-known Ethereum mainnet contract addresses.

Used as defaults by the CLI and in tests; the encoder itself never checks that
an address belongs to the protocol it encodes for.
"""

CONTRACT_ADDRESSES: dict[str, str] = {
    # Flash loan providers
    "balancerVault": "0xBA12222222228d8Ba445958a75a0704d566BF2C8",
    "morphoBlue": "0xBBBBBbbBBb9cC5e90e3b3Af64bdAF62C37EEFFCb",
    "aaveV3Pool": "0x87870Bca3F3fD6335C3F4ce8392D69350B4fA4E2",
    "makerDssFlash": "0x60744434d6339a6B27d73d9Eda62b6F66a0a04FA",

    # DEX
    "uniswapV3Router": "0xE592427A0AEce92De3Edee1F18E0157C05861564",

    # Tokens
    "weth": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
    "dai": "0x6B175474E89094C44Da98b954EedeAC495271d0F",
    "usdc": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
}


def get_contract_address(name: str) -> str:
    """
    Get a well-known contract address by name.

    Raises:
        KeyError: If the name is unknown
    """
    if name not in CONTRACT_ADDRESSES:
        raise KeyError(f"Unknown contract '{name}'. Known: {', '.join(sorted(CONTRACT_ADDRESSES))}")
    return CONTRACT_ADDRESSES[name]
