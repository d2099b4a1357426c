"""
ERC4626 vault calls.

deposit(uint256,address) and redeem(uint256,address,address) take the amount
as their first argument, so "all" variants patch offset 4.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..abi import encode_function_call

if TYPE_CHECKING:
    from ..encoder import ExecutorEncoder

FIRST_ARG_OFFSET = 4


class Erc4626Mixin:

    def erc4626_deposit(self, vault: str, assets: int, owner: str) -> "ExecutorEncoder":
        """
        Deposit `assets` into `vault`.

        Args:
            vault: ERC4626 vault
            assets: Amount of underlying to deposit
            owner: Receiver of the vault shares
        """
        call_data = encode_function_call("deposit", ["uint256", "address"], [assets, owner])
        return self.push_call(vault, 0, call_data)

    def erc4626_deposit_all(self, vault: str, asset: str, owner: str) -> "ExecutorEncoder":
        """Deposit the executor's entire balance of `asset`, read at execution time."""
        placeholder = self.erc20_balance_of(asset, self.address, FIRST_ARG_OFFSET)
        call_data = encode_function_call("deposit", ["uint256", "address"], [0, owner])
        return self.push_call(vault, 0, call_data, placeholders=[placeholder])

    def erc4626_mint(self, vault: str, shares: int, owner: str) -> "ExecutorEncoder":
        call_data = encode_function_call("mint", ["uint256", "address"], [shares, owner])
        return self.push_call(vault, 0, call_data)

    def erc4626_withdraw(self, vault: str, assets: int, receiver: str, owner: str) -> "ExecutorEncoder":
        call_data = encode_function_call("withdraw", ["uint256", "address", "address"], [assets, receiver, owner])
        return self.push_call(vault, 0, call_data)

    def erc4626_redeem(self, vault: str, shares: int, receiver: str, owner: str) -> "ExecutorEncoder":
        call_data = encode_function_call("redeem", ["uint256", "address", "address"], [shares, receiver, owner])
        return self.push_call(vault, 0, call_data)

    def erc4626_redeem_all(self, vault: str, receiver: str, owner: str) -> "ExecutorEncoder":
        """Redeem the executor's entire share balance of `vault`."""
        placeholder = self.erc20_balance_of(vault, self.address, FIRST_ARG_OFFSET)
        call_data = encode_function_call("redeem", ["uint256", "address", "address"], [0, receiver, owner])
        return self.push_call(vault, 0, call_data, placeholders=[placeholder])
