"""
Tests for the protocol call builders.

Placeholder offsets are checked with a sentinel: the same call built with an
explicit SENTINEL amount must carry that word exactly at the offset the
"all" variant patches, and be otherwise identical.
"""

import pytest

from executor_encoder import ExecutorEncoder
from executor_encoder.abi import function_selector
from executor_encoder.calls import decode_callback_data
from executor_encoder.errors import MalformedInputError
from executor_encoder.protocols.aave import (
    BORROW_TYPES,
    DEPOSIT_TYPES,
    LIQUIDATION_CALL_TYPES,
    REPAY_TYPES as AAVE_REPAY_TYPES,
)
from executor_encoder.protocols.erc20 import encode_approve, encode_balance_of, encode_transfer
from executor_encoder.protocols.morpho_blue import (
    BORROW_TYPES as BLUE_BORROW_TYPES,
    SUPPLY_TYPES as BLUE_SUPPLY_TYPES,
)
from executor_encoder.protocols.uniswap_v3 import EXACT_INPUT_AMOUNT_IN_OFFSET, path_input_token
from executor_encoder.types import CallbackContext, MarketParams, to_address
from tests.helpers import (
    DAI,
    EXECUTOR,
    POOL,
    RECIPIENT,
    ROUTER,
    SENTINEL,
    USDC,
    VAULT,
    WETH,
    decode_args,
    single_call,
)

WORD = 32
PATH = bytes.fromhex(WETH[2:]) + (500).to_bytes(3, "big") + bytes.fromhex(DAI[2:])
MARKET = MarketParams(
    loan_token=DAI,
    collateral_token=WETH,
    oracle=POOL,
    irm=ROUTER,
    lltv=860_000_000_000_000_000,
)


def assert_patches_amount(patched, explicit, expected_offset):
    """`patched` reads its amount at `expected_offset`, where `explicit` carries SENTINEL."""
    assert len(patched.placeholders) == 1
    placeholder = patched.placeholders[0]
    assert placeholder.offset == expected_offset
    assert placeholder.length == WORD
    assert placeholder.res_offset == 0

    offset = placeholder.offset
    assert explicit.call_data[offset:offset + WORD] == SENTINEL.to_bytes(WORD, "big")
    assert patched.call_data[offset:offset + WORD] == bytes(WORD)
    assert patched.call_data[:offset] == explicit.call_data[:offset]
    assert patched.call_data[offset + WORD:] == explicit.call_data[offset + WORD:]
    return placeholder


def build(method, *args, **kwargs):
    encoder = ExecutorEncoder(EXECUTOR)
    getattr(encoder, method)(*args, **kwargs)
    return single_call(encoder)


class TestErc20:

    def test_known_selectors(self):
        assert encode_approve(VAULT, 1)[:4].hex() == "095ea7b3"
        assert encode_transfer(VAULT, 1)[:4].hex() == "a9059cbb"
        assert encode_balance_of(VAULT)[:4].hex() == "70a08231"

    def test_approve(self):
        call = build("erc20_approve", DAI, VAULT, 100)
        assert call.target == DAI
        assert call.value == 0
        assert call.call_data == encode_approve(VAULT, 100)
        assert call.placeholders == ()

    def test_transfer_from(self):
        call = build("erc20_transfer_from", DAI, VAULT, RECIPIENT, 9)
        assert call.call_data[:4] == function_selector("transferFrom(address,address,uint256)")
        owner, recipient, amount = decode_args(["address", "address", "uint256"], call.call_data)
        assert (to_address(owner), to_address(recipient), amount) == (VAULT, RECIPIENT, 9)

    def test_approve_all(self):
        patched = build("erc20_approve_all", DAI, VAULT)
        explicit = build("erc20_approve", DAI, VAULT, SENTINEL)
        placeholder = assert_patches_amount(patched, explicit, 36)
        assert placeholder.to == DAI
        assert placeholder.data == encode_balance_of(EXECUTOR)

    def test_skim(self):
        patched = build("erc20_skim", DAI, RECIPIENT)
        explicit = build("erc20_transfer", DAI, RECIPIENT, SENTINEL)
        placeholder = assert_patches_amount(patched, explicit, 36)
        assert placeholder.to == DAI

    def test_balance_of_placeholder(self, encoder):
        placeholder = encoder.erc20_balance_of(USDC, RECIPIENT, 100)
        assert placeholder.to == USDC
        assert placeholder.data == encode_balance_of(RECIPIENT)
        assert placeholder.offset == 100
        assert len(encoder) == 0


class TestWrappers:

    def test_unwrap_eth(self):
        call = build("unwrap_eth", WETH, 50)
        assert call.value == 0
        assert call.call_data == function_selector("withdraw(uint256)") + (50).to_bytes(32, "big")

    def test_wrapper_deposit_all_for(self):
        patched = build("erc20_wrapper_deposit_all_for", WETH, DAI, RECIPIENT)
        explicit = build("erc20_wrapper_deposit_for", WETH, RECIPIENT, SENTINEL)
        placeholder = assert_patches_amount(patched, explicit, 36)
        # balance of the underlying, not of the wrapper
        assert placeholder.to == DAI
        assert patched.target == WETH

    def test_wrapper_withdraw_all_to(self):
        patched = build("erc20_wrapper_withdraw_all_to", WETH, RECIPIENT)
        explicit = build("erc20_wrapper_withdraw_to", WETH, RECIPIENT, SENTINEL)
        placeholder = assert_patches_amount(patched, explicit, 36)
        assert placeholder.to == WETH

    def test_erc4626_deposit_all(self):
        patched = build("erc4626_deposit_all", VAULT, DAI, RECIPIENT)
        explicit = build("erc4626_deposit", VAULT, SENTINEL, RECIPIENT)
        placeholder = assert_patches_amount(patched, explicit, 4)
        assert placeholder.to == DAI

    def test_erc4626_redeem_all(self):
        patched = build("erc4626_redeem_all", VAULT, RECIPIENT, EXECUTOR)
        explicit = build("erc4626_redeem", VAULT, SENTINEL, RECIPIENT, EXECUTOR)
        placeholder = assert_patches_amount(patched, explicit, 4)
        # shares are the vault token itself
        assert placeholder.to == VAULT

    def test_erc4626_mint_and_withdraw(self):
        mint = build("erc4626_mint", VAULT, 3, RECIPIENT)
        assert mint.call_data[:4] == function_selector("mint(uint256,address)")
        withdraw = build("erc4626_withdraw", VAULT, 3, RECIPIENT, EXECUTOR)
        assert withdraw.call_data[:4] == function_selector("withdraw(uint256,address,address)")


class TestUniswapV3:

    def test_exact_input_all(self):
        patched = build("uni_v3_exact_input_all", ROUTER, PATH, 1, 10**10)
        explicit = build("uni_v3_exact_input", ROUTER, PATH, SENTINEL, 1, 10**10)
        placeholder = assert_patches_amount(patched, explicit, EXACT_INPUT_AMOUNT_IN_OFFSET)
        assert EXACT_INPUT_AMOUNT_IN_OFFSET == 132
        assert placeholder.to == WETH
        assert placeholder.data == encode_balance_of(EXECUTOR)

    def test_exact_input_defaults_recipient_to_executor(self):
        call = build("uni_v3_exact_input", ROUTER, PATH, 10, 1, 10**10)
        assert call.call_data[:4] == function_selector("exactInput((bytes,address,uint256,uint256,uint256))")
        ((path, recipient, deadline, amount_in, minimum),) = decode_args(
            ["(bytes,address,uint256,uint256,uint256)"], call.call_data
        )
        assert path == PATH
        assert to_address(recipient) == EXECUTOR
        assert (deadline, amount_in, minimum) == (10**10, 10, 1)

    def test_exact_output(self):
        call = build("uni_v3_exact_output", ROUTER, PATH, 10, 20, 10**10, recipient=RECIPIENT)
        assert call.call_data[:4] == function_selector("exactOutput((bytes,address,uint256,uint256,uint256))")
        ((_, recipient, _, amount_out, maximum),) = decode_args(
            ["(bytes,address,uint256,uint256,uint256)"], call.call_data
        )
        assert to_address(recipient) == RECIPIENT
        assert (amount_out, maximum) == (10, 20)

    def test_path_input_token(self):
        assert path_input_token(PATH) == WETH
        assert path_input_token(PATH[:20]) == WETH

    def test_short_path_raises(self, encoder):
        with pytest.raises(MalformedInputError):
            encoder.uni_v3_exact_input_all(ROUTER, PATH[:19], 1, 10**10)
        assert len(encoder) == 0


class TestLending:

    def test_aave_supply_defaults_to_executor(self):
        call = build("aave_supply", POOL, DAI, 100)
        assert call.target == POOL
        assert call.call_data[:4] == function_selector("deposit(address,uint256,address,uint16)")
        asset, amount, on_behalf_of, referral = decode_args(DEPOSIT_TYPES, call.call_data)
        assert (to_address(asset), amount, to_address(on_behalf_of), referral) == (DAI, 100, EXECUTOR, 0)

    def test_aave_borrow_variable_rate(self):
        call = build("aave_borrow", POOL, DAI, 100)
        _, _, mode, _, on_behalf_of = decode_args(BORROW_TYPES, call.call_data)
        assert mode == 2
        assert to_address(on_behalf_of) == EXECUTOR

    def test_aave_repay_on_behalf(self):
        call = build("aave_repay", POOL, DAI, 100, 1, RECIPIENT)
        _, amount, mode, on_behalf_of = decode_args(AAVE_REPAY_TYPES, call.call_data)
        assert (amount, mode, to_address(on_behalf_of)) == (100, 1, RECIPIENT)

    def test_aave_withdraw(self):
        call = build("aave_withdraw", POOL, DAI, 100)
        assert call.call_data[:4] == function_selector("withdraw(address,uint256,address)")

    def test_aave_liquidate(self):
        call = build("aave_liquidate", POOL, WETH, DAI, RECIPIENT, 100)
        *_, amount, receive_a_token = decode_args(LIQUIDATION_CALL_TYPES, call.call_data)
        assert amount == 100
        assert receive_a_token is False

    @pytest.mark.parametrize(
        "method, args, signature",
        [
            ("compound_supply", (POOL, 1), "mint(uint256)"),
            ("compound_borrow", (POOL, 1), "borrow(uint256)"),
            ("compound_repay", (POOL, 1), "repayBorrow(uint256)"),
            ("compound_repay", (POOL, 1, RECIPIENT), "repayBorrowBehalf(address,uint256)"),
            ("compound_withdraw", (POOL, 1), "redeemUnderlying(uint256)"),
            ("morpho_compound_liquidate", (POOL, DAI, WETH, RECIPIENT, 1), "liquidate(address,address,address,uint256)"),
            ("morpho_aave_v2_liquidate", (POOL, DAI, WETH, RECIPIENT, 1), "liquidate(address,address,address,uint256)"),
            ("morpho_aave_v3_liquidate", (POOL, DAI, WETH, RECIPIENT, 1), "liquidate(address,address,address,uint256)"),
        ],
    )
    def test_selectors(self, method, args, signature):
        call = build(method, *args)
        assert call.target == POOL
        assert call.call_data[:4] == function_selector(signature)
        assert call.context == CallbackContext()


class TestMorphoBlue:

    def test_supply_with_callback(self):
        inner = ExecutorEncoder(EXECUTOR).build_call(DAI, 0, b"\x01")
        call = build("morpho_blue_supply", VAULT, MARKET, 100, 0, EXECUTOR, [inner])

        assert call.target == VAULT
        assert call.context == CallbackContext(VAULT, 1)
        assert call.call_data[:4] == function_selector(
            "supply((address,address,address,address,uint256),uint256,uint256,address,bytes)"
        )
        market, assets, shares, on_behalf, data = decode_args(BLUE_SUPPLY_TYPES, call.call_data)
        assert tuple(to_address(a) for a in market[:4]) == (DAI, WETH, POOL, ROUTER)
        assert market[4] == MARKET.lltv
        assert (assets, shares, to_address(on_behalf)) == (100, 0, EXECUTOR)
        assert decode_callback_data(data) == ([inner], b"")

    @pytest.mark.parametrize(
        "method, args",
        [
            ("morpho_blue_supply_collateral", (VAULT, MARKET, 1, EXECUTOR)),
            ("morpho_blue_repay", (VAULT, MARKET, 1, 0, EXECUTOR)),
            ("morpho_blue_liquidate", (VAULT, MARKET, RECIPIENT, 1, 0)),
        ],
    )
    def test_callback_actions_carry_context(self, method, args):
        call = build(method, *args)
        assert call.context == CallbackContext(VAULT, 1)

    @pytest.mark.parametrize(
        "method, args",
        [
            ("morpho_blue_withdraw_collateral", (VAULT, MARKET, 1, EXECUTOR, RECIPIENT)),
            ("morpho_blue_withdraw", (VAULT, MARKET, 1, 0, EXECUTOR, RECIPIENT)),
            ("morpho_blue_borrow", (VAULT, MARKET, 1, 0, EXECUTOR, RECIPIENT)),
        ],
    )
    def test_plain_actions_have_no_context(self, method, args):
        call = build(method, *args)
        assert call.context == CallbackContext()

    def test_borrow_arguments(self):
        call = build("morpho_blue_borrow", VAULT, MARKET, 5, 0, EXECUTOR, RECIPIENT)
        _, assets, shares, on_behalf, receiver = decode_args(BLUE_BORROW_TYPES, call.call_data)
        assert (assets, shares) == (5, 0)
        assert (to_address(on_behalf), to_address(receiver)) == (EXECUTOR, RECIPIENT)
