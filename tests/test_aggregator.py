"""Market snapshot assembly from the three batched reads."""
import pytest

from truemarkets_agg.providers.core import BatchCallError, CallFailure
from truemarkets_agg.providers.truemarkets.abi import (BALANCE_OF,
                                                       GET_POOL_ADDRESSES,
                                                       MARKET_QUESTION, SLOT0,
                                                       TOKEN0, TOKEN1)
from truemarkets_agg.providers.truemarkets.constants import USDC_ADDRESS
from tests.fakes import (ADDITIONAL_INFO_TEXT, END_OF_TRADING, MARKET_ADDRESS,
                         MARKET_QUESTION_TEXT, MARKET_SOURCE_TEXT,
                         NO_POOL_ADDRESS, NO_TOKEN_ADDRESS, YES_POOL_ADDRESS,
                         YES_TOKEN_ADDRESS, balance_batch, basic_info_batch,
                         pool_info_batch)


@pytest.fixture
def scripted_reader(reader):
    reader.read_batch.side_effect = [basic_info_batch(), pool_info_batch(), balance_batch()]
    return reader


async def test_detail_success(scripted_reader, provider):
    detail = await provider.get_market(MARKET_ADDRESS)

    assert detail.error is None
    assert detail.market_address == MARKET_ADDRESS
    assert detail.question == MARKET_QUESTION_TEXT
    assert detail.additional_info == ADDITIONAL_INFO_TEXT
    assert detail.source == MARKET_SOURCE_TEXT
    assert detail.status == "Created"
    assert detail.end_of_trading == END_OF_TRADING
    assert detail.tokens.yes.token_address == YES_TOKEN_ADDRESS
    assert detail.tokens.no.token_address == NO_TOKEN_ADDRESS
    assert detail.tokens.yes.lp_address == YES_POOL_ADDRESS
    assert detail.tokens.no.lp_address == NO_POOL_ADDRESS
    # sqrt price 1.0 in raw units, 6 vs 18 decimals
    assert detail.prices.yes == pytest.approx(1e12)
    assert detail.prices.no == pytest.approx(1e12)
    assert detail.tvl == pytest.approx(3.0)


async def test_detail_issues_batches_in_dependency_order(scripted_reader, provider):
    await provider.get_market(MARKET_ADDRESS)

    assert scripted_reader.read_batch.await_count == 3
    basic, pools, balances = (c.args[0] for c in scripted_reader.read_batch.await_args_list)

    assert all(call.address == MARKET_ADDRESS for call in basic)
    assert basic[0].function is MARKET_QUESTION
    assert basic[-1].function is GET_POOL_ADDRESSES

    assert [(c.address, c.function) for c in pools] == [
        (YES_POOL_ADDRESS, TOKEN0),
        (YES_POOL_ADDRESS, TOKEN1),
        (NO_POOL_ADDRESS, TOKEN0),
        (NO_POOL_ADDRESS, TOKEN1),
        (YES_POOL_ADDRESS, SLOT0),
        (NO_POOL_ADDRESS, SLOT0),
    ]

    assert all(c.function is BALANCE_OF for c in balances)
    assert [(c.address, c.args) for c in balances] == [
        (USDC_ADDRESS, (YES_POOL_ADDRESS,)),
        (YES_TOKEN_ADDRESS, (YES_POOL_ADDRESS,)),
        (USDC_ADDRESS, (NO_POOL_ADDRESS,)),
        (NO_TOKEN_ADDRESS, (NO_POOL_ADDRESS,)),
    ]


@pytest.mark.parametrize("code,label", [(1, "ResolutionProposed"), (6, "Finalized"), (42, "Unknown")])
async def test_detail_status_labels(reader, provider, code, label):
    reader.read_batch.side_effect = [basic_info_batch(code), pool_info_batch(), balance_batch()]

    detail = await provider.get_market(MARKET_ADDRESS)

    assert detail.status == label


async def test_uninitialized_pool_prices_zero(reader, provider):
    reader.read_batch.side_effect = [basic_info_batch(), pool_info_batch(yes_sqrt=0), balance_batch()]

    detail = await provider.get_market(MARKET_ADDRESS)

    assert detail.prices.yes == 0.0
    assert detail.prices.no == pytest.approx(1e12)


async def test_basic_info_failure_fails_snapshot(reader, provider):
    batch = basic_info_batch()
    batch[0] = CallFailure("marketQuestion reverted")
    reader.read_batch.side_effect = [batch]

    with pytest.raises(BatchCallError, match="marketQuestion"):
        await provider.get_market(MARKET_ADDRESS)
    assert reader.read_batch.await_count == 1


async def test_pool_read_failure_fails_snapshot(reader, provider):
    batch = pool_info_batch()
    batch[4] = CallFailure("slot0 reverted")
    reader.read_batch.side_effect = [basic_info_batch(), batch]

    with pytest.raises(BatchCallError) as excinfo:
        await provider.get_market(MARKET_ADDRESS)
    assert excinfo.value.field_name == f"slot0@{YES_POOL_ADDRESS}"


async def test_balance_failure_degrades_tvl(reader, provider):
    balances = balance_batch()
    balances[2] = CallFailure("balanceOf reverted")
    reader.read_batch.side_effect = [basic_info_batch(), pool_info_batch(), balances]

    detail = await provider.get_market(MARKET_ADDRESS)

    assert detail.error is None
    assert detail.tvl == pytest.approx(1.0)
    assert detail.prices.no == pytest.approx(1e12)


async def test_pool_without_reference_asset(reader, provider):
    batch = pool_info_batch()
    batch[0] = batch[1]
    reader.read_batch.side_effect = [basic_info_batch(), batch]

    with pytest.raises(ValueError, match="reference asset"):
        await provider.get_market(MARKET_ADDRESS)


@pytest.mark.parametrize("address", ["", "not-an-address", "0x1234", "1234567890123456789012345678901234567890"])
async def test_invalid_address_rejected_before_reading(reader, provider, address):
    with pytest.raises(ValueError, match="Invalid market address"):
        await provider.get_market(address)
    reader.read_batch.assert_not_awaited()
