import logging
from unittest.mock import AsyncMock

import pytest

from truemarkets_agg.config import Settings, get_settings
from truemarkets_agg.providers import ContractReaderABC, Web3ContractReader
from truemarkets_agg.providers.rpc import MULTICALL3_ADDRESS
from truemarkets_agg.providers.truemarkets.constants import (
    DEFAULT_RPC_URL, OUTCOME_TOKEN_DECIMALS, TRUTH_MARKET_MANAGER_ADDRESS,
    USDC_ADDRESS, USDC_DECIMALS)
from truemarkets_agg.services import TrueMarketsService, create_market_service
from tests.fakes import (MARKET_ADDRESS, balance_batch, basic_info_batch,
                         pool_info_batch)

ENV_VARS = (
    "TRUEMARKETS_RPC_URL",
    "RPC_URL",
    "TRUEMARKETS_RPC_TIMEOUT",
    "TRUEMARKETS_MANAGER_ADDRESS",
    "TRUEMARKETS_REFERENCE_ADDRESS",
    "TRUEMARKETS_REFERENCE_DECIMALS",
    "TRUEMARKETS_OUTCOME_DECIMALS",
    "TRUEMARKETS_MULTICALL_ADDRESS",
    "TRUEMARKETS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings.from_env()

    assert settings.rpc_url == DEFAULT_RPC_URL
    assert settings.manager_address == TRUTH_MARKET_MANAGER_ADDRESS
    assert settings.reference_address == USDC_ADDRESS
    assert settings.reference_decimals == USDC_DECIMALS
    assert settings.outcome_decimals == OUTCOME_TOKEN_DECIMALS
    assert settings.multicall_address == MULTICALL3_ADDRESS
    assert settings.log_level_num == logging.INFO


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TRUEMARKETS_RPC_URL", "https://node.example")
    monkeypatch.setenv("RPC_URL", "https://ignored.example")
    monkeypatch.setenv("TRUEMARKETS_RPC_TIMEOUT", "2.5")
    monkeypatch.setenv("TRUEMARKETS_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.rpc_url == "https://node.example"
    assert settings.rpc_timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.log_level_num == logging.DEBUG


def test_rpc_url_fallback(monkeypatch):
    monkeypatch.setenv("RPC_URL", "https://fallback.example")

    assert Settings.from_env().rpc_url == "https://fallback.example"


def test_unknown_log_level_falls_back_to_info():
    assert Settings(log_level="CHATTY").log_level_num == logging.INFO


def test_token_decimals_from_env(monkeypatch):
    monkeypatch.setenv("TRUEMARKETS_REFERENCE_ADDRESS", "0x000000000000000000000000000000000000bEEF")
    monkeypatch.setenv("TRUEMARKETS_REFERENCE_DECIMALS", "18")
    monkeypatch.setenv("TRUEMARKETS_OUTCOME_DECIMALS", "6")

    settings = Settings.from_env()

    assert settings.reference_decimals == 18
    assert settings.outcome_decimals == 6


async def test_factory_prices_with_configured_decimals():
    reader = AsyncMock(spec=ContractReaderABC)
    reader.read_batch.side_effect = [basic_info_batch(), pool_info_batch(), balance_batch()]
    settings = Settings(reference_decimals=18, outcome_decimals=18)

    detail = await create_market_service(settings, reader=reader).get_market_details(MARKET_ADDRESS)

    # sqrt price 1.0 with equal decimals is one reference unit per outcome token
    assert detail.error is None
    assert detail.prices.yes == pytest.approx(1.0)
    assert detail.prices.no == pytest.approx(1.0)
    assert detail.tvl == pytest.approx(3e-12)


async def test_factory_uses_given_reader():
    reader = AsyncMock(spec=ContractReaderABC)
    reader.read_one.return_value = 0

    service = create_market_service(Settings(manager_address="0x000000000000000000000000000000000000bEEF"), reader=reader)
    result = await service.get_active_markets()

    assert isinstance(service, TrueMarketsService)
    assert result.total_markets == 0
    assert reader.read_one.await_args.args[0] == "0x000000000000000000000000000000000000bEEF"


async def test_factory_builds_web3_reader():
    service = create_market_service(Settings(rpc_url="https://node.example"))

    reader = service._provider._reader  # pylint: disable=protected-access
    assert isinstance(reader, Web3ContractReader)
    await service.close()
