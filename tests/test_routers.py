"""HTTP routes with the service dependency overridden."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from truemarkets_agg.deps import get_market_service
from truemarkets_agg.main import app
from truemarkets_agg.schemas import (ActiveMarkets, MarketDetail,
                                     MarketSummary, SortOrder)
from truemarkets_agg.services import TrueMarketsService
from tests.fakes import MARKET_ADDRESS, MARKET_QUESTION_TEXT


@pytest.fixture
def market_service():
    service = MagicMock(spec=TrueMarketsService)
    service.get_active_markets = AsyncMock()
    service.get_market_details = AsyncMock()
    return service


@pytest.fixture
def client(market_service):
    app.dependency_overrides[get_market_service] = lambda: market_service
    # no context manager: the lifespan (real RPC reader) is not started
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_markets_camel_case_and_no_error_key(client, market_service):
    market_service.get_active_markets.return_value = ActiveMarkets(
        total_markets=1,
        markets=[MarketSummary(id=0, address=MARKET_ADDRESS, question=MARKET_QUESTION_TEXT)],
    )

    response = client.get("/markets", params={"limit": 5, "offset": 2, "sort_order": "asc"})

    assert response.status_code == 200
    assert response.json() == {
        "totalMarkets": 1,
        "markets": [{"id": 0, "address": MARKET_ADDRESS, "marketQuestion": MARKET_QUESTION_TEXT}],
    }
    market_service.get_active_markets.assert_awaited_once_with(
        limit=5, offset=2, sort_order=SortOrder.ASC
    )


def test_list_markets_defaults(client, market_service):
    market_service.get_active_markets.return_value = ActiveMarkets()

    client.get("/markets")

    market_service.get_active_markets.assert_awaited_once_with(
        limit=10, offset=0, sort_order=SortOrder.DESC
    )


@pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"offset": -1}, {"sort_order": "up"}])
def test_list_markets_rejects_bad_query(client, params):
    assert client.get("/markets", params=params).status_code == 422


def test_list_markets_error_envelope_is_200(client, market_service):
    market_service.get_active_markets.return_value = ActiveMarkets.failed(
        "Error retrieving active markets: Exception: boom"
    )

    response = client.get("/markets")

    assert response.status_code == 200
    assert response.json()["error"] == "Error retrieving active markets: Exception: boom"
    assert response.json()["totalMarkets"] == 0


def test_market_detail(client, market_service):
    market_service.get_market_details.return_value = MarketDetail(
        market_address=MARKET_ADDRESS, question=MARKET_QUESTION_TEXT, status="Created", tvl=3.0
    )

    response = client.get(f"/markets/{MARKET_ADDRESS}")

    body = response.json()
    assert response.status_code == 200
    assert body["marketAddress"] == MARKET_ADDRESS
    assert body["endOfTrading"] == 0
    assert body["tokens"]["yes"] == {"tokenAddress": "", "lpAddress": ""}
    assert "error" not in body
    market_service.get_market_details.assert_awaited_once_with(MARKET_ADDRESS)


def test_network_support(client, market_service):
    market_service.supports_network.return_value = True

    response = client.get("/markets/networks/base-mainnet")

    assert response.json() == {"networkId": "base-mainnet", "supported": True}
    (network,), _ = market_service.supports_network.call_args
    assert network.network_id == "base-mainnet"
    assert network.protocol_family == "evm"
