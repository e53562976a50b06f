"""TrueMarkets prediction market routes.

Handlers only call the service. Failures come back inside the envelope's
`error` field with status 200; successful envelopes omit `error`.
"""
from fastapi import APIRouter, Query

from truemarkets_agg.deps import MarketServiceDep
from truemarkets_agg.schemas import (ActiveMarkets, MarketDetail, Network,
                                     NetworkSupport, SortOrder)

router = APIRouter(prefix="/markets", tags=["markets"])

# Route order: /networks/... before /{market_address} so it is matched first.


@router.get(
    "",
    response_model=ActiveMarkets,
    response_model_exclude_none=True,
)
async def list_active_markets(
    service: MarketServiceDep,
    limit: int = Query(default=10, ge=1, le=100, description="Maximum markets to return"),
    offset: int = Query(default=0, ge=0, description="Markets to skip"),
    sort_order: SortOrder = Query(
        default=SortOrder.DESC, description="desc: newest first, asc: oldest first"
    ),
) -> ActiveMarkets:
    """List active TrueMarkets markets, newest first by default."""
    return await service.get_active_markets(limit=limit, offset=offset, sort_order=sort_order)


@router.get("/networks/{network_id}", response_model=NetworkSupport)
async def get_network_support(
    network_id: str,
    service: MarketServiceDep,
    protocol_family: str = Query(default="evm", description="Protocol family of the network"),
) -> NetworkSupport:
    """Whether TrueMarkets data is available on the given network."""
    network = Network(network_id=network_id, protocol_family=protocol_family)
    return NetworkSupport(network_id=network_id, supported=service.supports_network(network))


@router.get(
    "/{market_address}",
    response_model=MarketDetail,
    response_model_exclude_none=True,
)
async def get_market_details(
    market_address: str,
    service: MarketServiceDep,
) -> MarketDetail:
    """Full snapshot of one market: metadata, tokens, prices and TVL."""
    return await service.get_market_details(market_address)
