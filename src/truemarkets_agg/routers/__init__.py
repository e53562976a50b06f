"""API routers for TrueMarkets market data endpoints.

Includes routes for:
- /markets - Active market listing (paginated, ordered)
- /markets/{market_address} - Market snapshot (tokens, prices, TVL)
- /markets/networks/{network_id} - Network support check
"""
from truemarkets_agg.routers.markets import router as markets_router

__all__ = ["markets_router"]
