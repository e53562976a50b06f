"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

No external DI container. Lifespan (main.py) creates the service once and
attaches it to app.state; these getters are used by Depends().
"""
from typing import Annotated

from fastapi import Depends, Request

from truemarkets_agg.services import TrueMarketsService


def get_market_service(request: Request) -> TrueMarketsService:
    """Resolve the TrueMarketsService from app.state (created at startup)."""
    return request.app.state.market_service


# Type alias for route injection
MarketServiceDep = Annotated[TrueMarketsService, Depends(get_market_service)]
