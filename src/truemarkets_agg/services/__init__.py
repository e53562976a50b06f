"""Service layer: provider orchestration and exception-to-envelope mapping."""
from truemarkets_agg.services.market_factory import create_market_service
from truemarkets_agg.services.market_service import TrueMarketsService

__all__ = [
    "TrueMarketsService",
    "create_market_service",
]
