"""TrueMarkets (Base mainnet) prediction market provider."""
from truemarkets_agg.providers.truemarkets.aggregator import \
    MarketDetailAggregator
from truemarkets_agg.providers.truemarkets.lister import MarketSummaryLister
from truemarkets_agg.providers.truemarkets.network import supports_network
from truemarkets_agg.providers.truemarkets.pricing import (
    ReferenceSlot, detect_reference_slot, outcome_price, total_value_locked)
from truemarkets_agg.providers.truemarkets.provider import TrueMarketsProvider
from truemarkets_agg.providers.truemarkets.registry import MarketRegistryReader
from truemarkets_agg.providers.truemarkets.status import (MarketStatus,
                                                          status_from_code)

__all__ = [
    "MarketDetailAggregator",
    "MarketRegistryReader",
    "MarketStatus",
    "MarketSummaryLister",
    "ReferenceSlot",
    "TrueMarketsProvider",
    "detect_reference_slot",
    "outcome_price",
    "status_from_code",
    "supports_network",
    "total_value_locked",
]
