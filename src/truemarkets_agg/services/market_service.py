"""TrueMarkets service: the public operations, with failures returned as envelopes.

The provider raises; this layer is the single place where an exception becomes
the `error` field of an ActiveMarkets / MarketDetail envelope. Nothing is
re-raised past it, so callers always get a well-formed object.
"""
import logging

from truemarkets_agg.providers.core import ProviderErrorMapper
from truemarkets_agg.providers.truemarkets import TrueMarketsProvider
from truemarkets_agg.schemas import (ActiveMarkets, MarketDetail, Network,
                                     SortOrder)

logger = logging.getLogger(__name__)

ACTIVE_MARKETS_ERRORS = ProviderErrorMapper(label="Error retrieving active markets")
MARKET_DETAILS_ERRORS = ProviderErrorMapper(label="Error retrieving market details")


class TrueMarketsService:
    """Envelope-returning service over TrueMarketsProvider."""

    def __init__(
        self,
        provider: TrueMarketsProvider,
        *,
        markets_errors: ProviderErrorMapper = ACTIVE_MARKETS_ERRORS,
        details_errors: ProviderErrorMapper = MARKET_DETAILS_ERRORS,
    ) -> None:
        self._provider = provider
        self._markets_errors = markets_errors
        self._details_errors = details_errors

    async def get_active_markets(
        self,
        limit: int = 10,
        offset: int = 0,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> ActiveMarkets:
        """List active markets. Never raises; on failure totalMarkets is 0 and error is set."""
        try:
            return await self._provider.list_markets(
                limit=limit, offset=offset, sort_order=sort_order
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Failed to list active markets")
            return ActiveMarkets.failed(self._markets_errors.describe(exc))

    async def get_market_details(self, market_address: str) -> MarketDetail:
        """Get a market snapshot. Never raises; on failure the address is echoed with empty fields."""
        try:
            return await self._provider.get_market(market_address)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Failed to fetch market details for %s", market_address)
            return MarketDetail.failed(market_address, self._details_errors.describe(exc))

    def supports_network(self, network: Network) -> bool:
        return self._provider.supports_network(network)

    async def close(self) -> None:
        await self._provider.close()
