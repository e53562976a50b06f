"""TrueMarkets data provider: active market listing and market snapshots."""
from truemarkets_agg.providers.core import ContractReaderABC
from truemarkets_agg.providers.truemarkets.aggregator import \
    MarketDetailAggregator
from truemarkets_agg.providers.truemarkets.constants import (
    OUTCOME_TOKEN_DECIMALS, TRUTH_MARKET_MANAGER_ADDRESS, USDC_ADDRESS,
    USDC_DECIMALS)
from truemarkets_agg.providers.truemarkets.lister import MarketSummaryLister
from truemarkets_agg.providers.truemarkets.network import supports_network
from truemarkets_agg.providers.truemarkets.registry import MarketRegistryReader
from truemarkets_agg.schemas import (ActiveMarkets, MarketDetail, Network,
                                     SortOrder)


class TrueMarketsProvider:
    """Market data provider for TrueMarkets prediction markets on Base.

    Reads everything from chain through the injected ContractReaderABC. Errors
    propagate as exceptions; TrueMarketsService turns them into envelopes.
    """

    def __init__(
        self,
        reader: ContractReaderABC,
        *,
        manager_address: str = TRUTH_MARKET_MANAGER_ADDRESS,
        reference_address: str = USDC_ADDRESS,
        reference_decimals: int = USDC_DECIMALS,
        outcome_decimals: int = OUTCOME_TOKEN_DECIMALS,
    ) -> None:
        """Initialize the provider.

        Args:
            reader: Contract reader bound to a Base mainnet node.
            manager_address: TruthMarketManager contract (active market registry).
            reference_address: Reference asset the outcome tokens are priced in (USDC).
            reference_decimals: Decimals of the reference asset.
            outcome_decimals: Decimals of the YES/NO tokens.
        """
        self._reader = reader
        self._registry = MarketRegistryReader(reader, manager_address)
        self._lister = MarketSummaryLister(reader, self._registry)
        self._aggregator = MarketDetailAggregator(
            reader,
            reference_address=reference_address,
            reference_decimals=reference_decimals,
            outcome_decimals=outcome_decimals,
        )

    @property
    def registry(self) -> MarketRegistryReader:
        return self._registry

    async def list_markets(
        self,
        limit: int = 10,
        offset: int = 0,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> ActiveMarkets:
        return await self._lister.list_markets(limit=limit, offset=offset, sort_order=sort_order)

    async def get_market(self, market_address: str) -> MarketDetail:
        return await self._aggregator.detail(market_address)

    def supports_network(self, network: Network) -> bool:
        return supports_network(network)

    async def close(self) -> None:
        """Close the underlying contract reader."""
        await self._reader.close()

    async def __aenter__(self) -> "TrueMarketsProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
