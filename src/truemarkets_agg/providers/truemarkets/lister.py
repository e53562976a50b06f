"""Paginated, ordered listing of active markets."""
import logging

from truemarkets_agg.providers.core import ContractCall, ContractReaderABC
from truemarkets_agg.providers.truemarkets.abi import MARKET_QUESTION
from truemarkets_agg.providers.truemarkets.registry import MarketRegistryReader
from truemarkets_agg.schemas import ActiveMarkets, MarketSummary, SortOrder

logger = logging.getLogger(__name__)


def window_indices(
    total: int, limit: int, offset: int, sort_order: SortOrder
) -> list[int]:
    """Registry indices for one page, in output order.

    DESC walks down from the newest market (index total - 1); ASC walks up from 0.
    """
    size = min(limit, max(0, total - offset))
    if sort_order == SortOrder.DESC:
        return [total - 1 - offset - p for p in range(size)]
    return [offset + p for p in range(size)]


class MarketSummaryLister:
    """Lists active markets (index, address, question) a page at a time.

    Two batched reads per page: index -> address, then address -> question.
    A market whose address or question cannot be read is left out of the page.
    """

    def __init__(self, reader: ContractReaderABC, registry: MarketRegistryReader) -> None:
        self._reader = reader
        self._registry = registry

    async def list_markets(
        self,
        limit: int = 10,
        offset: int = 0,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> ActiveMarkets:
        """List one page of active markets.

        Args:
            limit: Maximum number of markets to return (>= 1).
            offset: Number of markets to skip from the start of the ordering (>= 0).
            sort_order: DESC for most recently created first, ASC for oldest first.

        Returns:
            ActiveMarkets with total_markets and the resolved page.

        Raises:
            ValueError: On an invalid limit or offset.
            ContractReadError: If the market count or a batch round trip fails.
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")

        total = await self._registry.count()
        indices = window_indices(total, limit, offset, SortOrder(sort_order))
        if not indices:
            return ActiveMarkets(total_markets=total, markets=[])

        address_results = await self._registry.addresses_at(indices)
        resolved: list[tuple[int, str]] = []
        for index, result in zip(indices, address_results):
            if not result.ok:
                logger.warning("Skipping market #%d: address lookup failed: %s", index, result.error)
                continue
            resolved.append((index, result.result))
        if not resolved:
            return ActiveMarkets(total_markets=total, markets=[])

        question_results = await self._reader.read_batch(
            [ContractCall(address, MARKET_QUESTION) for _, address in resolved]
        )
        markets: list[MarketSummary] = []
        for (index, address), result in zip(resolved, question_results):
            if not result.ok:
                logger.warning("Skipping market %s: question read failed: %s", address, result.error)
                continue
            markets.append(MarketSummary(id=index, address=address, question=result.result))

        return ActiveMarkets(total_markets=total, markets=markets)
