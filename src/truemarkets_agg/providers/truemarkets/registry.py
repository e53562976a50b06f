"""Reads the on-chain registry of active TrueMarkets markets."""
from collections.abc import Sequence

from truemarkets_agg.providers.core import (CallResult, ContractCall,
                                            ContractReaderABC)
from truemarkets_agg.providers.truemarkets.abi import (
    GET_ACTIVE_MARKET_ADDRESS, NUMBER_OF_ACTIVE_MARKETS)


class MarketRegistryReader:
    """Active-market count and index -> market address lookups on the manager contract."""

    def __init__(self, reader: ContractReaderABC, manager_address: str) -> None:
        self._reader = reader
        self._manager_address = manager_address

    async def count(self) -> int:
        """Number of active markets. Read failures propagate."""
        return int(
            await self._reader.read_one(self._manager_address, NUMBER_OF_ACTIVE_MARKETS)
        )

    async def address_at(self, index: int) -> str:
        return await self._reader.read_one(
            self._manager_address, GET_ACTIVE_MARKET_ADDRESS, (index,)
        )

    async def addresses_at(self, indices: Sequence[int]) -> list[CallResult]:
        """Resolve several indices in one batched read; one result per index."""
        calls = [
            ContractCall(self._manager_address, GET_ACTIVE_MARKET_ADDRESS, (index,))
            for index in indices
        ]
        return await self._reader.read_batch(calls)
