"""Market data providers for on-chain prediction markets.

- ContractReaderABC: read-only contract access (single and batched reads)
- Web3ContractReader: ContractReaderABC over web3.py + Multicall3
- TrueMarketsProvider: TrueMarkets active market listing and market snapshots

Example:
    async with Web3ContractReader("https://mainnet.base.org") as reader:
        provider = TrueMarketsProvider(reader)
        page = await provider.list_markets(limit=5)
        detail = await provider.get_market(page.markets[0].address)
        print(detail.question, detail.prices.yes, detail.tvl)
"""
from truemarkets_agg.providers.core import ContractReaderABC
from truemarkets_agg.providers.rpc import Web3ContractReader
from truemarkets_agg.providers.truemarkets import TrueMarketsProvider

__all__ = [
    "ContractReaderABC",
    "TrueMarketsProvider",
    "Web3ContractReader",
]
