"""Read-only aggregation of TrueMarkets prediction markets from Base mainnet."""
