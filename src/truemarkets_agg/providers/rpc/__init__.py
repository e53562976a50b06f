"""Contract readers backed by chain RPC endpoints."""
from truemarkets_agg.providers.rpc.web3_reader import (MULTICALL3_ADDRESS,
                                                       Web3ContractReader)

__all__ = ["MULTICALL3_ADDRESS", "Web3ContractReader"]
