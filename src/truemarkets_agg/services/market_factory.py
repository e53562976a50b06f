"""Factory for wiring a TrueMarketsService from settings."""
from truemarkets_agg.config import Settings
from truemarkets_agg.providers import (ContractReaderABC,
                                       TrueMarketsProvider,
                                       Web3ContractReader)
from truemarkets_agg.services.market_service import TrueMarketsService


def create_market_service(
    settings: Settings,
    *,
    reader: ContractReaderABC | None = None,
) -> TrueMarketsService:
    """Create a TrueMarketsService with a web3 reader and the configured contracts.

    Args:
        settings: Deployment and transport configuration.
        reader: Optional contract reader to use instead of a Web3ContractReader.

    Returns:
        A configured TrueMarketsService instance.
    """
    if reader is None:
        reader = Web3ContractReader(
            settings.rpc_url,
            multicall_address=settings.multicall_address,
            timeout=settings.rpc_timeout,
        )
    provider = TrueMarketsProvider(
        reader,
        manager_address=settings.manager_address,
        reference_address=settings.reference_address,
        reference_decimals=settings.reference_decimals,
        outcome_decimals=settings.outcome_decimals,
    )
    return TrueMarketsService(provider)
