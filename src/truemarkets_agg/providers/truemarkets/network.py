"""Network support check for the TrueMarkets deployment."""
from truemarkets_agg.providers.truemarkets.constants import (
    SUPPORTED_NETWORK_ID, SUPPORTED_PROTOCOL_FAMILY)
from truemarkets_agg.schemas import Network


def supports_network(network: Network) -> bool:
    """True only for the EVM network TrueMarkets is deployed on (Base mainnet)."""
    return (
        network.protocol_family == SUPPORTED_PROTOCOL_FAMILY
        and network.network_id == SUPPORTED_NETWORK_ID
    )
