"""Intermediate values read from chain while assembling a market snapshot."""
from dataclasses import dataclass

from truemarkets_agg.providers.truemarkets.pricing import ReferenceSlot


@dataclass(frozen=True)
class MarketBasicInfo:
    question: str
    additional_info: str
    source: str
    status_code: int
    end_of_trading: int
    yes_pool: str
    no_pool: str


@dataclass(frozen=True)
class PoolInfo:
    """A pool with its token roles resolved."""

    lp_address: str
    outcome_token: str
    reference_slot: ReferenceSlot
    sqrt_price_x96: int


@dataclass(frozen=True)
class PoolState:
    sqrt_price_x96: int
    reference_balance: int
    outcome_balance: int
