"""Price and TVL derivation from raw pool state.

Pools quote token1 per token0 as a Q64.96 square-root price in raw integer
units. Which slot holds the reference asset differs per pool, so it is detected
once (ReferenceSlot) and passed into the price computation.
"""
from decimal import Decimal, localcontext
from enum import Enum

from truemarkets_agg.providers.core import same_address, to_units

Q96 = 2**96

_PRECISION = 60


class ReferenceSlot(Enum):
    """Pool slot holding the reference asset."""

    TOKEN0 = 0
    TOKEN1 = 1


def detect_reference_slot(
    token0: str, token1: str, reference_address: str
) -> ReferenceSlot:
    """Return which pool slot holds the reference asset.

    Raises:
        ValueError: If neither token is the reference asset.
    """
    if same_address(token0, reference_address):
        return ReferenceSlot.TOKEN0
    if same_address(token1, reference_address):
        return ReferenceSlot.TOKEN1
    raise ValueError(
        f"Pool tokens {token0}, {token1} do not include reference asset {reference_address}"
    )


def outcome_price(
    sqrt_price_x96: int,
    reference_slot: ReferenceSlot,
    reference_decimals: int,
    outcome_decimals: int,
) -> Decimal:
    """Price of one outcome token in reference-asset units.

    Args:
        sqrt_price_x96: Pool sqrtPriceX96 (slot0[0]).
        reference_slot: Slot holding the reference asset.
        reference_decimals: Decimals of the reference asset.
        outcome_decimals: Decimals of the outcome token.

    Returns:
        Non-negative Decimal; 0 for an uninitialized pool (sqrt price 0).
    """
    if sqrt_price_x96 <= 0:
        return Decimal(0)

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        raw = (Decimal(sqrt_price_x96) / Decimal(Q96)) ** 2
        if reference_slot is ReferenceSlot.TOKEN0:
            # token1 (outcome) per token0 (reference)
            outcome_per_reference = raw.scaleb(reference_decimals - outcome_decimals)
            return Decimal(1) / outcome_per_reference
        # token1 (reference) per token0 (outcome)
        return raw.scaleb(outcome_decimals - reference_decimals)


def total_value_locked(
    yes_reference_balance: int,
    no_reference_balance: int,
    reference_decimals: int,
) -> Decimal:
    """Reference-asset value held by the YES and NO pools together."""
    return to_units(int(yes_reference_balance) + int(no_reference_balance), reference_decimals)
