"""Shared utilities for contract-backed providers."""
from decimal import Decimal

from eth_utils import is_address


def same_address(a: str | None, b: str | None) -> bool:
    """Case-insensitive address equality; None never matches."""
    if not a or not b:
        return False
    return a.lower() == b.lower()


def is_valid_address(value: str | None) -> bool:
    """True for a 0x-prefixed 20-byte hex address (any casing, prefix included)."""
    if not value:
        return False
    normalized = value.lower()
    if not normalized.startswith("0x"):
        return False
    return is_address(normalized)


def to_units(raw: int, decimals: int) -> Decimal:
    """Convert an integer token amount to whole units (e.g. 1_500_000 @ 6 -> 1.5)."""
    return Decimal(int(raw)).scaleb(-decimals)
