"""Market lifecycle status decoding."""
from enum import Enum
from typing import Any


class MarketStatus(str, Enum):
    CREATED = "Created"
    RESOLUTION_PROPOSED = "ResolutionProposed"
    DISPUTE_RAISED = "DisputeRaised"
    SET_BY_COUNCIL = "SetByCouncil"
    RESET_BY_COUNCIL = "ResetByCouncil"
    ESCALATED_DISPUTE_RAISED = "EscalatedDisputeRaised"
    FINALIZED = "Finalized"
    UNKNOWN = "Unknown"


_STATUS_BY_CODE: dict[int, MarketStatus] = {
    0: MarketStatus.CREATED,
    1: MarketStatus.RESOLUTION_PROPOSED,
    2: MarketStatus.DISPUTE_RAISED,
    3: MarketStatus.SET_BY_COUNCIL,
    4: MarketStatus.RESET_BY_COUNCIL,
    5: MarketStatus.ESCALATED_DISPUTE_RAISED,
    6: MarketStatus.FINALIZED,
}


def status_from_code(code: Any) -> MarketStatus:
    """Map the on-chain status code to a MarketStatus; anything unrecognized is UNKNOWN."""
    try:
        key = int(code)
    except (TypeError, ValueError):
        return MarketStatus.UNKNOWN
    return _STATUS_BY_CODE.get(key, MarketStatus.UNKNOWN)
