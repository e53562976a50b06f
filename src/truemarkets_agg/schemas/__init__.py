"""Pydantic schemas for API and runtime use. Not persisted.

Field names are snake_case in Python and camelCase on the wire. Envelopes carry
an optional `error`; success responses leave it None and routes drop it.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SortOrder(str, Enum):
    """Listing order over the market registry index."""

    ASC = "asc"
    DESC = "desc"


class Network(_WireModel):
    """Network identity as reported by the caller's wallet/client."""

    network_id: str | None = None
    protocol_family: str | None = None


class MarketSummary(_WireModel):
    """One entry of the active market listing."""

    id: int
    address: str
    question: str = Field(alias="marketQuestion")


class ActiveMarkets(_WireModel):
    """Envelope for a page of active markets."""

    total_markets: int = 0
    markets: list[MarketSummary] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def failed(cls, error: str) -> "ActiveMarkets":
        return cls(total_markets=0, markets=[], error=error)


class OutcomeToken(_WireModel):
    token_address: str = ""
    lp_address: str = ""


class MarketTokens(_WireModel):
    yes: OutcomeToken = Field(default_factory=OutcomeToken)
    no: OutcomeToken = Field(default_factory=OutcomeToken)


class MarketPrices(_WireModel):
    """Outcome prices in reference-asset units per outcome token."""

    yes: float = 0.0
    no: float = 0.0


class MarketDetail(_WireModel):
    """Envelope for a full market snapshot."""

    market_address: str
    question: str = ""
    additional_info: str = ""
    source: str = ""
    status: str = ""
    end_of_trading: int = 0  # unix seconds
    tokens: MarketTokens = Field(default_factory=MarketTokens)
    prices: MarketPrices = Field(default_factory=MarketPrices)
    tvl: float = 0.0
    error: str | None = None

    @classmethod
    def failed(cls, market_address: str, error: str) -> "MarketDetail":
        """Zero/empty snapshot that still echoes the requested address."""
        return cls(market_address=market_address, error=error)


class NetworkSupport(_WireModel):
    network_id: str
    supported: bool


__all__ = [
    "ActiveMarkets",
    "MarketDetail",
    "MarketPrices",
    "MarketSummary",
    "MarketTokens",
    "Network",
    "NetworkSupport",
    "OutcomeToken",
    "SortOrder",
]
