"""Environment-based configuration."""
import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from truemarkets_agg.providers.rpc import MULTICALL3_ADDRESS
from truemarkets_agg.providers.truemarkets.constants import (
    DEFAULT_RPC_URL, OUTCOME_TOKEN_DECIMALS, TRUTH_MARKET_MANAGER_ADDRESS,
    USDC_ADDRESS, USDC_DECIMALS)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Deployment, transport and logging settings."""

    rpc_url: str = DEFAULT_RPC_URL
    rpc_timeout: float = 10.0
    manager_address: str = TRUTH_MARKET_MANAGER_ADDRESS
    reference_address: str = USDC_ADDRESS
    reference_decimals: int = USDC_DECIMALS
    outcome_decimals: int = OUTCOME_TOKEN_DECIMALS
    multicall_address: str = MULTICALL3_ADDRESS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read TRUEMARKETS_* variables (RPC_URL is accepted as a fallback for the node URL)."""
        return cls(
            rpc_url=os.getenv("TRUEMARKETS_RPC_URL") or os.getenv("RPC_URL") or DEFAULT_RPC_URL,
            rpc_timeout=float(os.getenv("TRUEMARKETS_RPC_TIMEOUT", "10")),
            manager_address=os.getenv("TRUEMARKETS_MANAGER_ADDRESS", TRUTH_MARKET_MANAGER_ADDRESS),
            reference_address=os.getenv("TRUEMARKETS_REFERENCE_ADDRESS", USDC_ADDRESS),
            reference_decimals=int(os.getenv("TRUEMARKETS_REFERENCE_DECIMALS", str(USDC_DECIMALS))),
            outcome_decimals=int(os.getenv("TRUEMARKETS_OUTCOME_DECIMALS", str(OUTCOME_TOKEN_DECIMALS))),
            multicall_address=os.getenv("TRUEMARKETS_MULTICALL_ADDRESS", MULTICALL3_ADDRESS),
            log_level=os.getenv("TRUEMARKETS_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def log_level_num(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings.from_env()


def configure_logging(settings: Settings) -> None:
    """Configure root logging. Call once at application entry."""
    logging.basicConfig(level=settings.log_level_num, format=_LOG_FORMAT)
