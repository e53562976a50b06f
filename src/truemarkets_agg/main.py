"""Main module for the TrueMarkets aggregation service."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from truemarkets_agg.config import configure_logging, get_settings
from truemarkets_agg.routers import markets_router
from truemarkets_agg.services import create_market_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create the reader, provider and service at startup; close the reader on shutdown."""
    settings = get_settings()
    configure_logging(settings)

    market_service = create_market_service(settings)
    fastapi_app.state.market_service = market_service
    logger.info("Reading TrueMarkets from %s", settings.rpc_url)

    yield

    try:
        await market_service.close()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error closing market service: %s", exc)


app = FastAPI(
    title="TrueMarkets Aggregator",
    description="Read-only snapshots of TrueMarkets prediction markets on Base",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(markets_router)


@app.get("/")
def health():
    """Return health check status."""
    return {"status": "ok"}


def run():
    """Run the server (uvicorn)."""
    uvicorn.run("truemarkets_agg.main:app", host="127.0.0.1", port=8001)
