import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from indodax_proxy import __version__
from indodax_proxy.config import Settings, settings as default_settings
from indodax_proxy.market import MarketConfig, default_market
from indodax_proxy.routes import router
from indodax_proxy.schemas import Health
from indodax_proxy.upstream import IndodaxClient

logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("indodax_proxy")


def create_app(
    settings: Optional[Settings] = None,
    market: Optional[MarketConfig] = None,
    upstream: Optional[IndodaxClient] = None,
) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s started, upstream %s", settings.APP_NAME, settings.UPSTREAM_BASE_URL)
        yield
        await app.state.upstream.close()
        logger.info("%s shutting down", settings.APP_NAME)

    app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.market = market or default_market
    app.state.upstream = upstream or IndodaxClient(
        base_url=settings.UPSTREAM_BASE_URL,
        charts_url=settings.UPSTREAM_CHARTS_URL,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )

    # Only the configured frontend origins may call the proxy from a browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix=f"/api/{settings.EXCHANGE_NAME}", tags=[settings.EXCHANGE_NAME])

    @app.get("/health", response_model=Health)
    async def health():
        return Health(status="ok", exchange=settings.EXCHANGE_NAME, version=__version__)

    return app


app = create_app()
