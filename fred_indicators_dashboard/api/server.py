"""FastAPI application factory for the FRED proxy."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from fred_indicators_dashboard.config import Settings


logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    upstream_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The API key travels in ``settings``; handlers never read the environment.
    Pass ``upstream_client`` to reuse or stub the connection to FRED,
    otherwise one is opened for the lifetime of the app.
    """
    resolved_settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if upstream_client is not None:
            yield
            return
        async with httpx.AsyncClient(timeout=resolved_settings.request_timeout) as client:
            app.state.upstream_client = client
            yield

    app = FastAPI(
        title="FRED Indicators Dashboard",
        description="Server-side proxy for FRED series observations",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = resolved_settings
    app.state.upstream_client = upstream_client

    from fred_indicators_dashboard.api.routes import router

    app.include_router(router)

    return app


def main() -> None:
    """Run the proxy under uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    # httpx logs full request URLs at INFO, and upstream URLs carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    settings = Settings()
    settings.validate()
    if not settings.has_fred_api_key():
        logger.warning(
            "FRED_API_KEY not set; /api/fred will answer 500 until it is. "
            "Get one at: https://fred.stlouisfed.org/docs/api/api_key.html"
        )

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
