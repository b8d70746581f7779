"""API route handlers: the FRED proxy and a health probe."""

import logging

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from fred_indicators_dashboard.config import MAX_OBSERVATION_LIMIT, Settings


logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_LIMIT = "100"


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _get_upstream(request: Request) -> httpx.AsyncClient:
    return request.app.state.upstream_client


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _parse_limit(raw: str) -> int | None:
    try:
        limit = int(raw)
    except ValueError:
        return None
    if not 1 <= limit <= MAX_OBSERVATION_LIMIT:
        return None
    return limit


@router.get("/health")
async def health(request: Request):
    """Liveness probe; also reports whether the proxy can reach FRED."""
    settings = _get_settings(request)
    return {"status": "ok", "fred_api_key_configured": settings.has_fred_api_key()}


@router.get("/api/fred")
async def fred_observations(
    request: Request,
    series_id: str | None = None,
    limit: str = DEFAULT_LIMIT,
):
    """Forward an observations request to FRED, attaching the API key.

    The upstream JSON body is relayed unchanged on success.
    """
    settings = _get_settings(request)

    series_id = (series_id or "").strip()
    if not series_id:
        return _error("series_id is required", 400)

    parsed_limit = _parse_limit(limit or DEFAULT_LIMIT)
    if parsed_limit is None:
        return _error(f"limit must be an integer between 1 and {MAX_OBSERVATION_LIMIT}", 400)

    if not settings.has_fred_api_key():
        return _error("FRED API key not configured", 500)

    client = _get_upstream(request)
    try:
        response = await client.get(
            f"{settings.fred_base_url}/series/observations",
            params={
                "series_id": series_id,
                "api_key": settings.fred_api_key,
                "file_type": "json",
                "limit": parsed_limit,
                "sort_order": "desc",
            },
        )
        response.raise_for_status()
        data = response.json()
    # The request URL carries the API key, so only log status codes and error types
    except httpx.HTTPStatusError as e:
        logger.error(f"FRED API error for {series_id}: {e.response.status_code}")
        return _error("Failed to fetch FRED data", 500)
    except httpx.RequestError as e:
        logger.error(f"Error fetching FRED data for {series_id}: {type(e).__name__}")
        return _error("Failed to fetch FRED data", 500)
    except ValueError:
        logger.error(f"FRED returned a non-JSON body for {series_id}")
        return _error("Failed to fetch FRED data", 500)

    return JSONResponse(data)
