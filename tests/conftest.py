"""Shared test fixtures for the FRED dashboard."""

from __future__ import annotations

import httpx
import pytest

from fred_indicators_dashboard.config import Settings

FRED_BASE = "https://fred.example.test/fred"
PROXY_URL = "http://proxy.example.test"


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit values so the host environment never leaks in."""
    return Settings(
        fred_api_key="test-key",
        fred_base_url=FRED_BASE,
        proxy_url=PROXY_URL,
        request_timeout=5.0,
        observation_limit=100,
        month_count=24,
    )


def fred_payload(*observations: tuple[str, str]) -> dict:
    """Build a FRED observations body from (date, raw value) pairs."""
    return {
        "units": "lin",
        "sort_order": "desc",
        "count": len(observations),
        "observations": [
            {
                "realtime_start": "2024-06-01",
                "realtime_end": "2024-06-01",
                "date": obs_date,
                "value": value,
            }
            for obs_date, value in observations
        ],
    }


def json_client(body: dict, *, status_code: int = 200) -> httpx.AsyncClient:
    """AsyncClient whose every request answers with ``body``."""

    async def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=status_code, json=body, request=request)

    return httpx.AsyncClient(transport=httpx.MockTransport(_handler))
