"""End-to-end tests: dashboard calculator -> fetcher -> proxy -> stubbed FRED."""

from __future__ import annotations

import httpx
from httpx import ASGITransport

from conftest import fred_payload
from fred_indicators_dashboard.api import create_app
from fred_indicators_dashboard.config import DASHBOARD_SERIES
from fred_indicators_dashboard.data.fred_fetcher import FredFetcher
from fred_indicators_dashboard.indicators.calculator import IndicatorCalculator


def _daily_payload(months: int) -> dict:
    """Two readings per month, newest-first, ending June 2024."""
    observations = []
    year, month = 2024, 6
    for _ in range(months):
        observations.append((f"{year}-{month:02d}-15", f"{month + 0.5}"))
        observations.append((f"{year}-{month:02d}-01", f"{month}.0"))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return fred_payload(*observations)


def _fetcher_through_proxy(settings, upstream_handler) -> tuple[FredFetcher, list[httpx.AsyncClient]]:
    upstream = httpx.AsyncClient(transport=httpx.MockTransport(upstream_handler))
    app = create_app(settings, upstream_client=upstream)
    proxy_client = httpx.AsyncClient(transport=ASGITransport(app=app))
    return FredFetcher(settings, client=proxy_client), [upstream, proxy_client]


async def test_one_failing_series_leaves_others_intact(settings):
    settings.month_count = 3

    async def _upstream(request: httpx.Request) -> httpx.Response:
        if request.url.params["series_id"] == "DGS10":
            return httpx.Response(503, text="unavailable", request=request)
        return httpx.Response(200, json=_daily_payload(5), request=request)

    fetcher, clients = _fetcher_through_proxy(settings, _upstream)
    try:
        result = await IndicatorCalculator(settings, fetcher=fetcher).calculate()
    finally:
        for client in clients:
            await client.aclose()

    assert list(result.indicators) == list(DASHBOARD_SERIES)
    assert result.failed == ["DGS10"]

    failed = result.indicators["DGS10"]
    assert not failed.has_data
    assert "500" in failed.error

    for series_id in ("CPIAUCSL", "UNRATE", "DGS3MO"):
        indicator = result.indicators[series_id]
        assert indicator.error is None
        assert [p.label for p in indicator.points] == ["Apr 24", "May 24", "Jun 24"]
        # first reading of each month is the 1st, since the series is oldest-first
        assert [p.value for p in indicator.points] == [4.0, 5.0, 6.0]


async def test_indicator_metadata_comes_from_series_catalog(settings):
    async def _upstream(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_daily_payload(2), request=request)

    fetcher, clients = _fetcher_through_proxy(settings, _upstream)
    try:
        result = await IndicatorCalculator(settings, fetcher=fetcher).calculate()
    finally:
        for client in clients:
            await client.aclose()

    unrate = result.indicators["UNRATE"]
    assert unrate.title == "Unemployment Rate"
    assert unrate.chart == "area"
    assert unrate.fill == "#86efac"
    assert unrate.details_url == "https://fred.stlouisfed.org/series/UNRATE"
    assert result.failed == []


async def test_missing_api_key_degrades_every_panel_to_empty(settings):
    settings.fred_api_key = ""

    async def _upstream(request: httpx.Request) -> httpx.Response:
        raise AssertionError("upstream must not be called without a key")

    fetcher, clients = _fetcher_through_proxy(settings, _upstream)
    try:
        result = await IndicatorCalculator(settings, fetcher=fetcher).calculate()
    finally:
        for client in clients:
            await client.aclose()

    assert sorted(result.failed) == sorted(DASHBOARD_SERIES)
    assert all(not ind.has_data for ind in result.indicators.values())
    assert all("FRED API key not configured" in ind.error for ind in result.indicators.values())


async def test_custom_series_catalog(settings):
    async def _upstream(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_daily_payload(1), request=request)

    fetcher, clients = _fetcher_through_proxy(settings, _upstream)
    try:
        calc = IndicatorCalculator(settings, fetcher=fetcher, series={"FEDFUNDS": {}})
        result = await calc.calculate()
    finally:
        for client in clients:
            await client.aclose()

    fedfunds = result.indicators["FEDFUNDS"]
    assert fedfunds.title == "FEDFUNDS"
    assert fedfunds.chart == "line"
    assert [p.label for p in fedfunds.points] == ["Jun 24"]
