"""FRED observation fetcher that talks to the local proxy endpoint."""

import asyncio
import logging
from collections.abc import Iterable

import httpx
import pandas as pd

from fred_indicators_dashboard.config import Settings
from fred_indicators_dashboard.models.market_data import FetchResult, Observation


logger = logging.getLogger(__name__)

# FRED reports "." when no measurement exists for a date
MISSING_VALUE = "."


def parse_observations(payload: dict) -> list[Observation]:
    """
    Normalize a FRED observations payload.

    Drops missing-value entries and anything whose date or value does not
    parse, then returns the rest oldest-first. FRED delivers newest-first
    when asked for ``sort_order=desc``.

    Args:
        payload: Decoded JSON body from the observations endpoint

    Returns:
        Observations in non-decreasing date order
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    observations = payload.get("observations") or []
    if not isinstance(observations, list):
        raise ValueError("'observations' is not a list")
    if not observations:
        return []
    if not all(isinstance(obs, dict) for obs in observations):
        raise ValueError("'observations' contains non-object entries")

    df = pd.DataFrame(observations, columns=["date", "value"])
    df = df[df["value"] != MISSING_VALUE]
    if df.empty:
        return []

    # Upstream is newest-first; flip it before the stable sort so ties keep that order
    df = df.iloc[::-1]
    dates = pd.to_datetime(df["date"], format="%Y-%m-%d", errors="coerce")
    values = pd.to_numeric(df["value"], errors="coerce")

    valid = dates.notna() & values.notna()
    dropped = int((~valid).sum())
    if dropped:
        logger.warning(f"  Dropped {dropped} observations with unparseable date or value")

    clean = pd.DataFrame(
        {
            "date": dates[valid].dt.strftime("%Y-%m-%d"),
            "value": values[valid].astype(float),
        }
    ).sort_values("date", kind="stable")

    return [
        Observation(date=obs_date, value=float(value))
        for obs_date, value in zip(clean["date"], clean["value"])
    ]


def _error_detail(response: httpx.Response) -> str:
    """Pull the proxy's ``error`` message out of a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase


class FredFetcher:
    """Fetches FRED observations through the dashboard's proxy endpoint.

    Failures never propagate: each series resolves to a ``FetchResult`` and a
    failing series simply comes back empty with its ``error`` set.
    """

    PROXY_PATH = "/api/fred"

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.request_timeout)
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client if we created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FredFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def _fetch_payload(self, series_id: str, limit: int) -> dict:
        response = await self.client.get(
            f"{self.settings.proxy_url}{self.PROXY_PATH}",
            params={"series_id": series_id, "limit": limit},
        )
        response.raise_for_status()
        return response.json()

    async def fetch_series(self, series_id: str, limit: int | None = None) -> FetchResult:
        """
        Fetch one series and report the outcome.

        Args:
            series_id: FRED series ID (e.g. 'CPIAUCSL', 'UNRATE')
            limit: Number of most recent observations to request

        Returns:
            FetchResult with oldest-first observations, or an error reason
        """
        if not series_id or not series_id.strip():
            logger.error("Cannot fetch FRED data without a series ID")
            return FetchResult(series_id=series_id, error="series_id is required")

        limit = limit or self.settings.observation_limit
        logger.info(f"Fetching {series_id} (limit {limit})...")

        try:
            payload = await self._fetch_payload(series_id, limit)
            observations = parse_observations(payload)
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            logger.error(
                f"HTTP error fetching {series_id}: {e.response.status_code} {detail}"
            )
            return FetchResult(
                series_id=series_id,
                error=f"HTTP {e.response.status_code}: {detail}",
            )
        except httpx.RequestError as e:
            logger.error(f"Network error fetching {series_id}: {type(e).__name__}")
            return FetchResult(series_id=series_id, error=f"Network error: {type(e).__name__}")
        except Exception as e:
            logger.error(f"Error fetching {series_id}: {e}")
            return FetchResult(series_id=series_id, error=str(e) or type(e).__name__)

        logger.info(f"  Received {len(observations)} observations for {series_id}")
        return FetchResult(series_id=series_id, observations=observations)

    async def fetch_observations(
        self, series_id: str, limit: int | None = None
    ) -> list[Observation]:
        """Fetch one series, yielding an empty list on any failure."""
        result = await self.fetch_series(series_id, limit)
        return result.observations

    async def fetch_all(
        self, series_ids: Iterable[str], limit: int | None = None
    ) -> dict[str, FetchResult]:
        """
        Fetch several series concurrently.

        Waits for every request to settle; one failing series does not
        affect the others.

        Returns:
            Dict mapping series_id to FetchResult, in request order
        """
        series_ids = list(series_ids)
        results = await asyncio.gather(
            *(self.fetch_series(series_id, limit) for series_id in series_ids)
        )

        failed = [result.series_id for result in results if not result.ok]
        if failed:
            logger.warning(f"Failed to fetch {len(failed)} series: {failed}")

        return dict(zip(series_ids, results))
