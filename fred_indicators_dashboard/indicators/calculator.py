"""Turn fetched FRED series into chart-ready dashboard indicators."""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from fred_indicators_dashboard.config import DASHBOARD_SERIES, FRED_SERIES_URL, Settings
from fred_indicators_dashboard.data.fred_fetcher import FredFetcher
from fred_indicators_dashboard.indicators.monthly import aggregate_monthly
from fred_indicators_dashboard.models.market_data import FetchResult, MonthlyPoint


logger = logging.getLogger(__name__)


@dataclass
class IndicatorResult:
    """Result for a single dashboard panel."""

    series_id: str
    title: str
    subtitle: str
    chart: str  # "line" or "area"
    color: str
    fill: str | None = None
    points: list[MonthlyPoint] = field(default_factory=list)
    error: str | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.points)

    @property
    def details_url(self) -> str:
        return f"{FRED_SERIES_URL}/{self.series_id}"


@dataclass
class DashboardResult:
    """Complete dashboard result."""

    loaded_at: datetime
    indicators: dict[str, IndicatorResult]

    @property
    def failed(self) -> list[str]:
        return [key for key, ind in self.indicators.items() if ind.error is not None]


class IndicatorCalculator:
    """Loads every dashboard series and samples each to monthly points."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: FredFetcher | None = None,
        series: dict[str, dict] | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.fetcher = fetcher
        self.series = series if series is not None else DASHBOARD_SERIES

    def _build_indicator(self, series_id: str, result: FetchResult) -> IndicatorResult:
        info = self.series[series_id]
        points = aggregate_monthly(result.observations, self.settings.month_count)
        return IndicatorResult(
            series_id=series_id,
            title=info.get("title", series_id),
            subtitle=info.get("subtitle", ""),
            chart=info.get("chart", "line"),
            color=info.get("color", "#3b82f6"),
            fill=info.get("fill"),
            points=points,
            error=result.error,
        )

    async def calculate(self) -> DashboardResult:
        """
        Fetch all configured series concurrently and aggregate each one.

        Always returns a result; series that failed to load carry an
        ``error`` and no points.
        """
        if self.fetcher is not None:
            results = await self.fetcher.fetch_all(
                self.series, self.settings.observation_limit
            )
        else:
            async with FredFetcher(self.settings) as fetcher:
                results = await fetcher.fetch_all(
                    self.series, self.settings.observation_limit
                )

        indicators = {
            series_id: self._build_indicator(series_id, result)
            for series_id, result in results.items()
        }
        loaded = sum(1 for ind in indicators.values() if ind.has_data)
        logger.info(f"Loaded {loaded}/{len(indicators)} indicators")

        return DashboardResult(loaded_at=datetime.now(), indicators=indicators)
