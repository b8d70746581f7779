"""Data models for indicator data."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Observation:
    """Single observation from a FRED series."""

    date: str  # YYYY-MM-DD
    value: float


@dataclass(frozen=True)
class MonthlyPoint:
    """One sampled value per calendar month, ready for charting."""

    label: str  # "Jan 24"
    value: float
    month: str  # YYYY-MM


@dataclass
class FetchResult:
    """Outcome of fetching one series: data on success, a reason on failure."""

    series_id: str
    observations: list[Observation] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
