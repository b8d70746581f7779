"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


# Indicators shown on the dashboard, in grid order
DASHBOARD_SERIES: dict[str, dict] = {
    "CPIAUCSL": {
        "title": "Consumer Price Index (CPI)",
        "subtitle": "FRED All Urban Consumers: All Items (CPIAUCSL)",
        "chart": "line",
        "color": "#3b82f6",
    },
    "UNRATE": {
        "title": "Unemployment Rate",
        "subtitle": "FRED Civilian Unemployment Rate (UNRATE)",
        "chart": "area",
        "color": "#10b981",
        "fill": "#86efac",
    },
    "DGS10": {
        "title": "10-Year Treasury Yield",
        "subtitle": "FRED Market Yield on U.S. Treasury Securities (DGS10)",
        "chart": "line",
        "color": "#8b5cf6",
    },
    "DGS3MO": {
        "title": "3-Month Treasury Yield",
        "subtitle": "FRED Market Yield on U.S. Treasury Securities (DGS3MO)",
        "chart": "line",
        "color": "#f59e0b",
    },
}

# Sidebar navigation; only the first entry is backed by a page
NAV_CATEGORIES: list[str] = [
    "Key Indicators",
    "Inflation",
    "Employment",
    "Interest Rates",
    "Economic Growth",
    "Exchange Rates",
    "Housing",
    "Consumer Spending",
]

FRED_SERIES_URL = "https://fred.stlouisfed.org/series"

# FRED rejects observation limits outside this range
MAX_OBSERVATION_LIMIT = 100_000


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    fred_base_url: str = field(
        default_factory=lambda: os.getenv("FRED_API_BASE", "https://api.stlouisfed.org/fred")
    )
    proxy_url: str = field(
        default_factory=lambda: os.getenv("FRED_PROXY_URL", "http://127.0.0.1:8000")
    )
    host: str = field(default_factory=lambda: os.getenv("DASHBOARD_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("DASHBOARD_PORT", "8000")))
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FRED_REQUEST_TIMEOUT", "30"))
    )
    observation_limit: int = field(
        default_factory=lambda: int(os.getenv("FRED_OBSERVATION_LIMIT", "100"))
    )
    month_count: int = field(default_factory=lambda: int(os.getenv("DASHBOARD_MONTHS", "24")))

    def __post_init__(self) -> None:
        self.fred_base_url = self.fred_base_url.rstrip("/")
        self.proxy_url = self.proxy_url.rstrip("/")

    def validate(self) -> None:
        """Validate numeric settings."""
        if not 1 <= self.observation_limit <= MAX_OBSERVATION_LIMIT:
            raise ValueError(
                f"FRED_OBSERVATION_LIMIT must be between 1 and {MAX_OBSERVATION_LIMIT}"
            )
        if self.month_count < 1:
            raise ValueError("DASHBOARD_MONTHS must be at least 1")
        if self.request_timeout <= 0:
            raise ValueError("FRED_REQUEST_TIMEOUT must be positive")

    def has_fred_api_key(self) -> bool:
        """Check if the FRED API key is configured."""
        return bool(self.fred_api_key)
