"""Data fetching."""

from .fred_fetcher import FredFetcher, parse_observations

__all__ = ["FredFetcher", "parse_observations"]
