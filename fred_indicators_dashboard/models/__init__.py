"""Data models."""

from .market_data import FetchResult, MonthlyPoint, Observation

__all__ = ["FetchResult", "MonthlyPoint", "Observation"]
