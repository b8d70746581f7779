"""Indicator calculations."""

from fred_indicators_dashboard.indicators.calculator import IndicatorCalculator
from fred_indicators_dashboard.indicators.monthly import aggregate_monthly, format_month_label

__all__ = ["IndicatorCalculator", "aggregate_monthly", "format_month_label"]
