"""FRED economic indicators dashboard: proxy, monthly sampling, and charts."""

__version__ = "0.1.0"
