"""HTTP proxy in front of the FRED API."""

from .server import create_app

__all__ = ["create_app"]
