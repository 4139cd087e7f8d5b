"""API route handlers."""

from trade_analytics.api.routes import trade_analyzer

__all__ = [
    "trade_analyzer",
]
