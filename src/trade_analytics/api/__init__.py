"""API package - FastAPI routes and dependencies."""

from trade_analytics.api.dependencies import (
    ScoringEngineDep,
    SettingsDep,
    get_scoring_engine,
)

__all__ = [
    "get_scoring_engine",
    "ScoringEngineDep",
    "SettingsDep",
]
