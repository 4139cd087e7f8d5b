"""
API Dependencies

Shared dependencies for FastAPI route handlers.
"""

from typing import Annotated

from fastapi import Depends

from trade_analytics.config import Settings, get_settings
from trade_analytics.services.trade_scoring import TradeScoringEngine


def get_scoring_engine(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TradeScoringEngine:
    """Dependency to get a TradeScoringEngine built from settings."""
    return TradeScoringEngine(settings)


# Type aliases for cleaner route signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
ScoringEngineDep = Annotated[TradeScoringEngine, Depends(get_scoring_engine)]
