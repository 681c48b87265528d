"""Deterministic support/resistance level detection from OHLCV candles."""

from technical_levels.indicators.levels import METHOD, compute_levels
from technical_levels.schemas.levels import (
    Candle,
    LevelSettings,
    TechnicalLevelInfo,
    TechnicalLevelsResult,
)

__all__ = [
    "METHOD",
    "Candle",
    "LevelSettings",
    "TechnicalLevelInfo",
    "TechnicalLevelsResult",
    "compute_levels",
]
