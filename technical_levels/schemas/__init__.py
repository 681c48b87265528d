"""Pydantic schemas for engine inputs and results.

This module exports all Pydantic schemas used throughout the engine.
"""

from technical_levels.schemas.base import CamelModel, StrictBaseModel
from technical_levels.schemas.levels import (
    Candle,
    DetailedLevels,
    LevelSettings,
    LevelsMetadata,
    TechnicalLevelInfo,
    TechnicalLevelsResult,
)

__all__ = [
    "CamelModel",
    "StrictBaseModel",
    "Candle",
    "DetailedLevels",
    "LevelSettings",
    "LevelsMetadata",
    "TechnicalLevelInfo",
    "TechnicalLevelsResult",
]
