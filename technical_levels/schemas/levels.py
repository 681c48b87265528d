"""Schemas for candle input, level detection settings and the levels result."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from technical_levels.core.config import Settings, get_settings
from technical_levels.schemas.base import CamelModel


class Candle(BaseModel):
    """Single OHLCV price bar, oldest-first within a series.

    Extra fields from market-data payloads are ignored rather than rejected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    time: int | float = Field(..., description="Sequence position or epoch timestamp")
    open: float = Field(..., ge=0, allow_inf_nan=False, description="Opening price")
    high: float = Field(..., ge=0, allow_inf_nan=False, description="Highest traded price")
    low: float = Field(..., ge=0, allow_inf_nan=False, description="Lowest traded price")
    close: float = Field(..., ge=0, allow_inf_nan=False, description="Closing price")
    volume: float | None = Field(None, ge=0, description="Traded volume, if available")

    @model_validator(mode="after")
    def _check_range(self) -> "Candle":
        if self.high < self.low:
            raise ValueError(f"high ({self.high}) must be >= low ({self.low})")
        return self


class LevelSettings(CamelModel):
    """Immutable configuration for one level computation.

    Attributes:
        swing_lookback: Window radius for pivot detection (candles each side)
        proximity_percent: Fractional price distance defining "same level"
        max_levels_per_side: Cap on returned levels per side
        use_volume_confirmation: Whether relative volume weights pivot significance
    """

    model_config = ConfigDict(frozen=True)

    swing_lookback: int = Field(default=3, ge=1)
    proximity_percent: float = Field(default=0.006, gt=0, allow_inf_nan=False)
    max_levels_per_side: int = Field(default=4, ge=1)
    use_volume_confirmation: bool = True

    @classmethod
    def from_config(cls, config: Settings | None = None) -> "LevelSettings":
        """Build default level settings from environment configuration."""
        config = config or get_settings()
        return cls(
            swing_lookback=config.default_swing_lookback,
            proximity_percent=config.default_proximity_percent,
            max_levels_per_side=config.default_max_levels_per_side,
            use_volume_confirmation=config.default_use_volume_confirmation,
        )


class TechnicalLevelInfo(CamelModel):
    """One reported support or resistance level."""

    price: float = Field(..., description="Level price rounded to 2 decimal places")
    confidence: int = Field(..., ge=0, le=100, description="Deterministic confidence score")
    touches: int = Field(..., ge=0, description="Candles whose range crosses the level band")


class DetailedLevels(CamelModel):
    """Per-side level details."""

    support: list[TechnicalLevelInfo] = Field(default_factory=list)
    resistance: list[TechnicalLevelInfo] = Field(default_factory=list)


class LevelsMetadata(CamelModel):
    """Metadata describing how a levels result was produced."""

    method: str = Field(..., description="Algorithm family identifier")
    confidence: int = Field(..., ge=0, le=100, description="Mean confidence of retained levels")
    touch_counts: dict[str, int] = Field(
        default_factory=dict, description="Formatted level price -> touch count"
    )
    detailed_levels: DetailedLevels = Field(default_factory=DetailedLevels)
    last_updated: datetime = Field(..., description="Wall-clock time of computation (UTC)")
    settings: LevelSettings = Field(..., description="Effective settings, defaults applied")


class TechnicalLevelsResult(CamelModel):
    """Support and resistance levels computed from a candle series."""

    support_levels: list[float] = Field(default_factory=list)
    resistance_levels: list[float] = Field(default_factory=list)
    metadata: LevelsMetadata

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "supportLevels": [178.5, 181.02],
                    "resistanceLevels": [185.0, 189.47],
                    "metadata": {
                        "method": "deterministic:pivot-cluster-touch-score",
                        "confidence": 64,
                        "touchCounts": {"178.50": 9, "181.02": 6, "185.00": 11, "189.47": 4},
                        "detailedLevels": {
                            "support": [
                                {"price": 178.5, "confidence": 72, "touches": 9},
                                {"price": 181.02, "confidence": 57, "touches": 6},
                            ],
                            "resistance": [
                                {"price": 185.0, "confidence": 83, "touches": 11},
                                {"price": 189.47, "confidence": 44, "touches": 4},
                            ],
                        },
                        "lastUpdated": "2025-12-06T15:30:00Z",
                        "settings": {
                            "swingLookback": 3,
                            "proximityPercent": 0.006,
                            "maxLevelsPerSide": 4,
                            "useVolumeConfirmation": True,
                        },
                    },
                }
            ]
        }
    }

    def to_response(self) -> dict[str, Any]:
        """Serialise to the camelCase JSON shape consumed downstream."""
        return self.model_dump(mode="json", by_alias=True)
