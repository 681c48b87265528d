"""Support and resistance levels for a candle series.

Pipeline (strictly forward, no state kept between calls):

1. Volume baseline: mean volume over candles that carry one
2. Pivot detection: swing highs/lows over a symmetric window
3. Clustering: first-fit, volume-weighted merge of nearby same-kind pivots
4. Scoring: touches over the full history plus a bounded confidence score,
   then the strongest levels per side ordered by price

Confidence model:
    confidence = min(100, round((pivot_count * 20 + touches * 8 + volume_score * 6) / 2))

More independent pivots, more confirmed touches and stronger volume backing
each raise confidence additively. There are no learned parameters.
"""

import math
from collections.abc import Sequence
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import numpy as np
from numpy.typing import NDArray

from technical_levels.indicators.clustering import LevelCluster, cluster_pivots
from technical_levels.indicators.pivots import PivotKind, detect_pivots
from technical_levels.indicators.volume import average_volume
from technical_levels.schemas.levels import (
    Candle,
    DetailedLevels,
    LevelSettings,
    LevelsMetadata,
    TechnicalLevelInfo,
    TechnicalLevelsResult,
)
from technical_levels.utils.structured_logging import get_logger
from technical_levels.utils.validation import resolve_settings

logger = get_logger(__name__)

METHOD = "deterministic:pivot-cluster-touch-score"

MAX_CONFIDENCE = 100
PIVOT_POINTS = 20
TOUCH_POINTS = 8
VOLUME_POINTS = 6


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (toward +infinity)."""
    return math.floor(value + 0.5)


def round_price(price: float) -> float:
    """Round a price to 2 decimal places, halves rounding away from zero.

    Uses the exact binary value of the float, so 100.125 becomes 100.13.
    """
    return float(Decimal(price).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def count_touches(
    highs: list[float] | NDArray[np.float64],
    lows: list[float] | NDArray[np.float64],
    level_price: float,
    tolerance_percent: float,
) -> int:
    """Count candles whose [low, high] range crosses a level's tolerance band.

    Args:
        highs: Candle highs over the full history
        lows: Candle lows over the full history
        level_price: Level price (full precision)
        tolerance_percent: Band half-width as a fraction of level_price

    Returns:
        Number of candles with low <= price + tolerance and high >= price - tolerance
    """
    highs_array = np.asarray(highs, dtype=float)
    lows_array = np.asarray(lows, dtype=float)
    tolerance = level_price * tolerance_percent

    touched = (lows_array <= level_price + tolerance) & (highs_array >= level_price - tolerance)
    return int(np.count_nonzero(touched))


def score_confidence(pivot_count: int, touches: int, volume_score: float) -> int:
    """Calculate the bounded confidence score for a level.

    Args:
        pivot_count: Pivots merged into the level's cluster
        touches: Candles crossing the level over the full history
        volume_score: Sum of the cluster's volume multipliers

    Returns:
        Integer confidence in [0, 100]
    """
    raw = (pivot_count * PIVOT_POINTS + touches * TOUCH_POINTS + volume_score * VOLUME_POINTS) / 2
    return min(MAX_CONFIDENCE, round_half_up(raw))


def select_levels(
    clusters: Sequence[LevelCluster],
    kind: PivotKind,
    highs: NDArray[np.float64],
    lows: NDArray[np.float64],
    settings: LevelSettings,
) -> list[TechnicalLevelInfo]:
    """Score one side's clusters and keep the strongest.

    Levels are ranked by descending confidence (ties keep cluster creation
    order), capped at max_levels_per_side, then re-ordered by ascending price.
    """
    scored: list[TechnicalLevelInfo] = []
    for cluster in clusters:
        if cluster.kind != kind:
            continue
        touches = count_touches(highs, lows, cluster.avg_price, settings.proximity_percent)
        scored.append(
            TechnicalLevelInfo(
                price=round_price(cluster.avg_price),
                confidence=score_confidence(cluster.pivot_count, touches, cluster.volume_score),
                touches=touches,
            )
        )

    strongest = sorted(scored, key=lambda level: -level.confidence)[: settings.max_levels_per_side]
    return sorted(strongest, key=lambda level: level.price)


def aggregate_confidence(levels: Sequence[TechnicalLevelInfo]) -> int:
    """Unweighted mean confidence across levels, 0 when there are none."""
    if not levels:
        return 0
    return round_half_up(sum(level.confidence for level in levels) / len(levels))


def _build_result(
    support: list[TechnicalLevelInfo],
    resistance: list[TechnicalLevelInfo],
    settings: LevelSettings,
) -> TechnicalLevelsResult:
    retained = [*support, *resistance]
    return TechnicalLevelsResult(
        support_levels=[level.price for level in support],
        resistance_levels=[level.price for level in resistance],
        metadata=LevelsMetadata(
            method=METHOD,
            confidence=aggregate_confidence(retained),
            touch_counts={f"{level.price:.2f}": level.touches for level in retained},
            detailed_levels=DetailedLevels(support=support, resistance=resistance),
            last_updated=datetime.now(UTC),
            settings=settings,
        ),
    )


def compute_levels(
    candles: Sequence[Candle],
    settings: LevelSettings | None = None,
    **overrides: Any,
) -> TechnicalLevelsResult:
    """Compute support and resistance levels from a candle series.

    Args:
        candles: Candles ordered oldest to newest (never re-sorted here)
        settings: Level detection settings; fields left unset take the
            configured defaults
        overrides: Individual settings applied over ``settings``

    Returns:
        TechnicalLevelsResult. Series shorter than 2 * swing_lookback + 1
        produce empty level lists with confidence 0 and full metadata.

    Raises:
        SettingsValidationError: If an override is out of range or unknown
    """
    settings = resolve_settings(settings, **overrides)
    lookback = settings.swing_lookback

    if len(candles) < lookback * 2 + 1:
        logger.debug(
            "insufficient_candles",
            candles=len(candles),
            required=lookback * 2 + 1,
        )
        return _build_result([], [], settings)

    avg_volume = average_volume(candles)
    pivots = detect_pivots(candles, lookback, avg_volume)
    clusters = cluster_pivots(
        pivots, settings.proximity_percent, settings.use_volume_confirmation
    )

    highs = np.array([candle.high for candle in candles], dtype=float)
    lows = np.array([candle.low for candle in candles], dtype=float)
    support = select_levels(clusters, PivotKind.SUPPORT, highs, lows, settings)
    resistance = select_levels(clusters, PivotKind.RESISTANCE, highs, lows, settings)

    result = _build_result(support, resistance, settings)

    logger.debug(
        "technical_levels_computed",
        candles=len(candles),
        pivots=len(pivots),
        clusters=len(clusters),
        support_levels=len(support),
        resistance_levels=len(resistance),
        confidence=result.metadata.confidence,
    )

    return result
