"""Level detection indicators for the technical levels engine.

This package turns an OHLCV candle series into support and resistance
levels in four forward-only stages:
- Volume Normalization
- Swing Pivot Detection
- Pivot Clustering
- Level Scoring and Selection
"""

from .volume import average_volume, normalized_volume
from .pivots import (
    PivotKind,
    PivotPoint,
    detect_pivots,
    is_pivot_high,
    is_pivot_low,
)
from .clustering import (
    LevelCluster,
    cluster_pivots,
    volume_multiplier,
)
from .levels import (
    METHOD,
    aggregate_confidence,
    compute_levels,
    count_touches,
    round_price,
    score_confidence,
    select_levels,
)

__all__ = [
    "average_volume",
    "normalized_volume",
    "PivotKind",
    "PivotPoint",
    "detect_pivots",
    "is_pivot_high",
    "is_pivot_low",
    "LevelCluster",
    "cluster_pivots",
    "volume_multiplier",
    "METHOD",
    "aggregate_confidence",
    "compute_levels",
    "count_touches",
    "round_price",
    "score_confidence",
    "select_levels",
]
