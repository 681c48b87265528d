"""Volume normalization for level detection.

Provides the average-volume baseline used to weight pivot significance and
the per-candle volume ratio relative to that baseline.

Candles without a usable volume never fail the computation: the baseline
ignores them, and their normalized volume defaults to 1.0 so that volume
confirmation becomes a no-op multiplier.
"""

import math
from collections.abc import Sequence

import numpy as np

from technical_levels.schemas.levels import Candle


def average_volume(candles: Sequence[Candle]) -> float:
    """Calculate the arithmetic mean volume over candles that carry volume.

    Args:
        candles: Candle series (any order)

    Returns:
        Mean of all defined, finite volumes. Returns 0.0 when no candle
        carries volume.
    """
    volumes_array = np.array(
        [np.nan if candle.volume is None else candle.volume for candle in candles],
        dtype=float,
    )
    finite_volumes = volumes_array[np.isfinite(volumes_array)]

    if len(finite_volumes) == 0:
        return 0.0

    return float(finite_volumes.sum() / len(finite_volumes))


def normalized_volume(volume: float | None, avg_volume: float) -> float:
    """Express a candle's volume relative to the average volume.

    Args:
        volume: Candle volume (None if unavailable)
        avg_volume: Baseline from average_volume()

    Returns:
        volume / avg_volume, or 1.0 when volume is missing, zero, non-finite,
        or the baseline is not positive.
    """
    if avg_volume <= 0 or volume is None or volume == 0 or not math.isfinite(volume):
        return 1.0

    return volume / avg_volume
