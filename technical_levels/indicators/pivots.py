"""Swing pivot detection.

A candle is a pivot high when its high is strictly greater than every high
within ``lookback`` candles on either side, and a pivot low when its low is
strictly lower than every low in the same window. Equal extremes (plateaus)
disqualify the candidate, so flat stretches never produce pivots.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from technical_levels.indicators.volume import normalized_volume
from technical_levels.schemas.levels import Candle


class PivotKind(str, Enum):
    """Side of the market a pivot (and its cluster) belongs to."""
    SUPPORT = "support"
    RESISTANCE = "resistance"


@dataclass(frozen=True)
class PivotPoint:
    """Detected swing extremum.

    Attributes:
        price: High of a resistance pivot, low of a support pivot
        time: Time of the source candle
        normalized_volume: Candle volume relative to the series average (1.0 if unavailable)
        kind: SUPPORT or RESISTANCE
    """

    price: float
    time: int | float
    normalized_volume: float
    kind: PivotKind


def is_pivot_high(candles: Sequence[Candle], index: int, lookback: int) -> bool:
    """Check whether candles[index] is a swing high within +/- lookback."""
    current_high = candles[index].high
    for i in range(index - lookback, index + lookback + 1):
        if i == index or i < 0 or i >= len(candles):
            continue
        if candles[i].high >= current_high:
            return False
    return True


def is_pivot_low(candles: Sequence[Candle], index: int, lookback: int) -> bool:
    """Check whether candles[index] is a swing low within +/- lookback."""
    current_low = candles[index].low
    for i in range(index - lookback, index + lookback + 1):
        if i == index or i < 0 or i >= len(candles):
            continue
        if candles[i].low <= current_low:
            return False
    return True


def detect_pivots(
    candles: Sequence[Candle],
    lookback: int,
    avg_volume: float = 0.0,
) -> list[PivotPoint]:
    """Detect swing highs and lows in chronological order.

    Scans every index with a full window on both sides. A candle that is both
    a pivot high and a pivot low emits two pivots, resistance first.

    Args:
        candles: Candle series, oldest first
        lookback: Window radius (number of candles on each side)
        avg_volume: Volume baseline used to normalize pivot volume

    Returns:
        Pivots ordered by source index. Empty when the series is shorter
        than 2 * lookback + 1.
    """
    pivots: list[PivotPoint] = []

    for i in range(lookback, len(candles) - lookback):
        candle = candles[i]
        relative_volume = normalized_volume(candle.volume, avg_volume)

        if is_pivot_high(candles, i, lookback):
            pivots.append(
                PivotPoint(
                    price=candle.high,
                    time=candle.time,
                    normalized_volume=relative_volume,
                    kind=PivotKind.RESISTANCE,
                )
            )
        if is_pivot_low(candles, i, lookback):
            pivots.append(
                PivotPoint(
                    price=candle.low,
                    time=candle.time,
                    normalized_volume=relative_volume,
                    kind=PivotKind.SUPPORT,
                )
            )

    return pivots
