"""Proximity clustering of swing pivots into candidate levels.

Pivots are merged first-fit, in detection order: each pivot joins the first
existing cluster of the same kind whose running average lies within the
proximity threshold, otherwise it opens a new cluster. Because the running
average drifts as pivots merge, outcomes depend on arrival order and the
earliest-formed cluster wins nearby pivots. That order sensitivity is part of
the scoring contract and must not be replaced with nearest-cluster matching.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from technical_levels.indicators.pivots import PivotKind, PivotPoint

MIN_VOLUME_MULTIPLIER = 0.5
MAX_VOLUME_MULTIPLIER = 3.0


@dataclass
class LevelCluster:
    """Volume-weighted aggregate of same-kind pivots.

    Attributes:
        kind: SUPPORT or RESISTANCE
        avg_price: Running volume-weighted mean of merged pivot prices
        total_weight: Sum of weights contributing to avg_price
        touches: Number of pivots merged at clustering time
        pivot_count: Number of pivots in the cluster
        volume_score: Sum of per-pivot volume multipliers
    """

    kind: PivotKind
    avg_price: float
    total_weight: float
    touches: int = 1
    pivot_count: int = 1
    volume_score: float = 0.0

    @classmethod
    def from_pivot(cls, pivot: PivotPoint, weight: float) -> "LevelCluster":
        """Open a new cluster seeded by a single pivot."""
        return cls(
            kind=pivot.kind,
            avg_price=pivot.price,
            total_weight=weight,
            touches=1,
            pivot_count=1,
            volume_score=weight,
        )

    def is_within(self, price: float, threshold: float) -> bool:
        """Check whether a price lies within threshold of the running average."""
        return abs(self.avg_price - price) <= threshold

    def merge(self, price: float, weight: float) -> None:
        """Fold a pivot price into the weighted running average."""
        self.avg_price = (self.avg_price * self.total_weight + price * weight) / (
            self.total_weight + weight
        )
        self.total_weight += weight
        self.touches += 1
        self.pivot_count += 1
        self.volume_score += weight


def volume_multiplier(relative_volume: float | None, use_volume_confirmation: bool) -> float:
    """Calculate the weight a pivot contributes to its cluster.

    Args:
        relative_volume: Pivot volume relative to the series average
        use_volume_confirmation: When False every pivot weighs 1.0

    Returns:
        relative_volume clamped to [0.5, 3.0]; a missing or zero relative
        volume counts as 1.0 before clamping.
    """
    if not use_volume_confirmation:
        return 1.0

    return max(MIN_VOLUME_MULTIPLIER, min(relative_volume or 1.0, MAX_VOLUME_MULTIPLIER))


def cluster_pivots(
    pivots: Iterable[PivotPoint],
    proximity_percent: float,
    use_volume_confirmation: bool,
) -> list[LevelCluster]:
    """Merge nearby same-kind pivots into weighted clusters.

    Args:
        pivots: Pivots in detection (chronological) order
        proximity_percent: Fractional distance, relative to the pivot price,
            within which a pivot joins an existing cluster
        use_volume_confirmation: Weight pivots by relative volume

    Returns:
        Clusters in creation order
    """
    clusters: list[LevelCluster] = []

    for pivot in pivots:
        threshold = pivot.price * proximity_percent
        weight = volume_multiplier(pivot.normalized_volume, use_volume_confirmation)

        # First fit, not best fit
        target = next(
            (
                cluster
                for cluster in clusters
                if cluster.kind == pivot.kind and cluster.is_within(pivot.price, threshold)
            ),
            None,
        )

        if target is None:
            clusters.append(LevelCluster.from_pivot(pivot, weight))
        else:
            target.merge(pivot.price, weight)

    return clusters
