"""
Rank gap comparison.

Compares a player's profile with the benchmark of their current tier and
orders the tracked metrics by how far the player falls short.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import structlog

from coachdiff.core.enums import TrackedMetric
from coachdiff.utils.statistics import safe_divide

from .benchmarks import RankBenchmark
from .metrics import ProfileMetrics

logger = structlog.get_logger(__name__)


class GapDirection(str, Enum):
    """Where the player sits relative to the current-tier benchmark."""

    BELOW = "below"
    AT_PAR = "at_par"
    ABOVE = "above"


@dataclass(frozen=True)
class MetricGap:
    """Distance between the player and the benchmarks for one metric.

    ``gap`` and ``relative_gap`` are measured against the current tier only;
    ``next_benchmark`` is carried along for display.
    """

    metric: TrackedMetric
    player_value: float
    current_benchmark: float
    next_benchmark: float
    gap: float
    relative_gap: float
    direction: GapDirection

    @property
    def relative_gap_pct(self) -> float:
        return self.relative_gap * 100

    @property
    def is_improvement_area(self) -> bool:
        return self.direction is GapDirection.BELOW


class RankComparator:
    """Ranks tracked metrics by severity of the gap to the current tier.

    Stateless apart from the metric set it compares, which defaults to every
    :class:`TrackedMetric`.
    """

    def __init__(self, metrics: Optional[Sequence[TrackedMetric]] = None):
        """
        Initialize the comparator.

        Args:
            metrics: Metrics to compare, all tracked metrics when omitted.
                Output tie-breaks follow ``TrackedMetric`` declaration order
                regardless of the order given here.
        """
        selected = set(metrics) if metrics is not None else set(TrackedMetric)
        if not selected:
            raise ValueError("RankComparator needs at least one metric")
        self.metrics: List[TrackedMetric] = [m for m in TrackedMetric if m in selected]

    def compare(
        self,
        profile: ProfileMetrics,
        current_benchmark: RankBenchmark,
        next_benchmark: RankBenchmark,
    ) -> List[MetricGap]:
        """
        Compare ``profile`` with the current and next tier benchmarks.

        Metrics where the player is below the current tier come first,
        largest relative gap first; metrics at par or above follow in
        declaration order.

        Args:
            profile: Aggregated player metrics
            current_benchmark: Benchmark of the player's tier
            next_benchmark: Benchmark of the tier above

        Returns:
            One MetricGap per compared metric

        Raises:
            BenchmarkConfigurationError: If either benchmark lacks a compared metric
        """
        current_benchmark.require_metrics(self.metrics, operation="compare")
        next_benchmark.require_metrics(self.metrics, operation="compare")

        gaps = [
            self._metric_gap(metric, profile, current_benchmark, next_benchmark)
            for metric in self.metrics
        ]

        # sorted() is stable, so equal relative gaps keep declaration order
        below = sorted(
            (g for g in gaps if g.direction is GapDirection.BELOW),
            key=lambda g: abs(g.relative_gap),
            reverse=True,
        )
        rest = [g for g in gaps if g.direction is not GapDirection.BELOW]

        logger.info(
            "Rank comparison completed",
            tier=current_benchmark.tier.value,
            next_tier=next_benchmark.tier.value,
            sample_size=profile.sample_size,
            below=[g.metric.value for g in below],
        )
        return below + rest

    def _metric_gap(
        self,
        metric: TrackedMetric,
        profile: ProfileMetrics,
        current_benchmark: RankBenchmark,
        next_benchmark: RankBenchmark,
    ) -> MetricGap:
        player_value = profile.value_of(metric)
        current_value = current_benchmark.value_of(metric)
        gap = current_value - player_value

        return MetricGap(
            metric=metric,
            player_value=player_value,
            current_benchmark=current_value,
            next_benchmark=next_benchmark.value_of(metric),
            gap=gap,
            relative_gap=safe_divide(gap, current_value),
            direction=self._direction(gap),
        )

    @staticmethod
    def _direction(gap: float) -> GapDirection:
        if gap > 0:
            return GapDirection.BELOW
        if gap < 0:
            return GapDirection.ABOVE
        return GapDirection.AT_PAR
