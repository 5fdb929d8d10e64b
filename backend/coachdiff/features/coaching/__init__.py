"""Performance profiling and rank gap comparison."""

from .benchmarks import BenchmarkTable, RankBenchmark
from .comparator import GapDirection, MetricGap, RankComparator
from .metrics import MetricsCalculator, ProfileMetrics
from .service import CoachingReport, CoachingService

__all__ = [
    "BenchmarkTable",
    "RankBenchmark",
    "GapDirection",
    "MetricGap",
    "RankComparator",
    "MetricsCalculator",
    "ProfileMetrics",
    "CoachingReport",
    "CoachingService",
]
