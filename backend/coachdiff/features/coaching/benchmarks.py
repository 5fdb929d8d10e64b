"""
Rank benchmark reference data.

A benchmark holds the typical value of every tracked metric for players of
one tier. Benchmarks are read-only; the bundled table is an approximation
of public solo queue averages and can be replaced with a JSON file.
"""

import json
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import (
    Annotated,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from coachdiff.core.enums import Tier, TrackedMetric
from coachdiff.core.exceptions import BenchmarkConfigurationError

logger = structlog.get_logger(__name__)

DEFAULT_BENCHMARK_RESOURCE = "default_benchmarks.json"

# json.loads accepts NaN and Infinity, which would compare as neither above
# nor below a player value
BenchmarkValue = Annotated[float, Field(ge=0, allow_inf_nan=False)]

_BENCHMARK_DOCUMENT = TypeAdapter(Dict[Tier, Dict[TrackedMetric, BenchmarkValue]])


class RankBenchmark(BaseModel):
    """Typical metric values for one tier."""

    tier: Tier
    values: Mapping[TrackedMetric, BenchmarkValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("values")
    @classmethod
    def freeze_values(
        cls, v: Mapping[TrackedMetric, float]
    ) -> Mapping[TrackedMetric, float]:
        return MappingProxyType(dict(v))

    def missing_metrics(
        self, metrics: Optional[Iterable[TrackedMetric]] = None
    ) -> List[TrackedMetric]:
        """Metrics (all tracked ones by default) this benchmark has no value for."""
        wanted = list(TrackedMetric) if metrics is None else list(metrics)
        return [metric for metric in wanted if metric not in self.values]

    def value_of(self, metric: TrackedMetric) -> float:
        """
        Return the benchmark value for ``metric``.

        :raises BenchmarkConfigurationError: If the metric is missing
        """
        try:
            return self.values[metric]
        except KeyError:
            raise BenchmarkConfigurationError(
                f"{self.tier.value} benchmark has no value for {metric.value}",
                operation="value_of",
                context={"tier": self.tier.value, "metric": metric.value},
            ) from None

    def require_metrics(
        self,
        metrics: Optional[Iterable[TrackedMetric]] = None,
        operation: str = "require_metrics",
    ) -> None:
        """
        Raise unless every metric (all tracked ones by default) has a value.

        :raises BenchmarkConfigurationError: Naming the missing metrics
        """
        missing = self.missing_metrics(metrics)
        if missing:
            logger.error(
                "Incomplete rank benchmark",
                tier=self.tier.value,
                missing=[metric.value for metric in missing],
            )
            raise BenchmarkConfigurationError(
                f"{self.tier.value} benchmark is missing "
                f"{', '.join(metric.value for metric in missing)}",
                operation=operation,
                context={
                    "tier": self.tier.value,
                    "missing": [metric.value for metric in missing],
                },
            )


class BenchmarkTable:
    """Read-only lookup of :class:`RankBenchmark` by tier."""

    def __init__(self, benchmarks: Iterable[RankBenchmark]):
        table: Dict[Tier, RankBenchmark] = {}
        for benchmark in benchmarks:
            if benchmark.tier in table:
                raise BenchmarkConfigurationError(
                    f"Duplicate benchmark for {benchmark.tier.value}",
                    operation="load",
                    context={"tier": benchmark.tier.value},
                )
            table[benchmark.tier] = benchmark
        self._benchmarks = table

    def __contains__(self, tier: object) -> bool:
        return tier in self._benchmarks

    def __len__(self) -> int:
        return len(self._benchmarks)

    @property
    def tiers(self) -> List[Tier]:
        return sorted(self._benchmarks)

    def get(self, tier: Tier) -> RankBenchmark:
        """
        Return the benchmark for ``tier``.

        :raises BenchmarkConfigurationError: If the table has no such tier
        """
        benchmark = self._benchmarks.get(tier)
        if benchmark is None:
            logger.error("No benchmark for tier", tier=tier.value)
            raise BenchmarkConfigurationError(
                f"No benchmark configured for {tier.value}",
                operation="get",
                context={"tier": tier.value},
            )
        return benchmark

    def pair_for(self, tier: Tier) -> Tuple[RankBenchmark, RankBenchmark]:
        """Return the benchmarks for ``tier`` and the tier above it.

        CHALLENGER is paired with itself.
        """
        return self.get(tier), self.get(tier.next_tier())

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "BenchmarkTable":
        """
        Build a table from ``{"GOLD": {"cs_per_min": 6.5, ...}, ...}``.

        :raises BenchmarkConfigurationError: If the data is not shaped like
            that or a value is negative, NaN or infinite
        """
        try:
            document = _BENCHMARK_DOCUMENT.validate_python(data)
        except ValidationError as e:
            logger.error("Invalid benchmark data", error_count=e.error_count())
            raise BenchmarkConfigurationError(
                "Invalid benchmark data",
                operation="load",
                context={"errors": e.errors(include_url=False)},
            ) from e
        return cls(
            RankBenchmark(tier=tier, values=values) for tier, values in document.items()
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "BenchmarkTable":
        """Load a table from a JSON file shaped like :meth:`from_dict` input."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read benchmark file", path=str(path), error=str(e))
            raise BenchmarkConfigurationError(
                f"Cannot read benchmark file {path}",
                operation="load",
                context={"path": str(path)},
            ) from e
        table = cls.from_dict(data)
        logger.info("Loaded benchmark table", path=str(path), tiers=len(table))
        return table

    @classmethod
    def default(cls) -> "BenchmarkTable":
        """The bundled benchmark table covering every tier."""
        raw = (
            resources.files("coachdiff.features.coaching")
            .joinpath("data")
            .joinpath(DEFAULT_BENCHMARK_RESOURCE)
            .read_text(encoding="utf-8")
        )
        return cls.from_dict(json.loads(raw))

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "BenchmarkTable":
        """Load ``path`` when given, the bundled table otherwise."""
        return cls.from_json(path) if path else cls.default()
