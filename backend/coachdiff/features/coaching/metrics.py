"""
Profile metrics aggregation.

Reduces a window of ranked matches into one averaged performance profile
for a single player.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

import structlog

from coachdiff.core.enums import TrackedMetric
from coachdiff.core.exceptions import ParticipantNotFoundError
from coachdiff.features.matches.models import MatchDetails, MatchRecord
from coachdiff.utils.statistics import safe_divide, safe_mean

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProfileMetrics:
    """Averaged performance over ``sample_size`` matches.

    A ``sample_size`` of 0 is the "no data" result; its rates are all 0 and
    must not be read as real performance.
    """

    avg_cs_per_min: float
    avg_kda: float
    avg_vision_per_min: float
    avg_gold_per_min: float
    avg_damage_per_min: float
    win_rate: float
    sample_size: int

    @classmethod
    def empty(cls) -> "ProfileMetrics":
        return cls(
            avg_cs_per_min=0.0,
            avg_kda=0.0,
            avg_vision_per_min=0.0,
            avg_gold_per_min=0.0,
            avg_damage_per_min=0.0,
            win_rate=0.0,
            sample_size=0,
        )

    @property
    def has_data(self) -> bool:
        return self.sample_size > 0

    def value_of(self, metric: TrackedMetric) -> float:
        """Return the profile value compared against benchmarks for ``metric``."""
        return self.as_metric_dict()[metric]

    def as_metric_dict(self) -> Dict[TrackedMetric, float]:
        return {
            TrackedMetric.CS_PER_MIN: self.avg_cs_per_min,
            TrackedMetric.KDA: self.avg_kda,
            TrackedMetric.VISION_PER_MIN: self.avg_vision_per_min,
            TrackedMetric.GOLD_PER_MIN: self.avg_gold_per_min,
            TrackedMetric.DAMAGE_PER_MIN: self.avg_damage_per_min,
        }


class MetricsCalculator:
    """Aggregates per-match rates into :class:`ProfileMetrics`.

    Stateless: one instance can be shared by any number of callers.
    """

    def calculate(self, matches: Sequence[MatchDetails], puuid: str) -> ProfileMetrics:
        """
        Average the player's per-match rates over ``matches``.

        Matches the player did not take part in are skipped. Queue filtering
        is the caller's job (see ``filter_ranked_solo``).

        Args:
            matches: Ranked solo matches, in any order
            puuid: Player whose performance is aggregated

        Returns:
            ProfileMetrics, with ``sample_size`` 0 when no match was eligible
        """
        records = self._collect_records(matches, puuid)
        if not records:
            logger.info(
                "No eligible matches for profile",
                puuid=puuid,
                matches_received=len(matches),
            )
            return ProfileMetrics.empty()

        wins = sum(1 for record in records if record.win)
        profile = ProfileMetrics(
            avg_cs_per_min=safe_mean([r.cs_per_min for r in records]),
            avg_kda=safe_mean([r.kda for r in records]),
            avg_vision_per_min=safe_mean([r.vision_per_min for r in records]),
            avg_gold_per_min=safe_mean([r.gold_per_min for r in records]),
            avg_damage_per_min=safe_mean([r.damage_per_min for r in records]),
            win_rate=safe_divide(wins, len(records)) * 100,
            sample_size=len(records),
        )

        logger.info(
            "Profile metrics calculated",
            puuid=puuid,
            sample_size=profile.sample_size,
            skipped=len(matches) - profile.sample_size,
            avg_kda=profile.avg_kda,
            avg_cs_per_min=profile.avg_cs_per_min,
        )
        return profile

    def _collect_records(
        self, matches: Sequence[MatchDetails], puuid: str
    ) -> List[MatchRecord]:
        records: List[MatchRecord] = []
        for match in matches:
            try:
                records.append(match.get_record(puuid))
            except ParticipantNotFoundError as e:
                logger.debug(
                    "Skipping match without player",
                    puuid=e.puuid,
                    match_id=e.match_id,
                )
        return records
