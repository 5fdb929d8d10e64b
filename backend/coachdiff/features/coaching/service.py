"""Coaching service: from raw matches and rank to prioritised metric gaps."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import structlog

from coachdiff.core.config import Settings, get_global_settings
from coachdiff.core.enums import Tier
from coachdiff.features.matches.models import MatchDetails
from coachdiff.features.matches.transformers import filter_ranked_solo
from coachdiff.features.players.ranks import RankEntry

from .benchmarks import BenchmarkTable
from .comparator import MetricGap, RankComparator
from .metrics import MetricsCalculator, ProfileMetrics

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CoachingReport:
    """Profile and ranked metric gaps for one player."""

    puuid: str
    tier: Tier
    next_tier: Tier
    rank: Optional[str]
    profile: ProfileMetrics
    gaps: Tuple[MetricGap, ...]

    @property
    def has_data(self) -> bool:
        return self.profile.has_data

    def top_priorities(self, limit: int = 3) -> List[MetricGap]:
        """The ``limit`` metrics with the largest shortfall, worst first."""
        return [gap for gap in self.gaps if gap.is_improvement_area][:limit]


class CoachingService:
    """Builds :class:`CoachingReport` objects.

    Holds only collaborators configured at construction, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        benchmarks: Optional[BenchmarkTable] = None,
        calculator: Optional[MetricsCalculator] = None,
        comparator: Optional[RankComparator] = None,
    ):
        self.settings = settings or get_global_settings()
        self.benchmarks = (
            benchmarks
            if benchmarks is not None
            else BenchmarkTable.load(self.settings.benchmark_file)
        )
        self.calculator = calculator or MetricsCalculator()
        self.comparator = comparator or RankComparator()

    def select_matches(self, matches: Sequence[MatchDetails]) -> List[MatchDetails]:
        """
        Keep ranked solo matches and limit them to the configured window.

        :param matches: Matches in any order, any queue
        :returns: The most recent ``match_window`` ranked solo matches, newest first
        """
        ranked = filter_ranked_solo(matches, self.settings.ranked_solo_queue_id)
        ranked.sort(key=lambda match: match.game_creation, reverse=True)
        return ranked[: self.settings.match_window]

    def resolve_tier(self, rank_entry: Optional[RankEntry]) -> Tier:
        """Tier used as the baseline.

        Unranked players, and entries from any queue other than Ranked
        Solo/Duo, fall back to ``unranked_tier``.
        """
        if rank_entry is None:
            return self.settings.unranked_tier
        if not rank_entry.is_solo_queue:
            logger.warning(
                "Ignoring rank entry from another queue",
                queue_type=rank_entry.queue_type,
                fallback_tier=self.settings.unranked_tier.value,
            )
            return self.settings.unranked_tier
        return rank_entry.tier

    def build_report(
        self,
        puuid: str,
        matches: Sequence[MatchDetails],
        rank_entry: Optional[RankEntry] = None,
    ) -> CoachingReport:
        """
        Build the coaching report for ``puuid``.

        :param puuid: Player PUUID
        :param matches: Player's recent matches, unfiltered
        :param rank_entry: Player's Ranked Solo/Duo entry, None if unranked
        :returns: CoachingReport, with no gaps when no match was usable
        :raises BenchmarkConfigurationError: If benchmarks for the tier are missing or incomplete
        """
        tier = self.resolve_tier(rank_entry)
        current, next_ = self.benchmarks.pair_for(tier)

        selected = self.select_matches(matches)
        profile = self.calculator.calculate(selected, puuid)

        gaps: List[MetricGap] = []
        if profile.has_data:
            gaps = self.comparator.compare(profile, current, next_)
        else:
            logger.warning(
                "No ranked solo data for player, skipping comparison",
                puuid=puuid,
                matches_received=len(matches),
            )

        report = CoachingReport(
            puuid=puuid,
            tier=current.tier,
            next_tier=next_.tier,
            rank=(
                rank_entry.full_rank
                if rank_entry is not None and rank_entry.is_solo_queue
                else None
            ),
            profile=profile,
            gaps=tuple(gaps),
        )
        logger.info(
            "Coaching report built",
            puuid=puuid,
            tier=tier.value,
            sample_size=profile.sample_size,
            priorities=[gap.metric.value for gap in report.top_priorities()],
        )
        return report
