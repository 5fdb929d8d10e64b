"""Shared enums used across features.

This module provides a single source of truth for enums used in both value
objects and benchmark data.
"""

from enum import Enum

# Match-V5 queue id for Ranked Solo/Duo on Summoner's Rift
RANKED_SOLO_QUEUE_ID = 420


class Tier(str, Enum):
    """League of Legends rank tiers, lowest first."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def order(self) -> int:
        """Position of the tier on the ladder (IRON is 0)."""
        return _TIER_ORDER.index(self)

    @property
    def has_divisions(self) -> bool:
        """IRON to DIAMOND have divisions I-IV, MASTER+ do not."""
        return self.order < Tier.MASTER.order

    def next_tier(self) -> "Tier":
        """Return the tier directly above, CHALLENGER returns itself."""
        return _TIER_ORDER[min(self.order + 1, len(_TIER_ORDER) - 1)]

    # str comparisons would order tiers alphabetically, so plain strings are
    # read as tier names first
    def _coerce(self, other):
        if isinstance(other, Tier):
            return other
        if isinstance(other, str):
            return Tier(other)
        return None

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.order < other.order

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.order >= other.order


_TIER_ORDER = list(Tier)


class Division(str, Enum):
    """Divisions within a tier, IV is the lowest."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"


class QueueType(str, Enum):
    """Ranked queue identifiers as returned by League-V4."""

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"
    RANKED_FLEX_SR = "RANKED_FLEX_SR"


class TeamPosition(str, Enum):
    """Lane positions reported by Match-V5."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"
    UNKNOWN = ""


class TrackedMetric(str, Enum):
    """Metrics compared against rank benchmarks.

    Declaration order is the tie-break order when two metrics have the same
    relative gap.
    """

    CS_PER_MIN = "cs_per_min"
    KDA = "kda"
    VISION_PER_MIN = "vision_per_min"
    GOLD_PER_MIN = "gold_per_min"
    DAMAGE_PER_MIN = "damage_per_min"
