"""Ranked standing of a player in one queue."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from coachdiff.core.enums import Division, QueueType, Tier
from coachdiff.core.types import Counter, NonBlankStr

MAX_DIVISION_LP = 100


class RankEntry(BaseModel):
    """Ranked information for a specific queue.

    IRON to DIAMOND carry a division (I-IV) and 0-100 LP. MASTER and above
    have no division and uncapped LP.
    """

    queue_type: NonBlankStr = Field(..., alias="queueType")
    tier: Tier
    division: Optional[Division] = Field(None, alias="rank")
    league_points: Counter = Field(0, alias="leaguePoints")
    wins: Counter = 0
    losses: Counter = 0
    hot_streak: bool = Field(False, alias="hotStreak")
    veteran: bool = False
    fresh_blood: bool = Field(False, alias="freshBlood")
    inactive: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("tier", mode="before")
    @classmethod
    def normalize_tier(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("division", mode="before")
    @classmethod
    def blank_division_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v

    @model_validator(mode="after")
    def check_division_matches_tier(self) -> "RankEntry":
        if self.tier.has_divisions:
            if self.division is None:
                raise ValueError(f"Tier {self.tier.value} requires a division")
            if self.league_points > MAX_DIVISION_LP:
                raise ValueError(
                    f"League points must be 0-{MAX_DIVISION_LP} below MASTER, "
                    f"got {self.league_points}"
                )
        elif self.division is not None:
            raise ValueError(f"Tier {self.tier.value} has no divisions")
        return self

    @property
    def total_games(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Win rate as a percentage (0-100), 0 if no games were played."""
        if self.total_games == 0:
            return 0.0
        return (self.wins / self.total_games) * 100

    @property
    def full_rank(self) -> str:
        """Display rank, e.g. ``GOLD II`` or ``MASTER``."""
        if self.division is None:
            return self.tier.value
        return f"{self.tier.value} {self.division.value}"

    @property
    def is_solo_queue(self) -> bool:
        return self.queue_type == QueueType.RANKED_SOLO_5x5.value
