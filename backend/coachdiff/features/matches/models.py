"""Immutable match value objects.

A :class:`MatchDetails` holds one ranked match with its ten participants.
Looking a player up in it yields a :class:`MatchRecord`, the per-player view
the metrics calculator works on.
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from coachdiff.core.enums import TeamPosition
from coachdiff.core.exceptions import ParticipantNotFoundError
from coachdiff.core.types import Counter, NonBlankStr, PUUIDField
from coachdiff.utils.statistics import safe_divide

PARTICIPANTS_PER_MATCH = 10


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / deaths, with 0 deaths counted as 1."""
    return (kills + assists) / max(deaths, 1)


def per_minute(value: float, minutes: float) -> float:
    """Rate per minute, 0 when ``minutes`` is not positive."""
    return safe_divide(value, minutes)


class MatchParticipant(BaseModel):
    """A player's raw counters in a single match.

    Field aliases follow the Match-V5 participant payload so provider data
    can be validated directly.
    """

    puuid: PUUIDField
    summoner_name: str = Field("", alias="summonerName")
    champion_name: str = Field("", alias="championName")
    champion_id: int = Field(0, alias="championId")
    team_position: TeamPosition = Field(TeamPosition.UNKNOWN, alias="teamPosition")
    win: bool = False
    kills: Counter = 0
    deaths: Counter = 0
    assists: Counter = 0
    total_minions_killed: Counter = Field(0, alias="totalMinionsKilled")
    neutral_minions_killed: Counter = Field(0, alias="neutralMinionsKilled")
    vision_score: Counter = Field(0, alias="visionScore")
    gold_earned: Counter = Field(0, alias="goldEarned")
    total_damage_dealt: Counter = Field(0, alias="totalDamageDealtToChampions")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def kda(self) -> float:
        return kda_ratio(self.kills, self.deaths, self.assists)

    @property
    def total_cs(self) -> int:
        """Lane minions plus jungle monsters."""
        return self.total_minions_killed + self.neutral_minions_killed

    def cs_per_min(self, game_duration_minutes: float) -> float:
        return per_minute(self.total_cs, game_duration_minutes)

    def vision_per_min(self, game_duration_minutes: float) -> float:
        return per_minute(self.vision_score, game_duration_minutes)

    def gold_per_min(self, game_duration_minutes: float) -> float:
        return per_minute(self.gold_earned, game_duration_minutes)

    def damage_per_min(self, game_duration_minutes: float) -> float:
        return per_minute(self.total_damage_dealt, game_duration_minutes)


class MatchRecord(BaseModel):
    """One participant's performance in one match.

    Rejects non-positive durations, so every per-minute rate below is
    computed against a real game length.
    """

    player_id: PUUIDField
    match_id: NonBlankStr
    duration_seconds: int = Field(..., gt=0)
    champion_name: str = ""
    champion_id: int = 0
    team_position: TeamPosition = TeamPosition.UNKNOWN
    win: bool = False
    kills: Counter = 0
    deaths: Counter = 0
    assists: Counter = 0
    lane_minions_killed: Counter = 0
    jungle_minions_killed: Counter = 0
    vision_score: Counter = 0
    gold_earned: Counter = 0
    damage_dealt: Counter = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_participant(
        cls, match_id: str, duration_seconds: int, participant: MatchParticipant
    ) -> "MatchRecord":
        """Build the per-player view of a match participant."""
        return cls(
            player_id=participant.puuid,
            match_id=match_id,
            duration_seconds=duration_seconds,
            champion_name=participant.champion_name,
            champion_id=participant.champion_id,
            team_position=participant.team_position,
            win=participant.win,
            kills=participant.kills,
            deaths=participant.deaths,
            assists=participant.assists,
            lane_minions_killed=participant.total_minions_killed,
            jungle_minions_killed=participant.neutral_minions_killed,
            vision_score=participant.vision_score,
            gold_earned=participant.gold_earned,
            damage_dealt=participant.total_damage_dealt,
        )

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / 60.0

    @property
    def kda(self) -> float:
        return kda_ratio(self.kills, self.deaths, self.assists)

    @property
    def total_cs(self) -> int:
        return self.lane_minions_killed + self.jungle_minions_killed

    @property
    def cs_per_min(self) -> float:
        return per_minute(self.total_cs, self.duration_minutes)

    @property
    def vision_per_min(self) -> float:
        return per_minute(self.vision_score, self.duration_minutes)

    @property
    def gold_per_min(self) -> float:
        return per_minute(self.gold_earned, self.duration_minutes)

    @property
    def damage_per_min(self) -> float:
        return per_minute(self.damage_dealt, self.duration_minutes)


class MatchDetails(BaseModel):
    """Complete details of a ranked match.

    Match ids follow the provider format ``{PLATFORM}_{GAME_ID}``, for
    example ``EUW1_1234567890``.
    """

    match_id: NonBlankStr
    queue_id: int
    game_creation: datetime
    game_duration_seconds: int = Field(..., gt=0)
    participants: Tuple[MatchParticipant, ...] = Field(
        ..., min_length=PARTICIPANTS_PER_MATCH, max_length=PARTICIPANTS_PER_MATCH
    )

    model_config = ConfigDict(frozen=True)

    @property
    def game_duration_minutes(self) -> float:
        return self.game_duration_seconds / 60.0

    def find_participant(self, puuid: str) -> Optional[MatchParticipant]:
        """Return the participant with the given PUUID, or None."""
        return next((p for p in self.participants if p.puuid == puuid), None)

    def did_player_win(self, puuid: str) -> bool:
        """True if the player won, False if they lost or did not play."""
        participant = self.find_participant(puuid)
        return participant.win if participant else False

    def get_record(self, puuid: str) -> MatchRecord:
        """
        Build the player's :class:`MatchRecord` for this match.

        :param puuid: Player PUUID
        :returns: Per-player match record
        :raises ParticipantNotFoundError: If the player is not in this match
        """
        participant = self.find_participant(puuid)
        if participant is None:
            raise ParticipantNotFoundError(puuid=puuid, match_id=self.match_id)
        return MatchRecord.from_participant(
            self.match_id, self.game_duration_seconds, participant
        )
