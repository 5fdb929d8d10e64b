"""Shared fixtures for the coachdiff test suite."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import pytest

from coachdiff.core.config import Settings
from coachdiff.core.enums import RANKED_SOLO_QUEUE_ID, Tier, TrackedMetric
from coachdiff.features.coaching.benchmarks import RankBenchmark
from coachdiff.features.matches.models import MatchDetails, MatchParticipant

PLAYER_PUUID = "player-puuid-0001"
BASE_CREATION = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def build_participant(puuid: str, **stats: Any) -> MatchParticipant:
    """Participant with neutral defaults, overridden by ``stats``."""
    data: Dict[str, Any] = {
        "puuid": puuid,
        "summoner_name": f"summoner-{puuid}",
        "champion_name": "Ahri",
        "champion_id": 103,
        "team_position": "MIDDLE",
        "win": False,
        "kills": 0,
        "deaths": 0,
        "assists": 0,
        "total_minions_killed": 0,
        "neutral_minions_killed": 0,
        "vision_score": 0,
        "gold_earned": 0,
        "total_damage_dealt": 0,
    }
    data.update(stats)
    return MatchParticipant(**data)


def build_match(
    match_id: str = "EUW1_1000",
    duration_seconds: int = 1800,
    queue_id: int = RANKED_SOLO_QUEUE_ID,
    player_puuid: Optional[str] = PLAYER_PUUID,
    created_offset_minutes: int = 0,
    **player_stats: Any,
) -> MatchDetails:
    """Ten-player match, the first participant being ``player_puuid`` (if any)."""
    participants = [
        build_participant(f"other-puuid-{match_id}-{i}") for i in range(10)
    ]
    if player_puuid is not None:
        participants[0] = build_participant(player_puuid, **player_stats)
    return MatchDetails(
        match_id=match_id,
        queue_id=queue_id,
        game_creation=BASE_CREATION + timedelta(minutes=created_offset_minutes),
        game_duration_seconds=duration_seconds,
        participants=participants,
    )


def build_benchmark(tier: Tier = Tier.GOLD, **values: float) -> RankBenchmark:
    """Benchmark with every tracked metric, overridden by ``values``."""
    defaults = {
        TrackedMetric.CS_PER_MIN: 6.5,
        TrackedMetric.KDA: 2.5,
        TrackedMetric.VISION_PER_MIN: 0.65,
        TrackedMetric.GOLD_PER_MIN: 385.0,
        TrackedMetric.DAMAGE_PER_MIN: 570.0,
    }
    defaults.update({TrackedMetric(name): value for name, value in values.items()})
    return RankBenchmark(tier=tier, values=defaults)


@pytest.fixture
def player_puuid() -> str:
    return PLAYER_PUUID


@pytest.fixture
def match_factory():
    return build_match


@pytest.fixture
def participant_factory():
    return build_participant


@pytest.fixture
def benchmark_factory():
    return build_benchmark


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment."""
    return Settings(
        _env_file=None,
        log_level="INFO",
        ranked_solo_queue_id=RANKED_SOLO_QUEUE_ID,
        match_window=20,
        benchmark_file=None,
        unranked_tier=Tier.SILVER,
    )


@pytest.fixture
def riot_match_payload() -> Dict[str, Any]:
    """Trimmed Match-V5 payload with ten participants."""
    participants = []
    for i in range(10):
        participants.append(
            {
                "puuid": PLAYER_PUUID if i == 0 else f"other-puuid-{i}",
                "summonerName": f"Summoner{i}",
                "championName": "Jinx" if i == 0 else "Garen",
                "championId": 222 if i == 0 else 86,
                "teamPosition": "BOTTOM" if i == 0 else "TOP",
                "teamId": 100 if i < 5 else 200,
                "win": i < 5,
                "kills": 8 if i == 0 else 2,
                "deaths": 2 if i == 0 else 4,
                "assists": 6 if i == 0 else 3,
                "totalMinionsKilled": 200 if i == 0 else 120,
                "neutralMinionsKilled": 10 if i == 0 else 0,
                "visionScore": 30 if i == 0 else 15,
                "goldEarned": 13500 if i == 0 else 9000,
                "totalDamageDealtToChampions": 24000 if i == 0 else 12000,
                "champLevel": 16,
            }
        )
    return {
        "metadata": {
            "matchId": "EUW1_7000000001",
            "participants": [p["puuid"] for p in participants],
        },
        "info": {
            "gameCreation": 1735732800000,
            "gameDuration": 1800,
            "queueId": 420,
            "gameMode": "CLASSIC",
            "participants": participants,
        },
    }
