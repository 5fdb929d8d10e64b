"""Data transformation utilities for Riot API match data."""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

import structlog
from pydantic import ValidationError

from coachdiff.core.enums import RANKED_SOLO_QUEUE_ID
from coachdiff.core.exceptions import PayloadTransformError

from .models import MatchDetails, MatchParticipant

logger = structlog.get_logger(__name__)


class MatchTransformer:
    """Transform Riot Match-V5 payloads into match value objects."""

    @staticmethod
    def from_riot_match(match_data: Dict[str, Any]) -> MatchDetails:
        """
        Transform a Match-V5 match payload into :class:`MatchDetails`.

        Args:
            match_data: Raw match data (``metadata`` and ``info`` sections)

        Returns:
            Validated, immutable match details

        Raises:
            PayloadTransformError: If required fields are missing or invalid
        """
        metadata = match_data.get("metadata") or {}
        info = match_data.get("info") or {}
        match_id = metadata.get("matchId")

        try:
            participants = [
                MatchParticipant.model_validate(participant)
                for participant in info.get("participants", [])
            ]
            return MatchDetails(
                match_id=match_id,
                queue_id=info.get("queueId"),
                game_creation=MatchTransformer._from_epoch_ms(info.get("gameCreation")),
                game_duration_seconds=info.get("gameDuration"),
                participants=participants,
            )
        except (ValidationError, TypeError, ValueError) as e:
            logger.error(
                "Failed to transform match data",
                error=str(e),
                match_id=match_id,
            )
            raise PayloadTransformError(
                "Invalid Match-V5 payload",
                payload_type="match",
                context={"match_id": match_id},
                original_error=e,
            ) from e

    @staticmethod
    def from_riot_matches(matches_data: Iterable[Dict[str, Any]]) -> List[MatchDetails]:
        """Transform several match payloads, failing on the first invalid one."""
        return [MatchTransformer.from_riot_match(match) for match in matches_data]

    @staticmethod
    def _from_epoch_ms(value: Any) -> datetime:
        if value is None:
            raise TypeError("gameCreation is missing")
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)


def filter_ranked_solo(
    matches: Iterable[MatchDetails], queue_id: int = RANKED_SOLO_QUEUE_ID
) -> List[MatchDetails]:
    """
    Keep only matches played in the given queue, preserving their order.

    The metrics calculator assumes its input is already restricted to one
    queue, so callers run this first.
    """
    return [match for match in matches if match.queue_id == queue_id]
