"""Transform League-V4 payloads into rank value objects."""

from typing import Any, Dict, Iterable, List, Optional

import structlog
from pydantic import ValidationError

from coachdiff.core.enums import QueueType, Tier
from coachdiff.core.exceptions import PayloadTransformError

from .ranks import RankEntry

logger = structlog.get_logger(__name__)


class RankTransformer:
    """Static helpers turning league entries into :class:`RankEntry` objects."""

    @staticmethod
    def from_league_entry(entry: Dict[str, Any]) -> RankEntry:
        """
        Transform a single League-V4 entry.

        League-V4 reports division ``I`` for MASTER and above; that placeholder
        is dropped since those tiers have no divisions.

        :param entry: Raw league entry
        :returns: Validated rank entry
        :raises PayloadTransformError: If the entry is invalid
        """
        data = dict(entry)
        tier = str(data.get("tier", "")).strip().upper()
        if tier in Tier.__members__ and not Tier(tier).has_divisions:
            data["rank"] = None

        try:
            return RankEntry.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Failed to transform league entry",
                error=str(e),
                queue_type=entry.get("queueType"),
                tier=entry.get("tier"),
            )
            raise PayloadTransformError(
                "Invalid League-V4 entry",
                payload_type="league_entry",
                context={"queue_type": entry.get("queueType")},
                original_error=e,
            ) from e

    @staticmethod
    def from_league_entries(entries: Iterable[Dict[str, Any]]) -> List[RankEntry]:
        """Transform every entry of a League-V4 by-puuid response."""
        return [RankTransformer.from_league_entry(entry) for entry in entries]

    @staticmethod
    def solo_queue_entry(entries: Iterable[RankEntry]) -> Optional[RankEntry]:
        """Return the Ranked Solo/Duo entry, or None if the player is unranked there."""
        return next(
            (
                entry
                for entry in entries
                if entry.queue_type == QueueType.RANKED_SOLO_5x5.value
            ),
            None,
        )
