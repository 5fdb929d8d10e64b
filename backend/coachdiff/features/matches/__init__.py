"""Match value objects and Match-V5 payload transformation."""

from .models import (
    PARTICIPANTS_PER_MATCH,
    MatchDetails,
    MatchParticipant,
    MatchRecord,
    kda_ratio,
    per_minute,
)
from .transformers import MatchTransformer, filter_ranked_solo

__all__ = [
    "PARTICIPANTS_PER_MATCH",
    "MatchDetails",
    "MatchParticipant",
    "MatchRecord",
    "MatchTransformer",
    "filter_ranked_solo",
    "kda_ratio",
    "per_minute",
]
