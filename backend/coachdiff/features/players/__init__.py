"""Player identity and ranked standing."""

from .models import RiotAccount, Summoner
from .ranks import MAX_DIVISION_LP, RankEntry
from .transformers import RankTransformer

__all__ = [
    "RiotAccount",
    "Summoner",
    "MAX_DIVISION_LP",
    "RankEntry",
    "RankTransformer",
]
