"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .enums import (
    RANKED_SOLO_QUEUE_ID,
    Division,
    QueueType,
    TeamPosition,
    Tier,
    TrackedMetric,
)
from .exceptions import (
    CoachDiffError,
    ParticipantNotFoundError,
    BenchmarkConfigurationError,
    PayloadTransformError,
)
from .logging import setup_logging
from .types import NonBlankStr, PUUIDField, Counter

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Enums
    "RANKED_SOLO_QUEUE_ID",
    "Division",
    "QueueType",
    "TeamPosition",
    "Tier",
    "TrackedMetric",
    # Exceptions
    "CoachDiffError",
    "ParticipantNotFoundError",
    "BenchmarkConfigurationError",
    "PayloadTransformError",
    # Logging
    "setup_logging",
    # Types
    "NonBlankStr",
    "PUUIDField",
    "Counter",
]
