"""
Domain exceptions.

Construction-time validation failures surface as ``pydantic.ValidationError``
raised by the value objects themselves. The exceptions below cover lookup and
configuration failures that happen once valid objects are combined.
"""

from typing import Any, Dict, Optional


class CoachDiffError(Exception):
    """Base exception for all coachdiff errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "operation": self.operation,
            "context": self.context,
        }


class ParticipantNotFoundError(CoachDiffError):
    """Raised when a player is not among a match's participants.

    The metrics calculator absorbs this error and skips the match.
    """

    def __init__(self, puuid: str, match_id: str):
        super().__init__(
            message=f"Player {puuid} did not take part in match {match_id}",
            operation="find_participant",
            context={"puuid": puuid, "match_id": match_id},
        )
        self.puuid = puuid
        self.match_id = match_id


class BenchmarkConfigurationError(CoachDiffError):
    """Raised when benchmark data cannot support a comparison."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=f"Benchmark configuration error: {message}",
            operation=operation,
            context=context,
        )


class PayloadTransformError(CoachDiffError):
    """Raised when a provider payload cannot be turned into a value object."""

    def __init__(
        self,
        message: str,
        payload_type: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            operation=f"transform_{payload_type}",
            context=context,
            original_error=original_error,
        )
        self.payload_type = payload_type
