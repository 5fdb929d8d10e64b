"""Tests for domain exceptions."""

from coachdiff.core.exceptions import (
    BenchmarkConfigurationError,
    CoachDiffError,
    ParticipantNotFoundError,
    PayloadTransformError,
)


def test_participant_not_found_carries_lookup_keys():
    error = ParticipantNotFoundError(puuid="abc", match_id="EUW1_1")

    assert isinstance(error, CoachDiffError)
    assert error.puuid == "abc"
    assert error.match_id == "EUW1_1"
    assert str(error) == "[find_participant] Player abc did not take part in match EUW1_1"


def test_benchmark_configuration_error_message():
    error = BenchmarkConfigurationError("GOLD benchmark is missing kda", operation="compare")

    assert str(error) == "[compare] Benchmark configuration error: GOLD benchmark is missing kda"


def test_to_dict():
    original = ValueError("bad")
    error = PayloadTransformError(
        "Invalid Match-V5 payload",
        payload_type="match",
        context={"match_id": "EUW1_1"},
        original_error=original,
    )

    assert error.original_error is original
    assert error.to_dict() == {
        "error": "PayloadTransformError",
        "message": "Invalid Match-V5 payload",
        "operation": "transform_match",
        "context": {"match_id": "EUW1_1"},
    }


def test_str_without_operation():
    assert str(CoachDiffError("plain")) == "plain"
