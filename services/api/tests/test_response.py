"""
Envelope assembly: validation, fallback substitution, fixed disclaimers, timestamp format.
"""

from datetime import datetime, timezone

import pytest

from symptom_checker.errors import InvalidInput
from symptom_checker.knowledge.catalog import FALLBACK_NAME, RED_FLAGS
from symptom_checker.triage import response as response_module
from symptom_checker.triage.matcher import MatchResult
from symptom_checker.triage.response import (
    DISCLAIMERS,
    FALLBACK_CONDITION,
    INVALID_INPUT_MESSAGE,
    build_check_response,
    parse_check_request,
    validate_symptoms,
)


@pytest.mark.parametrize("bad", [None, "", "   ", "\n\t", 42, ["fever"], {"symptoms": "fever"}])
def test_invalid_symptoms_rejected(bad):
    with pytest.raises(InvalidInput) as exc_info:
        validate_symptoms(bad)
    assert exc_info.value.message == INVALID_INPUT_MESSAGE


def test_input_echoed_untrimmed():
    out = build_check_response("  runny nose  ")
    assert out.input == "  runny nose  "


def test_no_match_returns_single_fallback():
    out = build_check_response("my elbow feels odd")
    assert out.possible_conditions == [FALLBACK_CONDITION]
    assert out.possible_conditions[0].name == FALLBACK_NAME
    assert out.red_flags == []


def test_fallback_entry_not_shared_between_responses():
    first = build_check_response("nothing relevant")
    second = build_check_response("still nothing")
    assert first.possible_conditions[0] is not second.possible_conditions[0]


def test_red_flags_and_conditions_computed_independently():
    out = build_check_response("severe chest pain and shortness of breath")
    assert set(out.red_flags) == {RED_FLAGS[0].message, RED_FLAGS[1].message}
    assert out.possible_conditions == [FALLBACK_CONDITION]

    out = build_check_response("chest pain with fever")
    assert out.red_flags == [RED_FLAGS[0].message]
    assert out.possible_conditions[0].name == "Influenza (flu)"


@pytest.mark.parametrize("text", ["runny nose", "nothing here", "chest pain", "fever and body ache"])
def test_disclaimers_always_three_in_fixed_order(text):
    out = build_check_response(text)
    assert out.disclaimers == list(DISCLAIMERS)
    assert len(out.disclaimers) == 3


def test_timestamp_is_iso_utc_with_z():
    now = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
    out = build_check_response("runny nose", now=now)
    assert out.timestamp == "2024-05-01T12:30:45.123Z"


def test_default_timestamp_parses():
    out = build_check_response("runny nose")
    assert out.timestamp.endswith("Z")
    datetime.fromisoformat(out.timestamp.replace("Z", "+00:00"))


def test_score_not_exposed_on_wire():
    out = build_check_response("fever and body ache")
    dumped = out.model_dump(by_alias=True)
    assert set(dumped) == {"input", "timestamp", "redFlags", "possibleConditions", "disclaimers"}
    assert set(dumped["possibleConditions"][0]) == {"name", "explanation", "advice"}


def test_fallback_used_reflects_matcher_result():
    assert build_check_response("my elbow feels odd").fallback_used is True
    assert build_check_response("runny nose").fallback_used is False


def test_condition_identical_to_fallback_is_not_flagged(monkeypatch):
    lookalike = MatchResult(
        name=FALLBACK_NAME,
        explanation=FALLBACK_CONDITION.explanation,
        advice=FALLBACK_CONDITION.advice,
        score=1,
    )
    monkeypatch.setattr(response_module, "match_conditions", lambda text: [lookalike])
    out = build_check_response("anything")
    assert out.possible_conditions == [FALLBACK_CONDITION]
    assert out.fallback_used is False


def test_fallback_flag_not_serialized():
    dumped = build_check_response("nothing here").model_dump(by_alias=True)
    assert "fallback_used" not in dumped
    assert "_fallback_used" not in dumped


@pytest.mark.parametrize("payload", [None, "fever", ["fever"], {"symptoms": 1}, {"symptoms": ["fever"]}])
def test_parse_check_request_rejects_bad_shapes(payload):
    with pytest.raises(InvalidInput):
        parse_check_request(payload)


def test_parse_check_request_allows_missing_field_for_later_validation():
    assert parse_check_request({}).symptoms is None
    assert parse_check_request({"symptoms": "fever"}).symptoms == "fever"
