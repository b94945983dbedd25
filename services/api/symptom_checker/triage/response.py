"""
/check request and response envelope. Runs red-flag detection and condition matching
(both always), substitutes the fallback entry when nothing matched, and attaches the
fixed disclaimers.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictStr, ValidationError

from symptom_checker.errors import InvalidInput
from symptom_checker.knowledge.catalog import FALLBACK_ADVICE, FALLBACK_EXPLANATION, FALLBACK_NAME
from symptom_checker.safety.red_flags import check_red_flags
from symptom_checker.triage.matcher import MatchResult, match_conditions

INVALID_INPUT_MESSAGE = 'Please provide symptom text in the "symptoms" field.'

DISCLAIMERS: tuple[str, str, str] = (
    "Educational purposes only — not medical advice.",
    "If you have severe or emergency symptoms (e.g., chest pain, difficulty breathing, heavy bleeding), "
    "seek emergency care immediately.",
    "AI-based symptom checkers can be wrong; consult a qualified healthcare professional for diagnosis and treatment.",
)


class CheckRequest(BaseModel):
    # Optional here so a missing field reaches validate_symptoms; wrong types still fail parsing.
    symptoms: StrictStr | None = None


class PossibleCondition(BaseModel):
    """Wire shape of a condition: score stays internal."""

    name: str
    explanation: str
    advice: str


FALLBACK_CONDITION = PossibleCondition(
    name=FALLBACK_NAME,
    explanation=FALLBACK_EXPLANATION,
    advice=FALLBACK_ADVICE,
)


class CheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input: str
    timestamp: str
    red_flags: list[str] = Field(default_factory=list, alias="redFlags")
    possible_conditions: list[PossibleCondition] = Field(..., min_length=1, alias="possibleConditions")
    disclaimers: list[str] = Field(..., min_length=3, max_length=3)

    _fallback_used: bool = PrivateAttr(default=False)

    @property
    def fallback_used(self) -> bool:
        """True when no catalog condition matched, set from the matcher result rather than the entry text."""
        return self._fallback_used


def parse_check_request(payload: object) -> CheckRequest:
    """Decoded request body (JSON or form fields) to CheckRequest; shape errors are InvalidInput."""
    try:
        return CheckRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInput(INVALID_INPUT_MESSAGE) from exc


def validate_symptoms(symptoms: object) -> str:
    """Return symptoms unchanged if it is a non-blank string, else raise InvalidInput."""
    if not isinstance(symptoms, str) or not symptoms.strip():
        raise InvalidInput(INVALID_INPUT_MESSAGE)
    return symptoms


def _utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_possible_conditions(matches: list[MatchResult]) -> list[PossibleCondition]:
    if not matches:
        return [FALLBACK_CONDITION.model_copy()]
    return [PossibleCondition(name=m.name, explanation=m.explanation, advice=m.advice) for m in matches]


def build_check_response(symptoms: str, *, now: datetime | None = None) -> CheckResponse:
    """
    Validate symptoms, then build the full envelope. input is echoed as given (not trimmed).
    """
    symptoms = validate_symptoms(symptoms)
    red_flags = check_red_flags(symptoms)
    matches = match_conditions(symptoms)
    response = CheckResponse(
        input=symptoms,
        timestamp=_utc_timestamp(now),
        red_flags=red_flags,
        possible_conditions=_to_possible_conditions(matches),
        disclaimers=list(DISCLAIMERS),
    )
    response._fallback_used = not matches
    return response
