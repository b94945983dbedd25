from symptom_checker.triage.matcher import MatchResult, match_conditions
from symptom_checker.triage.response import (
    DISCLAIMERS,
    CheckRequest,
    CheckResponse,
    PossibleCondition,
    build_check_response,
    parse_check_request,
    validate_symptoms,
)

__all__ = [
    "match_conditions",
    "MatchResult",
    "build_check_response",
    "validate_symptoms",
    "parse_check_request",
    "CheckRequest",
    "CheckResponse",
    "PossibleCondition",
    "DISCLAIMERS",
]
