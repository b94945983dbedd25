"""
Keyword condition matcher. Score = number of a condition's keyword phrases found
as substrings of the input; overlapping phrases each count.
"""

from collections.abc import Sequence

from pydantic import BaseModel

from symptom_checker.knowledge.catalog import CONDITIONS, ConditionEntry


class MatchResult(BaseModel):
    name: str
    explanation: str
    advice: str
    score: int


def _score(entry: ConditionEntry, lower: str) -> int:
    return sum(1 for kw in entry.keywords if kw in lower)


def match_conditions(text: str, catalog: Sequence[ConditionEntry] = CONDITIONS) -> list[MatchResult]:
    """
    Return conditions with score > 0, highest score first.
    sorted() is stable, so equal scores keep catalog declaration order.
    Empty list means nothing matched; the caller decides on a fallback.
    """
    lower = (text or "").lower()
    results: list[MatchResult] = []
    for entry in catalog:
        score = _score(entry, lower)
        if score > 0:
            results.append(
                MatchResult(
                    name=entry.name,
                    explanation=entry.explanation,
                    advice=entry.advice,
                    score=score,
                )
            )
    return sorted(results, key=lambda r: r.score, reverse=True)
