"""
English-only red-flag detection. Case-insensitive substring match, presence only (no scoring).
Always runs, independently of condition matching.
"""

from collections.abc import Sequence

from symptom_checker.knowledge.catalog import RED_FLAGS, RedFlagEntry


def check_red_flags(text: str, catalog: Sequence[RedFlagEntry] = RED_FLAGS) -> list[str]:
    """
    Return the distinct emergency messages whose keywords appear in text.
    An entry hit by several keywords, or two entries sharing a message, yield the message once.
    Order is first match across catalog entries.
    """
    lower = (text or "").lower()
    matched: list[str] = []
    seen: set[str] = set()
    for flag in catalog:
        if any(kw in lower for kw in flag.keywords) and flag.message not in seen:
            seen.add(flag.message)
            matched.append(flag.message)
    return matched
