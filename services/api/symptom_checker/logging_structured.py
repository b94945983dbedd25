"""
Structured JSON logging. One JSON line per event on stderr.
Raw symptom text is never logged; only its length.
"""

import json
import sys
import uuid
from typing import Any


def _emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload), file=sys.stderr, flush=True)


def generate_request_id() -> str:
    return str(uuid.uuid4())


def log_startup(*, condition_count: int, red_flag_count: int, port: int) -> None:
    _emit(
        {
            "event": "startup",
            "condition_count": condition_count,
            "red_flag_count": red_flag_count,
            "port": port,
        }
    )


def log_request(
    *,
    request_id: str,
    latency_ms: float,
    input_chars: int,
    red_flag_hits: int = 0,
    condition_count: int = 0,
    fallback_used: bool = False,
) -> None:
    """Emit one line per successful /check. condition_count excludes the fallback entry."""
    _emit(
        {
            "request_id": request_id,
            "latency_ms": round(latency_ms, 2),
            "input_chars": input_chars,
            "red_flag_hits": red_flag_hits,
            "condition_count": condition_count,
            "fallback_used": fallback_used,
        }
    )


def log_red_flag_trigger(*, request_id: str, messages: list[str]) -> None:
    """Log when red flags trigger."""
    _emit(
        {
            "event": "red_flag_trigger",
            "request_id": request_id,
            "messages": messages,
        }
    )


def log_invalid_input(*, request_id: str, reason: str) -> None:
    _emit(
        {
            "event": "invalid_input",
            "request_id": request_id,
            "reason": reason,
        }
    )


def log_unhandled_error(*, request_id: str, path: str, error: str) -> None:
    _emit(
        {
            "event": "unhandled_error",
            "request_id": request_id,
            "path": path,
            "error": error,
        }
    )
