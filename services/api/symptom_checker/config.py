"""
Runtime settings from environment variables. Read once at import.
"""

import os


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


HOST = os.getenv("HOST", "0.0.0.0")
PORT = _int_env("PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()
