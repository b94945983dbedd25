"""Keyword-based symptom checker: red-flag detection, condition ranking, response envelope."""

__version__ = "0.1.0"
