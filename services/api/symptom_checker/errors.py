"""Errors surfaced to API clients."""


class InvalidInput(ValueError):
    """Symptom text missing, not a string, or blank. Mapped to HTTP 400."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
