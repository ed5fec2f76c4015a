from typing import Any, Optional


class QuizError(Exception):
    """Base error for anything the API reports back as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuizError):
    status_code = 400


class NotFound(QuizError):
    status_code = 404


class UpstreamError(QuizError):
    """The record store answered with an ``error`` payload."""

    status_code = 500

    def __init__(self, payload: Any, status: Optional[int] = None):
        self.payload = payload
        self.status = status
        super().__init__(f"Airtable error: {_describe(payload)}")


def _describe(payload: Any) -> str:
    if isinstance(payload, dict):
        kind = payload.get("type")
        message = payload.get("message")
        if kind and message:
            return f"{kind}: {message}"
        return str(kind or message or payload)
    return str(payload)
