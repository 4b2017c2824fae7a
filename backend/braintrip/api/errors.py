"""JSON error responses in the ``{"error": ..., "code": ...}`` shape."""

from typing import Any, Sequence

from fastapi.responses import JSONResponse

from braintrip.models import AppError, ErrorCode

_REQUIRED_ERROR_TYPES = {"missing", "string_too_short", "too_short"}


def error_response(status_code: int, code: ErrorCode, message: str, **extra: Any) -> JSONResponse:
    content = AppError.of(code, message).model_dump(mode="json", exclude_none=True)
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


def validation_message(errors: Sequence[Any]) -> str:
    """Short message for the first validation error, e.g. ``"city is required"``."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    field = loc[-1] if loc else "request body"
    if first.get("type") in _REQUIRED_ERROR_TYPES:
        return f"{field} is required"
    return f"Invalid {field}: {first.get('msg', 'bad value')}"
