"""Error models shared by the API layer."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    GENERATION_UNAVAILABLE = "GENERATION_UNAVAILABLE"
    API_ERROR = "API_ERROR"


class AppError(BaseModel):
    """Error payload: ``{"error": "<message>", "code": "<ErrorCode>"}``."""

    error: str
    code: ErrorCode
    detail: Optional[str] = None

    @classmethod
    def of(cls, code: ErrorCode, message: str, detail: str | None = None) -> "AppError":
        return cls(error=message, code=code, detail=detail)
