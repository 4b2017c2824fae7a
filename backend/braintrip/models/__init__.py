"""Data models for BrainTrip."""

from .api import (
    EnrichPOIRequest,
    EnrichPOIResponse,
    GeocodeRequest,
    GeocodeResponse,
    QuizRequest,
    QuizResponse,
    SuggestionsRequest,
    SuggestionsResponse,
)
from .core import (
    CamelModel,
    Category,
    CityContext,
    ContextPOI,
    Coordinates,
    Difficulty,
    EnrichmentRecord,
    PoolPOI,
    ResolvedCity,
    Suggestion,
    TriviaQuestion,
    TriviaSource,
)
from .errors import AppError, ErrorCode

__all__ = [
    # Core
    "CamelModel",
    "Category",
    "CityContext",
    "ContextPOI",
    "Coordinates",
    "Difficulty",
    "EnrichmentRecord",
    "PoolPOI",
    "ResolvedCity",
    "Suggestion",
    "TriviaQuestion",
    "TriviaSource",
    # API
    "EnrichPOIRequest",
    "EnrichPOIResponse",
    "GeocodeRequest",
    "GeocodeResponse",
    "QuizRequest",
    "QuizResponse",
    "SuggestionsRequest",
    "SuggestionsResponse",
    # Errors
    "AppError",
    "ErrorCode",
]
