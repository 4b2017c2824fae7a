"""Trivia quiz orchestration."""

from .service import (
    QuizUnavailableError,
    TriviaService,
    request_count_for,
    trivia_cache_key,
)

__all__ = [
    "QuizUnavailableError",
    "TriviaService",
    "request_count_for",
    "trivia_cache_key",
]
