"""Curated fallback content."""

from .data import CURATED_PLACES, CURATED_QUESTIONS
from .service import generic_questions, get_curated_places, get_fallback_questions

__all__ = [
    "CURATED_PLACES",
    "CURATED_QUESTIONS",
    "generic_questions",
    "get_curated_places",
    "get_fallback_questions",
]
