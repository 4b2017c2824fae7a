"""Validation and filtering of generated content."""

from .service import (
    BANNED_FUNFACT_PHRASES,
    GENERIC_PATTERNS,
    count_poi_references,
    enforce_answer_distribution,
    has_degenerate_distribution,
    is_generic_question,
    is_valid_fun_fact,
    parse_trivia_candidate,
    shuffle_options,
    validate_suggestions,
    validate_trivia_questions,
)

__all__ = [
    "BANNED_FUNFACT_PHRASES",
    "GENERIC_PATTERNS",
    "count_poi_references",
    "enforce_answer_distribution",
    "has_degenerate_distribution",
    "is_generic_question",
    "is_valid_fun_fact",
    "parse_trivia_candidate",
    "shuffle_options",
    "validate_suggestions",
    "validate_trivia_questions",
]
