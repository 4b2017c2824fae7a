"""AI Reasoning — OpenAI-compatible (primary), Groq, Gemini."""

from .parsing import JsonParseResult, parse_model_json, question_candidates
from .service import (
    AIReasoningService,
    GeminiReasoningService,
    GroqReasoningService,
    OpenAIReasoningService,
    build_enrichment_prompt,
    build_trivia_prompt,
    create_ai_service,
)

__all__ = [
    "AIReasoningService",
    "GeminiReasoningService",
    "GroqReasoningService",
    "JsonParseResult",
    "OpenAIReasoningService",
    "build_enrichment_prompt",
    "build_trivia_prompt",
    "create_ai_service",
    "parse_model_json",
    "question_candidates",
]
