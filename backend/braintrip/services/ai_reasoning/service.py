"""AI reasoning service: OpenAI-compatible (primary), Groq, Gemini.

Provider-agnostic base class with three concrete implementations. All
prompt construction and output parsing lives in the base class;
subclasses only implement ``_generate()`` for their API client.

- The model writes trivia and descriptions; it never decides which
  places exist. POIs always come from the place-search provider.
- Every call is bounded by ``asyncio.wait_for`` and is a soft failure:
  timeouts, provider errors and malformed output all come back as an
  empty or malformed result, never as an exception.
"""

import asyncio
import logging
import math
import re
from abc import ABC, abstractmethod
from typing import Any

from braintrip.config import Settings
from braintrip.models import ContextPOI, Difficulty

from .parsing import JsonParseResult, parse_model_json, question_candidates

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a travel encyclopedia with precise knowledge of landmarks, local history, "
    "food and culture. You state concrete, checkable facts (years, names, numbers) and "
    "never use marketing language. "
    "Respond ONLY with valid JSON. No explanations, no markdown, no extra text."
)

DIFFICULTY_GUIDES = {
    Difficulty.STANDARD: (
        "Fun, accessible questions that most travelers would know. Mix of well-known "
        "landmarks, popular foods, and interesting cultural facts. All options should be plausible."
    ),
    Difficulty.CHALLENGE: (
        "Challenging questions for experienced travelers. Include nuanced historical details, "
        "local customs, and specific facts. All distractors must be highly plausible and tricky."
    ),
}

MAX_EXCLUDED_IN_PROMPT = 30
POI_QUESTION_SHARE = 0.6
TRIVIA_MAX_TOKENS = 4000
ENRICHMENT_MAX_TOKENS = 500


def _sanitize(text: str, max_length: int = 500) -> str:
    # Keep newlines/tabs, drop other control characters.
    cleaned = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", text)
    return cleaned[:max_length].strip()


def build_trivia_prompt(
    city_label: str,
    pois: list[ContextPOI],
    difficulty: Difficulty,
    exclude_ids: list[str],
    request_count: int,
) -> str:
    """Trivia prompt grounded in ``pois`` when there are any."""
    city_label = _sanitize(city_label, max_length=150)

    poi_context = ""
    poi_requirement = ""
    exact_names_rule = ""
    if pois:
        lines = "\n".join(
            f"- {_sanitize(p.name, 200)} (rating: {p.rating}, reviews: {p.rating_count})"
            for p in pois
        )
        poi_context = f"\nREAL PLACES in {city_label} (use these as question topics):\n{lines}"
        required = math.ceil(request_count * POI_QUESTION_SHARE)
        poi_requirement = (
            f"\nCRITICAL: At least {required} of your {request_count} questions MUST directly "
            f"reference a specific place from the REAL PLACES list above by its exact name. "
            f"Ask about its history, founding year, architect, dimensions, records, unique "
            f"features, or hidden details. The remaining questions can cover local food, "
            f"culture, geography, or traditions specific to {city_label}."
        )
        exact_names_rule = "\n- When referencing places from the list, use their EXACT names"

    exclude_note = ""
    if exclude_ids:
        shown = ", ".join(_sanitize(i, 32) for i in exclude_ids[:MAX_EXCLUDED_IN_PROMPT])
        exclude_note = f"\nDo NOT repeat these previously asked question hashes: {shown}"

    return (
        f"Generate exactly {request_count} trivia questions about {city_label} "
        f"for a travel quiz app.\n"
        f"{poi_context}\n\n"
        f"Difficulty: {difficulty.value}\n"
        f"{DIFFICULTY_GUIDES.get(difficulty, DIFFICULTY_GUIDES[Difficulty.STANDARD])}\n"
        f"{exclude_note}\n"
        f"{poi_requirement}\n\n"
        f"CRITICAL RULES:\n"
        f"- Each question MUST have exactly 4 unique answer options\n"
        f"- correctIndex MUST be 0, 1, 2, or 3 (the index of the correct answer)\n"
        f"- Options must all be plausible - no obviously fake answers\n"
        f"- funFact must be exactly 1 interesting sentence with a concrete detail "
        f"(year, number, measurement)\n"
        f"- No duplicate questions\n"
        f"- No trick questions\n"
        f'- NO generic questions like "What is the capital?", "Which currency?", '
        f'"What language is spoken?"\n'
        f"- Questions must be SPECIFIC to {city_label} — they should not apply to any other city\n"
        f"- Cover diverse topics: specific landmarks, local food, history, architecture, "
        f"traditions, geography"
        f"{exact_names_rule}\n\n"
        f"IMPORTANT: Vary the correctIndex across questions. "
        f"Do NOT always put the correct answer first.\n\n"
        f"Return ONLY a JSON array:\n"
        f'[{{"question": "What is...", "options": ["Option A", "Option B", "Option C", "Option D"], '
        f'"correctIndex": 2, "funFact": "A specific fact with a year, number, or measurement."}}]'
    )


def build_enrichment_prompt(
    city: str, name: str, category: str | None = None, address: str | None = None
) -> str:
    """Single-POI prompt asking for a description and one fun fact."""
    city = _sanitize(city, max_length=150)
    name = _sanitize(name, max_length=200)
    details = f"category: {_sanitize(category, 50) if category else 'Landmark'}"
    if address:
        details += f", address: {_sanitize(address, 300)}"
    return (
        f'For the place "{name}" in {city} ({details}):\n\n'
        f"1. Write a 1-2 sentence description of why it's worth visiting "
        f"(factual, no marketing).\n"
        f"2. One lesser-known factual detail — a historical date, architectural record, "
        f"hidden feature, or measurable statistic. 12-25 words, one sentence, must contain "
        f"a year/number/proper noun.\n\n"
        f'STRICT: No marketing words like "popular", "must-visit", "perfect for", '
        f'"great place", "well-known".\n\n'
        f"Return ONLY JSON:\n"
        f'{{"description":"...","funFact":"..."}}'
    )


class AIReasoningService(ABC):
    """Base class for AI reasoning services.

    Subclasses only implement ``_generate()`` and ``provider_name``.
    """

    _timeout: float

    @abstractmethod
    async def _generate(
        self, prompt: str, timeout: float | None = None, max_tokens: int = TRIVIA_MAX_TOKENS
    ) -> str:
        """Send prompt to the AI provider and return raw text."""
        ...

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider name for logging."""
        ...

    async def complete_json(
        self, prompt: str, max_tokens: int = TRIVIA_MAX_TOKENS
    ) -> JsonParseResult:
        """Run one generation and parse it. Any failure → malformed."""
        try:
            text = await self._generate(prompt, max_tokens=max_tokens)
        except asyncio.TimeoutError:
            logger.info(f"[{self.provider_name}] Timeout after {self._timeout}s")
            return JsonParseResult.malformed()
        except Exception as e:
            logger.info(f"[{self.provider_name}] Generation failed: {type(e).__name__}: {e}")
            return JsonParseResult.malformed()
        result = parse_model_json(text)
        if not result.ok:
            logger.info(f"[{self.provider_name}] Unparseable output ({len(text)} chars)")
        return result

    async def generate_trivia_candidates(
        self,
        city_label: str,
        pois: list[ContextPOI],
        difficulty: Difficulty,
        exclude_ids: list[str],
        request_count: int,
    ) -> list[Any]:
        """Raw (unvalidated) question dicts for a city; ``[]`` on any failure."""
        prompt = build_trivia_prompt(city_label, pois, difficulty, exclude_ids, request_count)
        logger.info(
            f"[{self.provider_name}] Generating {request_count} {difficulty.value} "
            f"questions for {city_label} ({len(pois)} POIs)"
        )
        result = await self.complete_json(prompt, max_tokens=TRIVIA_MAX_TOKENS)
        return question_candidates(result)

    async def describe_poi(
        self, city: str, name: str, category: str | None = None, address: str | None = None
    ) -> JsonParseResult:
        """Description + fun fact for one POI, as parsed model JSON."""
        prompt = build_enrichment_prompt(city, name, category, address)
        return await self.complete_json(prompt, max_tokens=ENRICHMENT_MAX_TOKENS)


# ═══════════════════════════════════════════════════════════════════════
# Provider: OpenAI-compatible  (primary)
# ═══════════════════════════════════════════════════════════════════════

class OpenAIReasoningService(AIReasoningService):
    """Any OpenAI-compatible chat-completions endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        model_name: str = "gpt-4o-mini",
        timeout_seconds: float = 20.0,
    ) -> None:
        from openai import AsyncOpenAI

        if not api_key:
            raise ValueError("OpenAI API key not provided")
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._model_name = model_name
        self._timeout = timeout_seconds
        logger.info(f"[AI] OpenAI ready: {self._model_name}")

    @property
    def provider_name(self) -> str:
        return "OpenAI"

    async def _generate(
        self, prompt: str, timeout: float | None = None, max_tokens: int = TRIVIA_MAX_TOKENS
    ) -> str:
        t = timeout or self._timeout
        resp = await asyncio.wait_for(
            self._client.chat.completions.create(
                model=self._model_name,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_completion_tokens=max_tokens,
            ),
            timeout=t,
        )
        return (resp.choices[0].message.content or "").strip()


# ═══════════════════════════════════════════════════════════════════════
# Provider: Groq  (fast LPU inference)
# ═══════════════════════════════════════════════════════════════════════

class GroqReasoningService(AIReasoningService):
    """Groq LPU with Llama 3.1 8B Instant."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "llama-3.1-8b-instant",
        timeout_seconds: float = 20.0,
    ) -> None:
        from groq import AsyncGroq

        if not api_key:
            raise ValueError("GROQ_API_KEY not provided")
        self._client = AsyncGroq(api_key=api_key)
        self._model_name = model_name
        self._timeout = timeout_seconds
        logger.info(f"[AI] Groq ready: {self._model_name}")

    @property
    def provider_name(self) -> str:
        return "Groq"

    async def _generate(
        self, prompt: str, timeout: float | None = None, max_tokens: int = TRIVIA_MAX_TOKENS
    ) -> str:
        t = timeout or self._timeout
        resp = await asyncio.wait_for(
            self._client.chat.completions.create(
                model=self._model_name,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
                max_tokens=max_tokens,
            ),
            timeout=t,
        )
        return (resp.choices[0].message.content or "").strip()


# ═══════════════════════════════════════════════════════════════════════
# Provider: Gemini
# ═══════════════════════════════════════════════════════════════════════

class GeminiReasoningService(AIReasoningService):
    """Google Gemini with Gemma 3 4B."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemma-3-4b-it",
        timeout_seconds: float = 30.0,
    ) -> None:
        from google import genai

        if not api_key:
            raise ValueError("GEMINI_API_KEY not provided")
        self._client = genai.Client(api_key=api_key)
        self._model_name = model_name
        self._timeout = timeout_seconds
        logger.info(f"[AI] Gemini ready: {self._model_name}")

    @property
    def provider_name(self) -> str:
        return "Gemini"

    async def _generate(
        self, prompt: str, timeout: float | None = None, max_tokens: int = TRIVIA_MAX_TOKENS
    ) -> str:
        t = timeout or self._timeout
        # Gemma models take no system role; prepend it to the prompt.
        resp = await asyncio.wait_for(
            self._client.aio.models.generate_content(
                model=self._model_name,
                contents=f"{SYSTEM_PROMPT}\n\n{prompt}",
                config={"max_output_tokens": max_tokens},
            ),
            timeout=t,
        )
        return (resp.text or "").strip()


# ═══════════════════════════════════════════════════════════════════════
# Factory: OpenAI → Groq → Gemini
# ═══════════════════════════════════════════════════════════════════════

def create_ai_service(settings: Settings) -> AIReasoningService | None:
    """Create the best available AI service, or ``None`` when none is configured.

    Without a provider every generation is a soft failure and callers
    serve curated content.
    """
    timeout = settings.llm_timeout_seconds
    if settings.openai_api_key:
        try:
            return OpenAIReasoningService(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                model_name=settings.openai_model,
                timeout_seconds=timeout,
            )
        except Exception as e:
            logger.info(f"[AI] OpenAI init failed: {e}")

    if settings.groq_api_key:
        try:
            return GroqReasoningService(
                api_key=settings.groq_api_key,
                model_name=settings.groq_model,
                timeout_seconds=timeout,
            )
        except Exception as e:
            logger.info(f"[AI] Groq init failed: {e}")

    if settings.gemini_api_key:
        try:
            return GeminiReasoningService(
                api_key=settings.gemini_api_key,
                model_name=settings.gemini_model,
                timeout_seconds=timeout,
            )
        except Exception as e:
            logger.info(f"[AI] Gemini init failed: {e}")

    logger.warning("[AI] No AI provider configured; serving curated content only")
    return None
