"""Trivia orchestration: grounding → cache → generation → dedup → fallback.

Flow for one quiz request:

1. Ground: use the caller's ``cityPlaceId``/``cityLabel`` when given,
   otherwise resolve the free-text city. Either way fetch its POI context.
2. Serve the cached pool for ``(placeId-or-city, difficulty)`` or generate,
   validate and cache a fresh batch (only batches of 4+ are cached).
3. Drop questions the caller has already seen (stable ids).
4. A cache hit that filtering exhausts is invalidated and regenerated
   exactly once.
5. Ungrounded requests that still come up short get curated or generic
   questions.

The caller's explicit ``cityPlaceId`` is a promise of grounded content:
if nothing usable comes out, :class:`QuizUnavailableError` is raised
(HTTP 503) instead of substituting unrelated curated questions.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from braintrip.models import (
    ContextPOI,
    Difficulty,
    QuizRequest,
    QuizResponse,
    TriviaQuestion,
    TriviaSource,
)
from braintrip.services.ai_reasoning import AIReasoningService
from braintrip.services.cache import CacheRegistry
from braintrip.services.content_validator import (
    count_poi_references,
    enforce_answer_distribution,
    shuffle_options,
    validate_trivia_questions,
)
from braintrip.services.fallback import get_fallback_questions
from braintrip.services.places import GooglePlacesService
from braintrip.utils.hashing import question_id

logger = logging.getLogger(__name__)

MIN_CACHEABLE = 4
MIN_USABLE = 4
HEAVY_EXCLUSION = 10
MAX_REQUEST_COUNT = 16
EXHAUSTION_THRESHOLD = 30


class QuizUnavailableError(Exception):
    """Grounded generation for an explicit place id produced nothing."""


@dataclass
class Grounding:
    label: str
    place_id: str = ""
    pois: list[ContextPOI] = field(default_factory=list)

    @property
    def poi_names(self) -> list[str]:
        return [p.name for p in self.pois]


def request_count_for(count: int, excluded: int) -> int:
    """Ask for extra questions when heavy exclusion filtering is expected."""
    if excluded > HEAVY_EXCLUSION:
        return min(count * 2, MAX_REQUEST_COUNT)
    return count


def trivia_cache_key(place_id: str, city: str, difficulty: Difficulty) -> str:
    return f"{place_id or city.lower().strip()}|{difficulty.value}"


class TriviaService:
    """Builds quiz responses for the ``/quiz/generate`` endpoint."""

    def __init__(
        self,
        places: GooglePlacesService,
        ai: Optional[AIReasoningService],
        caches: CacheRegistry,
        rng: random.Random | None = None,
    ) -> None:
        self._places = places
        self._ai = ai
        self._caches = caches
        self._rng = rng or random.Random()

    async def _ground(self, request: QuizRequest) -> Grounding:
        if request.city_place_id:
            label = request.city_label or request.city
            context = await self._places.get_city_context(request.city_place_id, label)
            return Grounding(label=label, place_id=request.city_place_id, pois=context.pois)

        resolved = await self._places.resolve_city(request.city)
        if resolved is None or not resolved.external_id:
            return Grounding(label=request.city_label or request.city)
        context = await self._places.get_city_context(resolved.external_id, resolved.label)
        return Grounding(label=resolved.label, place_id=resolved.external_id, pois=context.pois)

    async def _generate_batch(
        self,
        grounding: Grounding,
        difficulty: Difficulty,
        exclude_ids: list[str],
        request_count: int,
    ) -> list[TriviaQuestion]:
        if self._ai is None:
            return []
        candidates = await self._ai.generate_trivia_candidates(
            grounding.label, grounding.pois, difficulty, exclude_ids, request_count
        )
        questions = validate_trivia_questions(candidates, self._rng)
        if grounding.pois:
            refs = count_poi_references(questions, grounding.poi_names)
            logger.info(
                f"[TRIVIA] {refs}/{len(questions)} questions reference a POI of {grounding.label}"
            )
        return questions

    async def _store(self, key: str, questions: list[TriviaQuestion]) -> None:
        if len(questions) >= MIN_CACHEABLE:
            await self._caches.trivia_pool.set(key, questions)

    @staticmethod
    def _unseen(
        questions: list[TriviaQuestion],
        place_id: str,
        difficulty: Difficulty,
        excluded: set[str],
    ) -> list[TriviaQuestion]:
        return [
            q for q in questions
            if question_id(place_id, difficulty.value, q.question) not in excluded
        ]

    def fallback_response(self, city: str) -> QuizResponse:
        """Curated or generic questions, shuffled. Used when anything goes wrong."""
        questions = [shuffle_options(q, self._rng) for q in get_fallback_questions(city)]
        return QuizResponse(
            questions=questions,
            question_ids=[],
            city_label=city,
            pool_exhausted=False,
            source=TriviaSource.FALLBACK,
        )

    async def generate(self, request: QuizRequest) -> QuizResponse:
        """Run the full quiz flow for one request.

        Raises:
            QuizUnavailableError: ``city_place_id`` was supplied and no
                usable questions could be produced.
        """
        difficulty = request.difficulty
        count = request.count
        threshold = min(count, MIN_USABLE)
        exclude_ids = list(dict.fromkeys(request.exclude_question_ids))
        excluded = set(exclude_ids)
        request_count = request_count_for(count, len(excluded))

        grounding = await self._ground(request)
        place_id = grounding.place_id
        key = trivia_cache_key(place_id, request.city, difficulty)

        logger.info(
            f"[TRIVIA] Generate city='{request.city}' label='{grounding.label}' "
            f"placeId='{place_id}' difficulty={difficulty.value} key='{key}' "
            f"explicitPlaceId={bool(request.city_place_id)}"
        )

        cached = await self._caches.trivia_pool.get(key)
        if cached:
            pool = cached
            source = TriviaSource.CACHE
        else:
            pool = await self._generate_batch(grounding, difficulty, exclude_ids, request_count)
            await self._store(key, pool)
            source = TriviaSource.OPENAI

        questions = self._unseen(pool, place_id, difficulty, excluded) if place_id else pool

        if len(questions) < threshold and source == TriviaSource.CACHE and place_id:
            logger.info(
                f"[TRIVIA] Cache exhausted for '{key}' ({len(questions)} unseen); regenerating once"
            )
            await self._caches.trivia_pool.delete(key)
            fresh = await self._generate_batch(grounding, difficulty, exclude_ids, request_count)
            await self._store(key, fresh)
            questions = self._unseen(fresh, place_id, difficulty, excluded) or fresh
            source = TriviaSource.OPENAI

        if len(questions) < threshold and not request.city_place_id:
            if not place_id or not questions:
                fallback = get_fallback_questions(request.city)
                if len(fallback) > len(questions):
                    questions = [shuffle_options(q, self._rng) for q in fallback]
                    source = TriviaSource.FALLBACK

        questions = enforce_answer_distribution(questions, self._rng)
        final = questions[:count]

        if request.city_place_id and not final:
            logger.warning(f"[TRIVIA] No usable questions for placeId '{place_id}'")
            raise QuizUnavailableError(f"No usable questions for {grounding.label}")

        ids: list[str] = []
        if place_id and source != TriviaSource.FALLBACK:
            ids = [question_id(place_id, difficulty.value, q.question) for q in final]
        pool_exhausted = len(excluded) > EXHAUSTION_THRESHOLD and len(final) < threshold

        logger.info(
            f"[TRIVIA] Result source={source.value} questions={len(final)} "
            f"label='{grounding.label}' placeId='{place_id}' exhausted={pool_exhausted}"
        )
        return QuizResponse(
            questions=final,
            question_ids=ids,
            city_label=grounding.label,
            city_place_id=place_id or None,
            pool_exhausted=pool_exhausted,
            source=source,
        )
