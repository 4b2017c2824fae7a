"""Unit tests for trivia orchestration."""

import random

import pytest

from braintrip.models import Difficulty, QuizRequest, TriviaSource
from braintrip.services.cache import CacheRegistry
from braintrip.services.fallback import CURATED_QUESTIONS
from braintrip.services.places import GooglePlacesService
from braintrip.services.trivia import (
    QuizUnavailableError,
    TriviaService,
    request_count_for,
    trivia_cache_key,
)
from braintrip.utils.hashing import question_id
from tests.fakes import FakeClock, ScriptedAI, make_question, place, places_transport, trivia_json


def batch(prefix: str, n: int = 8) -> str:
    return trivia_json(*(make_question(f"{prefix} question {i} about the Eiffel Tower?") for i in range(n)))


def paris_places(caches: CacheRegistry) -> GooglePlacesService:
    transport = places_transport({
        "top attractions landmarks": [place("p1", "Eiffel Tower"), place("p2", "Louvre Museum")],
        "museums parks historical sites": [place("p3", "Musée d'Orsay")],
        "Paris": [place("ChIJParis", "Paris", address="Paris, France")],
    })
    return GooglePlacesService("key", caches, transport=transport)


class TestHelpers:
    def test_request_count_doubles_under_heavy_exclusion(self) -> None:
        assert request_count_for(8, 10) == 8
        assert request_count_for(8, 11) == 16
        assert request_count_for(10, 40) == 16
        assert request_count_for(3, 11) == 6

    def test_cache_key(self) -> None:
        assert trivia_cache_key("ChIJ1", "Paris", Difficulty.STANDARD) == "ChIJ1|standard"
        assert trivia_cache_key("", "  Paris ", Difficulty.CHALLENGE) == "paris|challenge"


class TestTriviaService:
    def setup_method(self) -> None:
        self.caches = CacheRegistry(clock=FakeClock())
        self.rng = random.Random(11)

    def _service(self, ai, places: GooglePlacesService | None = None) -> TriviaService:
        places = places or GooglePlacesService(None, self.caches)
        return TriviaService(places, ai, self.caches, rng=self.rng)

    @pytest.mark.asyncio
    async def test_grounded_generation_then_cache(self) -> None:
        ai = ScriptedAI(batch("First"))
        service = self._service(ai, paris_places(self.caches))

        first = await service.generate(QuizRequest(city="Paris"))
        assert first.source == TriviaSource.OPENAI
        assert first.city_label == "Paris, France"
        assert first.city_place_id == "ChIJParis"
        assert len(first.questions) == 8
        assert first.question_ids == [
            question_id("ChIJParis", "standard", q.question) for q in first.questions
        ]
        assert "- Eiffel Tower (rating: 4.5, reviews: 1000)" in ai.prompts[0]

        second = await service.generate(QuizRequest(city="paris"))
        assert second.source == TriviaSource.CACHE
        assert ai.calls == 1
        assert {q.question for q in second.questions} == {q.question for q in first.questions}

    @pytest.mark.asyncio
    async def test_explicit_place_id_skips_resolution(self) -> None:
        ai = ScriptedAI(batch("Lyon"))
        service = self._service(ai)
        response = await service.generate(
            QuizRequest(city="lyon", city_place_id="ChIJLyon", city_label="Lyon, France")
        )
        assert response.city_place_id == "ChIJLyon"
        assert response.city_label == "Lyon, France"
        assert "about Lyon, France" in ai.prompts[0]

        again = await service.generate(
            QuizRequest(city="something else", city_place_id="ChIJLyon", city_label="Lyon, France")
        )
        assert again.source == TriviaSource.CACHE

    @pytest.mark.asyncio
    async def test_count_slices_the_pool(self) -> None:
        service = self._service(ScriptedAI(batch("Nice", 10)))
        response = await service.generate(QuizRequest(city="Nice", city_place_id="ChIJNice", count=5))
        assert len(response.questions) == 5
        assert len(response.question_ids) == 5

    @pytest.mark.asyncio
    async def test_seen_questions_trigger_one_regeneration(self) -> None:
        ai = ScriptedAI(batch("Old"), batch("New"))
        service = self._service(ai)
        request = QuizRequest(city="Lyon", city_place_id="ChIJLyon")

        first = await service.generate(request)
        second = await service.generate(
            request.model_copy(update={"exclude_question_ids": first.question_ids})
        )

        assert ai.calls == 2
        assert second.source == TriviaSource.OPENAI
        assert len(second.questions) == 8
        assert not set(second.question_ids) & set(first.question_ids)
        assert all(q.question.startswith("New") for q in second.questions)

    @pytest.mark.asyncio
    async def test_regeneration_happens_only_once(self) -> None:
        ai = ScriptedAI(batch("Same"))
        service = self._service(ai)
        request = QuizRequest(city="Lyon", city_place_id="ChIJLyon")

        first = await service.generate(request)
        second = await service.generate(
            request.model_copy(update={"exclude_question_ids": first.question_ids})
        )
        assert ai.calls == 2
        # Every fresh question was already seen: repeats beat an empty quiz.
        assert len(second.questions) == 8

    @pytest.mark.asyncio
    async def test_model_failure_without_place_id_serves_curated(self) -> None:
        service = self._service(ScriptedAI("not json"))
        response = await service.generate(QuizRequest(city="Paris"))
        assert response.source == TriviaSource.FALLBACK
        assert response.question_ids == []
        assert len(response.questions) == len(CURATED_QUESTIONS["paris"])
        curated = {q.question for q in CURATED_QUESTIONS["paris"]}
        assert {q.question for q in response.questions} == curated

    @pytest.mark.asyncio
    async def test_no_model_unknown_city_serves_generic(self) -> None:
        service = self._service(None)
        response = await service.generate(QuizRequest(city="Reykjavik"))
        assert response.source == TriviaSource.FALLBACK
        assert len(response.questions) == 5
        assert "Reykjavik" in response.questions[0].question

    @pytest.mark.asyncio
    async def test_resolved_city_with_no_questions_falls_back(self) -> None:
        ai = ScriptedAI(RuntimeError("provider down"))
        service = self._service(ai, paris_places(self.caches))
        response = await service.generate(QuizRequest(city="Paris"))
        assert response.source == TriviaSource.FALLBACK
        assert response.city_place_id == "ChIJParis"
        assert response.question_ids == []

    @pytest.mark.asyncio
    async def test_explicit_place_id_with_no_questions_is_unavailable(self) -> None:
        service = self._service(ScriptedAI("[]"))
        with pytest.raises(QuizUnavailableError):
            await service.generate(QuizRequest(city="Paris", city_place_id="ChIJParis"))

    @pytest.mark.asyncio
    async def test_small_batches_are_not_cached(self) -> None:
        ai = ScriptedAI(batch("Tiny", 3))
        service = self._service(ai)
        request = QuizRequest(city="Lyon", city_place_id="ChIJLyon")
        first = await service.generate(request)
        assert len(first.questions) == 3
        await service.generate(request)
        assert ai.calls == 2

    @pytest.mark.asyncio
    async def test_heavy_exclusion_asks_for_more(self) -> None:
        ai = ScriptedAI(batch("Wide", 16))
        service = self._service(ai)
        exclude = [f"seen{i}" for i in range(11)]
        response = await service.generate(
            QuizRequest(city="Lyon", city_place_id="ChIJLyon", exclude_question_ids=exclude)
        )
        assert "Generate exactly 16 trivia questions" in ai.prompts[0]
        assert len(response.questions) == 8

    @pytest.mark.asyncio
    async def test_pool_exhausted_flag(self) -> None:
        ai = ScriptedAI(batch("Old"), batch("Scraps", 2))
        service = self._service(ai)
        request = QuizRequest(city="Lyon", city_place_id="ChIJLyon")
        first = await service.generate(request)
        assert not first.pool_exhausted

        exclude = first.question_ids + [f"older{i}" for i in range(30)]
        second = await service.generate(request.model_copy(update={"exclude_question_ids": exclude}))
        assert len(second.questions) == 2
        assert second.pool_exhausted

    @pytest.mark.asyncio
    async def test_difficulties_have_separate_pools(self) -> None:
        ai = ScriptedAI(batch("Easy"), batch("Hard"))
        service = self._service(ai)
        standard = await service.generate(QuizRequest(city="Lyon", city_place_id="ChIJLyon"))
        challenge = await service.generate(
            QuizRequest(city="Lyon", city_place_id="ChIJLyon", difficulty=Difficulty.CHALLENGE)
        )
        assert ai.calls == 2
        assert challenge.source == TriviaSource.OPENAI
        assert standard.question_ids != challenge.question_ids

    def test_fallback_response_shape(self) -> None:
        response = self._service(None).fallback_response("Rome")
        assert response.source == TriviaSource.FALLBACK
        assert response.city_label == "Rome"
        assert response.question_ids == []
        assert len(response.questions) == len(CURATED_QUESTIONS["rome"])
