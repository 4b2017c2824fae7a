"""Unit tests for POI enrichment."""

import json

import pytest

from braintrip.models import EnrichmentRecord, Suggestion
from braintrip.services.cache import CacheRegistry
from braintrip.services.enrichment import EnrichmentService, default_description
from tests.fakes import FakeClock, ScriptedAI

GOOD = json.dumps({
    "description": "A Gothic royal chapel inside the Palais de la Cité.",
    "funFact": "Its fifteen stained-glass windows were installed by 1248.",
})


class TestDefaultDescription:
    def test_with_category(self) -> None:
        assert default_description("Museum", "Paris") == "A museum in Paris."

    def test_without_category_or_city(self) -> None:
        assert default_description(None, "") == "A landmark in the city."


class TestEnrichmentService:
    def setup_method(self) -> None:
        self.clock = FakeClock()
        self.caches = CacheRegistry(clock=self.clock)

    @pytest.mark.asyncio
    async def test_enrich_and_cache(self) -> None:
        ai = ScriptedAI(GOOD)
        service = EnrichmentService(ai, self.caches)
        record = await service.enrich("Paris", "Sainte-Chapelle", "Culture", place_id="p1")
        assert record.description.startswith("A Gothic royal chapel")
        assert record.fun_fact == "Its fifteen stained-glass windows were installed by 1248."

        again = await service.enrich("Paris", "Sainte-Chapelle", "Culture", place_id="p1")
        assert again == record
        assert ai.calls == 1
        assert await service.cached("p1") == record

    @pytest.mark.asyncio
    async def test_cache_lasts_thirty_days(self) -> None:
        ai = ScriptedAI(GOOD)
        service = EnrichmentService(ai, self.caches)
        await service.enrich("Paris", "Sainte-Chapelle", place_id="p1")
        self.clock.advance(29 * 24 * 3600)
        assert await service.cached("p1") is not None
        self.clock.advance(2 * 24 * 3600)
        assert await service.cached("p1") is None

    @pytest.mark.asyncio
    async def test_without_place_id_nothing_is_cached(self) -> None:
        ai = ScriptedAI(GOOD)
        service = EnrichmentService(ai, self.caches)
        await service.enrich("Paris", "Sainte-Chapelle")
        await service.enrich("Paris", "Sainte-Chapelle")
        assert ai.calls == 2

    @pytest.mark.asyncio
    async def test_marketing_fun_fact_is_blanked(self) -> None:
        ai = ScriptedAI(json.dumps({
            "description": "A chapel.",
            "funFact": "A must-visit destination for visitors since 1248.",
        }))
        record = await EnrichmentService(ai, self.caches).enrich("Paris", "Sainte-Chapelle", place_id="p1")
        assert record.description == "A chapel."
        assert record.fun_fact == ""

    @pytest.mark.asyncio
    async def test_missing_description_uses_default(self) -> None:
        ai = ScriptedAI(json.dumps({"funFact": "Its spire was rebuilt in 1853 by Lassus."}))
        record = await EnrichmentService(ai, self.caches).enrich("Paris", "Sainte-Chapelle", "Culture")
        assert record.description == "A culture in Paris."
        assert record.fun_fact == "Its spire was rebuilt in 1853 by Lassus."

    @pytest.mark.asyncio
    async def test_model_failure_gives_default_and_is_not_cached(self) -> None:
        ai = ScriptedAI(TimeoutError(), GOOD)
        service = EnrichmentService(ai, self.caches)
        first = await service.enrich("Paris", "Pont Neuf", "Landmark", place_id="p9")
        assert first == EnrichmentRecord(description="A landmark in Paris.", fun_fact="")
        assert await service.cached("p9") is None

        second = await service.enrich("Paris", "Pont Neuf", "Landmark", place_id="p9")
        assert second.fun_fact.endswith("1248.")

    @pytest.mark.asyncio
    async def test_no_model_configured(self) -> None:
        record = await EnrichmentService(None, self.caches).enrich("Rome", "Pantheon", "Landmark")
        assert record.description == "A landmark in Rome."

    @pytest.mark.asyncio
    async def test_warm_enriches_pending_only(self) -> None:
        ai = ScriptedAI(GOOD)
        service = EnrichmentService(ai, self.caches)
        suggestions = [
            Suggestion(title="A", description="Loading details…", category="Culture", place_id="a"),
            Suggestion(title="B", description="Loading details…", category="Culture", place_id="b"),
            Suggestion(title="C", description="Done", category="Culture", place_id="c", enriched=True),
            Suggestion(title="D", description="Loading details…", category="Culture"),
        ]
        await service.warm("Paris", suggestions)
        assert ai.calls == 2
        assert await service.cached("a") is not None
        assert await service.cached("b") is not None
        assert await service.cached("c") is None
