"""POI enrichment: a factual description and one fun fact per place.

Records are cached by place id for 30 days. Only answers the model
actually produced are cached; a failed call returns the generic
description without poisoning the cache, so a later request retries.
"""

import asyncio
import logging
from typing import Optional

from braintrip.models import EnrichmentRecord, Suggestion
from braintrip.services.ai_reasoning import AIReasoningService
from braintrip.services.cache import CacheRegistry
from braintrip.services.content_validator import is_valid_fun_fact

logger = logging.getLogger(__name__)

PLACEHOLDER_DESCRIPTION = "Loading details…"


def default_description(category: Optional[str], city: str) -> str:
    """``"A museum in Paris."``; the fallback when generation fails."""
    return f"A {(category or 'landmark').lower()} in {city or 'the city'}."


class EnrichmentService:
    def __init__(self, ai: Optional[AIReasoningService], caches: CacheRegistry) -> None:
        self._ai = ai
        self._caches = caches

    async def cached(self, place_id: Optional[str]) -> Optional[EnrichmentRecord]:
        if not place_id:
            return None
        return await self._caches.enrichment.get(place_id)

    async def enrich(
        self,
        city: str,
        name: str,
        category: Optional[str] = None,
        address: Optional[str] = None,
        place_id: Optional[str] = None,
    ) -> EnrichmentRecord:
        """Best-effort enrichment; never raises for upstream problems."""
        hit = await self.cached(place_id)
        if hit is not None:
            logger.info(f"[ENRICH] Cache HIT for {place_id}")
            return hit

        fallback = EnrichmentRecord(description=default_description(category, city), fun_fact="")
        if self._ai is None:
            return fallback

        result = await self._ai.describe_poi(city, name, category, address)
        if not result.ok or not isinstance(result.value, dict):
            logger.info(f"[ENRICH] No usable output for '{name}' in {city}")
            return fallback

        description = result.value.get("description")
        if not isinstance(description, str) or not description.strip():
            description = fallback.description
        fun_fact = result.value.get("funFact")
        if not isinstance(fun_fact, str) or not is_valid_fun_fact(fun_fact):
            if fun_fact:
                logger.info(f"[ENRICH] Rejected fun fact for '{name}': {fun_fact!r}")
            fun_fact = ""

        record = EnrichmentRecord(description=description.strip(), fun_fact=fun_fact.strip())
        if place_id:
            await self._caches.enrichment.set(place_id, record)
        logger.info(f"[ENRICH] Enriched '{name}' (funFact={'yes' if record.fun_fact else 'no'})")
        return record

    async def warm(self, city: str, suggestions: list[Suggestion]) -> None:
        """Enrich suggestions in the background so later requests hit the cache."""
        pending = [s for s in suggestions if s.place_id and not s.enriched]
        if not pending:
            return
        results = await asyncio.gather(
            *(self.enrich(city, s.title, s.category, s.address, s.place_id) for s in pending),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        for err in failures:
            logger.warning(f"[ENRICH] Background enrichment failed: {type(err).__name__}: {err}")
        logger.info(f"[ENRICH] Warmed {len(pending) - len(failures)}/{len(pending)} POIs for {city}")
