"""Process-wide service wiring.

:class:`AppServices` is built once by the app lifespan and stored on
``app.state``; request handlers receive it through a dependency. Tests
build it directly with fake transports, a scripted model and a fixed
clock.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from braintrip.config import Settings
from braintrip.utils.cache import Clock

from .ai_reasoning import AIReasoningService, create_ai_service
from .cache import CacheRegistry, CacheService, RedisCacheService
from .enrichment import EnrichmentService
from .geocoding import NominatimGeocodingService
from .places import GooglePlacesService
from .suggestions import SuggestionService
from .trivia import TriviaService

logger = logging.getLogger(__name__)


@dataclass
class AppServices:
    caches: CacheRegistry
    places: GooglePlacesService
    geocoder: NominatimGeocodingService
    ai: Optional[AIReasoningService]
    trivia: TriviaService
    enrichment: EnrichmentService
    suggestions: SuggestionService

    @classmethod
    def build(
        cls,
        settings: Settings,
        *,
        clock: Clock = time.time,
        shared: Optional[CacheService] = None,
        ai_factory: Callable[[Settings], Optional[AIReasoningService]] = create_ai_service,
        places_transport: httpx.AsyncBaseTransport | None = None,
        geocode_transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ) -> "AppServices":
        if shared is None and settings.redis_url:
            shared = RedisCacheService(settings.redis_url)
            logger.info("[CACHE] Redis shared tier enabled")
        caches = CacheRegistry(clock=clock, shared=shared)

        places = GooglePlacesService(
            settings.google_places_api_key,
            caches,
            timeout=settings.places_timeout_seconds,
            transport=places_transport,
        )
        if not places.enabled:
            logger.warning("[PLACES] GOOGLE_PLACES_API_KEY not set; POI grounding disabled")
        geocoder = NominatimGeocodingService(
            caches, timeout=settings.places_timeout_seconds, transport=geocode_transport
        )
        ai = ai_factory(settings)
        enrichment = EnrichmentService(ai, caches)
        return cls(
            caches=caches,
            places=places,
            geocoder=geocoder,
            ai=ai,
            trivia=TriviaService(places, ai, caches, rng=rng),
            enrichment=enrichment,
            suggestions=SuggestionService(places, geocoder, enrichment),
        )

    async def close(self) -> None:
        await self.places.close()
        await self.geocoder.close()
        await self.caches.close()
