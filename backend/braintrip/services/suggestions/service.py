"""Suggestions: ranked, paginated places for the itinerary builder.

Each call returns at most five places the caller has not seen. Places
with a cached enrichment record come back complete; the rest carry a
placeholder description and are returned as ``pending`` so the caller
can enrich them after responding.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from braintrip.models import Coordinates, Suggestion, SuggestionsRequest
from braintrip.services.content_validator import validate_suggestions
from braintrip.services.enrichment import PLACEHOLDER_DESCRIPTION, EnrichmentService
from braintrip.services.fallback import get_curated_places
from braintrip.services.geocoding import NominatimGeocodingService
from braintrip.services.places import GooglePlacesService

from .ranking import BATCH_SIZE, RankedPOI, rank_pool, select_batch

logger = logging.getLogger(__name__)


@dataclass
class SuggestionBatch:
    suggestions: list[Suggestion] = field(default_factory=list)
    pending: list[Suggestion] = field(default_factory=list)


class SuggestionService:
    def __init__(
        self,
        places: GooglePlacesService,
        geocoder: NominatimGeocodingService,
        enrichment: EnrichmentService,
    ) -> None:
        self._places = places
        self._geocoder = geocoder
        self._enrichment = enrichment

    def curated(
        self,
        city: str,
        exclude_titles: Iterable[str] = (),
        exclude_place_ids: Iterable[str] = (),
    ) -> list[Suggestion]:
        """Curated places for ``city`` minus exclusions, top five."""
        places = validate_suggestions(get_curated_places(city), exclude_titles, exclude_place_ids)
        return places[:BATCH_SIZE]

    async def _hotel_coords(self, hotel: Optional[str], city: str) -> Optional[Coordinates]:
        if not hotel or not hotel.strip():
            return None
        return await self._geocoder.geocode_hotel(hotel.strip(), city)

    async def _to_suggestion(self, ranked: RankedPOI) -> Suggestion:
        poi = ranked.poi
        suggestion = Suggestion(
            title=poi.title,
            description=PLACEHOLDER_DESCRIPTION,
            category=poi.category.value,
            fun_fact="",
            address=poi.address or None,
            place_id=poi.external_id or None,
            lat=poi.lat,
            lng=poi.lng,
            distance_km=ranked.distance_km,
            popularity_score=ranked.popularity_score,
        )
        record = await self._enrichment.cached(poi.external_id)
        if record is not None:
            suggestion.apply_enrichment(record)
        return suggestion

    async def generate(self, request: SuggestionsRequest) -> SuggestionBatch:
        city = request.city
        hotel = await self._hotel_coords(request.hotel_location, city)

        pool = await self._places.get_pool(city)
        if not pool:
            logger.info(f"[POOL] Empty pool for '{city}'; serving curated places")
            return SuggestionBatch(
                suggestions=self.curated(city, request.exclude, request.exclude_place_ids)
            )

        ranked = rank_pool(pool, hotel)
        batch = select_batch(ranked, request.exclude, request.exclude_place_ids)
        if not batch:
            logger.info(f"[POOL] Pool for '{city}' exhausted by exclusions; serving curated places")
            return SuggestionBatch(
                suggestions=self.curated(city, request.exclude, request.exclude_place_ids)
            )

        suggestions = [await self._to_suggestion(r) for r in batch]
        suggestions = validate_suggestions(suggestions, request.exclude, request.exclude_place_ids)
        pending = [s for s in suggestions if not s.enriched]
        logger.info(
            f"[POOL] {len(suggestions)} suggestions for '{city}' "
            f"({len(pending)} pending enrichment, hotel={'yes' if hotel else 'no'})"
        )
        return SuggestionBatch(suggestions=suggestions, pending=pending)
