"""Unit tests for the suggestions flow."""

import httpx
import pytest

from braintrip.models import EnrichmentRecord, SuggestionsRequest
from braintrip.services.cache import CacheRegistry
from braintrip.services.enrichment import PLACEHOLDER_DESCRIPTION, EnrichmentService
from braintrip.services.geocoding import NominatimGeocodingService
from braintrip.services.places import GooglePlacesService
from braintrip.services.suggestions import SuggestionService
from tests.fakes import FakeClock, place, places_transport

HOTEL_LAT, HOTEL_LNG = 48.8566, 2.3522


def _pool_places() -> list[dict]:
    # Equal popularity so distance decides the order.
    return [
        place(f"p{i}", f"Sight {i}", lat=HOTEL_LAT + i * 0.01, lng=HOTEL_LNG)
        for i in range(8)
    ] + [place("far", "Mont Saint-Michel", lat=48.636, lng=-1.511)]


def _nominatim(found: bool) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if not found:
            return httpx.Response(200, json=[])
        return httpx.Response(200, json=[{"lat": str(HOTEL_LAT), "lon": str(HOTEL_LNG)}])

    return httpx.MockTransport(handler)


class TestSuggestionService:
    def setup_method(self) -> None:
        self.caches = CacheRegistry(clock=FakeClock())
        self.enrichment = EnrichmentService(None, self.caches)

    def _service(self, pool: list[dict] | None, hotel_found: bool = True) -> SuggestionService:
        if pool is None:
            places = GooglePlacesService(None, self.caches)
        else:
            places = GooglePlacesService(
                "key", self.caches, transport=places_transport({"top attractions": pool})
            )
        geocoder = NominatimGeocodingService(self.caches, transport=_nominatim(hotel_found))
        return SuggestionService(places, geocoder, self.enrichment)

    @pytest.mark.asyncio
    async def test_nearest_five_with_hotel(self) -> None:
        service = self._service(_pool_places())
        result = await service.generate(SuggestionsRequest(city="Paris", hotel_location="Hotel Lutetia"))

        titles = [s.title for s in result.suggestions]
        assert titles == ["Sight 0", "Sight 1", "Sight 2", "Sight 3", "Sight 4"]
        assert "Mont Saint-Michel" not in titles
        assert result.suggestions[0].distance_km == pytest.approx(0.0, abs=0.01)
        assert all(s.description == PLACEHOLDER_DESCRIPTION for s in result.suggestions)
        assert result.pending == result.suggestions

    @pytest.mark.asyncio
    async def test_next_page_uses_exclusions(self) -> None:
        service = self._service(_pool_places())
        first = await service.generate(SuggestionsRequest(city="Paris", hotel_location="Hotel Lutetia"))
        second = await service.generate(SuggestionsRequest(
            city="Paris",
            hotel_location="Hotel Lutetia",
            exclude=[s.title for s in first.suggestions],
            exclude_place_ids=[s.place_id for s in first.suggestions],
        ))
        assert [s.title for s in second.suggestions] == ["Sight 5", "Sight 6", "Sight 7"]

    @pytest.mark.asyncio
    async def test_without_hotel_far_places_stay(self) -> None:
        service = self._service(_pool_places(), hotel_found=False)
        result = await service.generate(SuggestionsRequest(city="Paris", hotel_location="Unknown Inn"))
        assert len(result.suggestions) == 5
        assert all(s.distance_km is None for s in result.suggestions)

    @pytest.mark.asyncio
    async def test_cached_enrichment_is_applied(self) -> None:
        record = EnrichmentRecord(description="A viewpoint.", fun_fact="Built in 1900 by Paris.")
        await self.caches.enrichment.set("p0", record)
        service = self._service(_pool_places())
        result = await service.generate(SuggestionsRequest(city="Paris", hotel_location="Hotel Lutetia"))

        first = result.suggestions[0]
        assert first.enriched
        assert first.description == "A viewpoint."
        assert first not in result.pending
        assert len(result.pending) == 4

    @pytest.mark.asyncio
    async def test_empty_pool_serves_curated(self) -> None:
        service = self._service(None)
        result = await service.generate(SuggestionsRequest(city="Paris"))
        assert result.suggestions[0].title == "Eiffel Tower"
        assert len(result.suggestions) == 5
        assert result.pending == []

    @pytest.mark.asyncio
    async def test_exhausted_pool_serves_curated_minus_exclusions(self) -> None:
        service = self._service(_pool_places())
        everything = [f"p{i}" for i in range(8)] + ["far"]
        result = await service.generate(SuggestionsRequest(
            city="Paris", exclude=["Eiffel Tower"], exclude_place_ids=everything
        ))
        titles = [s.title for s in result.suggestions]
        assert titles
        assert "Eiffel Tower" not in titles

    @pytest.mark.asyncio
    async def test_unknown_city_without_pool_is_empty(self) -> None:
        service = self._service(None)
        result = await service.generate(SuggestionsRequest(city="Atlantis"))
        assert result.suggestions == []

    def test_curated_helper_caps_at_five(self) -> None:
        service = self._service(None)
        assert len(service.curated("new york")) == 5
        assert service.curated("nowhere") == []
