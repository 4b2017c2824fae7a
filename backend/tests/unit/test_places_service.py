"""Unit tests for the Google Places service (resolver, context, pool)."""

import httpx
import pytest

from braintrip.models import Category, ContextPOI, PoolPOI
from braintrip.services.cache import CacheRegistry
from braintrip.services.places import (
    GooglePlacesService,
    PlaceResult,
    is_generic_name,
    map_category,
    merge_context_pois,
    merge_pool,
    parse_resolved_city,
)
from tests.fakes import FakeClock, place, places_transport


class TestCategoryMapping:
    def test_priority_order(self) -> None:
        # museum beats restaurant; restaurant beats park
        assert map_category(["restaurant", "museum"]) == Category.CULTURE
        assert map_category(["park", "cafe"]) == Category.FOOD

    def test_each_category(self) -> None:
        assert map_category(["art_gallery"]) == Category.CULTURE
        assert map_category(["bakery"]) == Category.FOOD
        assert map_category(["natural_feature"]) == Category.NATURE
        assert map_category(["department_store"]) == Category.SHOPPING
        assert map_category(["stadium"]) == Category.ENTERTAINMENT
        assert map_category(["mosque"]) == Category.LANDMARK

    def test_unmatched_defaults_to_landmark(self) -> None:
        assert map_category([]) == Category.LANDMARK
        assert map_category(["lodging"]) == Category.LANDMARK

    def test_generic_names(self) -> None:
        assert is_generic_name("Downtown")
        assert is_generic_name("  the park ")
        assert not is_generic_name("Louvre Museum")


class TestParseResolvedCity:
    def test_structured_components_win(self) -> None:
        result = PlaceResult.model_validate({
            "id": "ChIJ1",
            "formattedAddress": "Paris, France",
            "location": {"latitude": 48.85, "longitude": 2.35},
            "addressComponents": [
                {"longText": "France", "shortText": "FR", "types": ["country", "political"]},
                {"longText": "Île-de-France", "types": ["administrative_area_level_1"]},
            ],
        })
        city = parse_resolved_city(result, "paris")
        assert city.label == "Paris, France"
        assert city.external_id == "ChIJ1"
        assert city.country == "France"
        assert city.region == "Île-de-France"
        assert (city.lat, city.lng) == (48.85, 2.35)

    def test_comma_fallback(self) -> None:
        result = PlaceResult.model_validate({
            "id": "ChIJ2",
            "formattedAddress": "Springfield, Sangamon County, Illinois, USA",
        })
        city = parse_resolved_city(result, "springfield")
        assert city.country == "USA"
        assert city.region == "Illinois"
        assert city.label == "Springfield, Sangamon County, Illinois"

    def test_two_segments_have_no_region(self) -> None:
        result = PlaceResult.model_validate({"id": "x", "formattedAddress": "Tokyo, Japan"})
        city = parse_resolved_city(result, "tokyo")
        assert city.country == "Japan"
        assert city.region == ""

    def test_single_segment_uses_raw_address(self) -> None:
        result = PlaceResult.model_validate({"id": "x", "formattedAddress": "Singapore"})
        city = parse_resolved_city(result, "sg")
        assert city.label == "Singapore"
        assert city.country == ""

    def test_missing_address_uses_input(self) -> None:
        city = parse_resolved_city(PlaceResult.model_validate({"id": "x"}), "Atlantis")
        assert city.label == "Atlantis"
        assert (city.lat, city.lng) == (0.0, 0.0)


class TestMerging:
    def test_context_dedupes_by_id_first_wins(self) -> None:
        a = ContextPOI(external_id="1", name="Louvre")
        b = ContextPOI(external_id="1", name="Louvre Museum")
        c = ContextPOI(external_id="2", name="Orsay")
        assert merge_context_pois([[a, c], [b]]) == [a, c]

    def test_context_drops_short_names_and_caps_at_20(self) -> None:
        batch = [ContextPOI(external_id=str(i), name=f"Place {i}") for i in range(30)]
        batch.insert(0, ContextPOI(external_id="short", name="AB"))
        merged = merge_context_pois([batch])
        assert len(merged) == 20
        assert all(p.external_id != "short" for p in merged)

    def test_pool_dedupes_by_id(self) -> None:
        a = PoolPOI(external_id="1", title="Louvre")
        b = PoolPOI(external_id="1", title="Louvre again")
        c = PoolPOI(external_id="2", title="Orsay")
        assert merge_pool([[a], [b, c]]) == [a, c]


class TestGooglePlacesService:
    def setup_method(self) -> None:
        self.clock = FakeClock()
        self.caches = CacheRegistry(clock=self.clock)

    def _service(self, transport: httpx.MockTransport, api_key: str | None = "test-key") -> GooglePlacesService:
        return GooglePlacesService(api_key, self.caches, transport=transport)

    @pytest.mark.asyncio
    async def test_resolve_city_and_cache(self) -> None:
        calls: list[str] = []
        paris = place("ChIJParis", "Paris", address="Paris, France")
        service = self._service(places_transport({"Paris": [paris]}, calls))

        city = await service.resolve_city("  Paris ")
        assert city is not None
        assert city.external_id == "ChIJParis"
        assert city.label == "Paris, France"

        again = await service.resolve_city("paris")
        assert again == city
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_resolve_sends_key_and_field_mask(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"places": [place("id1", "Rome", address="Rome, Italy")]})

        service = self._service(httpx.MockTransport(handler))
        await service.resolve_city("Rome")
        assert seen[0].headers["X-Goog-Api-Key"] == "test-key"
        assert "places.addressComponents" in seen[0].headers["X-Goog-FieldMask"]
        assert seen[0].url == httpx.URL(GooglePlacesService.SEARCH_TEXT_URL)

    @pytest.mark.asyncio
    async def test_resolve_soft_failures_return_none(self) -> None:
        def server_error(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "boom"})

        def timeout(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        def garbage(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"not json")

        for handler in (server_error, timeout, garbage):
            service = self._service(httpx.MockTransport(handler))
            assert await service.resolve_city("Paris") is None

    @pytest.mark.asyncio
    async def test_resolve_empty_result_returns_none(self) -> None:
        service = self._service(places_transport({}))
        assert await service.resolve_city("Nowhere") is None

    @pytest.mark.asyncio
    async def test_no_api_key_degrades_gracefully(self) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected without a key")

        service = self._service(httpx.MockTransport(fail), api_key=None)
        assert not service.enabled
        assert await service.resolve_city("Paris") is None
        context = await service.get_city_context("ChIJ1", "Paris, France")
        assert context.pois == []
        assert context.label == "Paris, France"
        assert await service.get_pool("Paris") == []

    @pytest.mark.asyncio
    async def test_context_merges_two_parallel_queries(self) -> None:
        calls: list[str] = []
        transport = places_transport(
            {
                "top attractions landmarks": [
                    place("p1", "Eiffel Tower", rating=4.7, count=300000),
                    place("p2", "Louvre Museum"),
                ],
                "museums parks historical sites": [
                    place("p2", "Louvre Museum"),
                    place("p3", "Jardin du Luxembourg"),
                    place("p4", "Ab"),
                ],
            },
            calls,
        )
        service = self._service(transport)
        context = await service.get_city_context("ChIJParis", "Paris, Île-de-France, France")

        assert sorted(calls) == [
            "Paris museums parks historical sites",
            "Paris top attractions landmarks",
        ]
        assert [p.external_id for p in context.pois] == ["p1", "p2", "p3"]
        assert context.pois[0].rating_count == 300000
        assert context.poi_names == ["Eiffel Tower", "Louvre Museum", "Jardin du Luxembourg"]

        await service.get_city_context("ChIJParis", "Paris")
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_context_one_failed_query_keeps_the_other(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if b"museums" in request.content:
                raise httpx.ConnectError("down", request=request)
            return httpx.Response(200, json={"places": [place("p1", "Eiffel Tower")]})

        service = self._service(httpx.MockTransport(handler))
        context = await service.get_city_context("ChIJParis", "Paris")
        assert context.poi_names == ["Eiffel Tower"]

    @pytest.mark.asyncio
    async def test_empty_context_is_not_cached(self) -> None:
        calls: list[str] = []
        service = self._service(places_transport({}, calls))
        await service.get_city_context("ChIJ1", "Paris")
        await service.get_city_context("ChIJ1", "Paris")
        assert len(calls) == 4

    @pytest.mark.asyncio
    async def test_pool_six_queries_filters_and_categorises(self) -> None:
        calls: list[str] = []
        transport = places_transport(
            {
                "top attractions": [place("p1", "Eiffel Tower"), place("g1", "Downtown")],
                "best museums": [place("p2", "Louvre Museum", types=["museum"])],
                "best restaurants": [
                    place("p3", "Le Comptoir", types=["restaurant"]),
                    place("p1", "Eiffel Tower"),
                ],
                "parks and gardens": [place("p4", "Parc Monceau", types=["park"])],
            },
            calls,
        )
        service = self._service(transport)
        pool = await service.get_pool("Paris")

        assert len(calls) == 6
        by_id = {p.external_id: p for p in pool}
        assert set(by_id) == {"p1", "p2", "p3", "p4"}
        assert by_id["p2"].category == Category.CULTURE
        assert by_id["p3"].category == Category.FOOD
        assert by_id["p4"].category == Category.NATURE
        assert by_id["p1"].category == Category.LANDMARK

        cached = await service.get_pool(" PARIS ")
        assert cached == pool
        assert len(calls) == 6

    @pytest.mark.asyncio
    async def test_pool_expires_after_an_hour(self) -> None:
        calls: list[str] = []
        service = self._service(places_transport({"top attractions": [place("p1", "Eiffel Tower")]}, calls))
        await service.get_pool("Paris")
        self.clock.advance(3600)
        await service.get_pool("Paris")
        assert len(calls) == 12

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self) -> None:
        service = self._service(places_transport({}))
        await service.get_pool("Paris")
        await service.close()
        await service.close()
