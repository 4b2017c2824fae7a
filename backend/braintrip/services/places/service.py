"""Google Places text-search service.

Grounds all generated content in real places:

1. ``resolve_city``: free-text city → canonical :class:`ResolvedCity` (top-1 hit)
2. ``get_city_context``: place id → up to 20 notable POIs for trivia prompts
3. ``get_pool``: city → larger categorised pool for suggestions

Every provider call is bounded by a timeout and is a soft failure: a
network error, timeout, non-2xx status or empty result gives ``None`` or
an empty list, never an exception. Without an API key the service
answers from nothing (empty context, empty pool) instead of failing.
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from braintrip.models import CityContext, ContextPOI, PoolPOI, ResolvedCity
from braintrip.services.cache import CacheRegistry

from .categories import is_generic_name, map_category

logger = logging.getLogger(__name__)

MAX_CONTEXT_POIS = 20
CONTEXT_PAGE_SIZE = 10
POOL_PAGE_SIZE = 20
MIN_NAME_LENGTH = 3

RESOLVE_FIELDS = (
    "places.id,places.displayName,places.formattedAddress,"
    "places.location,places.addressComponents"
)
CONTEXT_FIELDS = "places.id,places.displayName,places.types,places.rating,places.userRatingCount"
POOL_FIELDS = (
    "places.id,places.displayName,places.formattedAddress,places.location,"
    "places.rating,places.userRatingCount,places.types"
)


# ── Provider response shapes (every field optional) ───────────────────

class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LocalizedText(_ProviderModel):
    text: str = ""


class LatLng(_ProviderModel):
    latitude: float = 0.0
    longitude: float = 0.0


class AddressComponent(_ProviderModel):
    long_text: str = Field(default="", alias="longText")
    short_text: str = Field(default="", alias="shortText")
    types: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return self.long_text or self.short_text


class PlaceResult(_ProviderModel):
    id: str = ""
    display_name: Optional[LocalizedText] = Field(default=None, alias="displayName")
    formatted_address: str = Field(default="", alias="formattedAddress")
    location: Optional[LatLng] = None
    address_components: list[AddressComponent] = Field(
        default_factory=list, alias="addressComponents"
    )
    types: list[str] = Field(default_factory=list)
    rating: float = 0.0
    user_rating_count: int = Field(default=0, alias="userRatingCount")

    @property
    def name(self) -> str:
        return self.display_name.text if self.display_name else ""


class SearchTextResponse(_ProviderModel):
    places: list[PlaceResult] = Field(default_factory=list)


# ── Pure helpers ──────────────────────────────────────────────────────

def short_label(label: str) -> str:
    """``"Paris, France"`` → ``"Paris"``."""
    return label.split(",")[0].strip()


def parse_resolved_city(place: PlaceResult, city_text: str) -> ResolvedCity:
    """Build a :class:`ResolvedCity` from the top text-search hit.

    Country/region come from structured address components when present,
    otherwise from the comma-separated formatted address (country = last
    segment, region = second-to-last once there are at least three).
    """
    address = place.formatted_address or city_text
    parts = [p.strip() for p in address.split(",")]

    country = ""
    region = ""
    for comp in place.address_components:
        if "country" in comp.types:
            country = comp.text
        if "administrative_area_level_1" in comp.types:
            region = comp.text
    if not country and len(parts) >= 2:
        country = parts[-1]
    if not region and len(parts) >= 3:
        region = parts[-2]

    label = ", ".join(parts[:3]) if len(parts) >= 2 else address
    location = place.location or LatLng()
    return ResolvedCity(
        label=label,
        external_id=place.id,
        lat=location.latitude,
        lng=location.longitude,
        country=country,
        region=region,
    )


def merge_context_pois(batches: list[list[ContextPOI]]) -> list[ContextPOI]:
    """Concatenate, drop short names, dedupe by id (first wins), cap at 20."""
    merged: dict[str, ContextPOI] = {}
    for poi in (p for batch in batches for p in batch):
        if len(poi.name) < MIN_NAME_LENGTH or poi.external_id in merged:
            continue
        merged[poi.external_id] = poi
    return list(merged.values())[:MAX_CONTEXT_POIS]


def merge_pool(batches: list[list[PoolPOI]]) -> list[PoolPOI]:
    """Concatenate and dedupe pool POIs by id (first wins)."""
    merged: dict[str, PoolPOI] = {}
    for poi in (p for batch in batches for p in batch):
        key = poi.external_id or poi.title.lower().strip()
        if key not in merged:
            merged[key] = poi
    return list(merged.values())


def pool_queries(city: str) -> list[str]:
    return [
        f"top attractions in {city}",
        f"best landmarks in {city}",
        f"best museums in {city}",
        f"best parks and gardens in {city}",
        f"best restaurants in {city}",
        f"best viewpoints in {city}",
    ]


def context_queries(label: str) -> list[str]:
    name = short_label(label)
    return [
        f"{name} top attractions landmarks",
        f"{name} museums parks historical sites",
    ]


class GooglePlacesService:
    """Google Places API (v1) text search with per-domain caching."""

    SEARCH_TEXT_URL = "https://places.googleapis.com/v1/places:searchText"

    def __init__(
        self,
        api_key: str | None,
        caches: CacheRegistry,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._caches = caches
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=12, max_keepalive_connections=6),
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _search_text(
        self, query: str, field_mask: str, page_size: int
    ) -> list[PlaceResult]:
        """One text-search call. Any failure → ``[]``."""
        if not self._api_key:
            return []
        try:
            response = await self._get_client().post(
                self.SEARCH_TEXT_URL,
                headers={
                    "Content-Type": "application/json",
                    "X-Goog-Api-Key": self._api_key,
                    "X-Goog-FieldMask": field_mask,
                },
                json={"textQuery": query, "pageSize": page_size, "languageCode": "en"},
            )
            response.raise_for_status()
            return SearchTextResponse.model_validate(response.json()).places
        except httpx.TimeoutException:
            logger.info(f"[PLACES] Timeout after {self._timeout}s for '{query}'")
        except httpx.HTTPStatusError as e:
            logger.warning(f"[PLACES] API error {e.response.status_code} for '{query}'")
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"[PLACES] Search error for '{query}': {type(e).__name__}: {e}")
        return []

    # ── City resolver ─────────────────────────────────────────────────

    async def resolve_city(self, city_text: str) -> ResolvedCity | None:
        """Resolve free text to a canonical city, or ``None``.

        ``None`` means "proceed without grounding", never an error.
        """
        cache_key = city_text.lower().strip()
        cached = await self._caches.city_resolve.get(cache_key)
        if cached is not None:
            logger.info(f"[PLACES] Resolve cache HIT for '{cache_key}'")
            return cached
        if not self._api_key:
            return None

        places = await self._search_text(city_text, RESOLVE_FIELDS, page_size=1)
        if not places:
            logger.info(f"[PLACES] Could not resolve '{city_text}'")
            return None

        resolved = parse_resolved_city(places[0], city_text)
        await self._caches.city_resolve.set(cache_key, resolved)
        logger.info(f"[PLACES] Resolved '{city_text}' → {resolved.label} ({resolved.external_id})")
        return resolved

    # ── POI context fetcher ───────────────────────────────────────────

    async def _context_query(self, query: str) -> list[ContextPOI]:
        places = await self._search_text(query, CONTEXT_FIELDS, page_size=CONTEXT_PAGE_SIZE)
        return [
            ContextPOI(
                external_id=p.id,
                name=p.name,
                types=p.types,
                rating=p.rating,
                rating_count=p.user_rating_count,
            )
            for p in places
        ]

    async def get_city_context(self, place_id: str, label: str) -> CityContext:
        """Up to 20 notable POIs for a resolved city, from two parallel queries."""
        cached = await self._caches.city_context.get(place_id)
        if cached is not None:
            logger.info(f"[PLACES] Context cache HIT for {place_id}")
            return cached
        if not self._api_key:
            return CityContext(label=label, external_id=place_id, pois=[])

        batches = await asyncio.gather(*(self._context_query(q) for q in context_queries(label)))
        context = CityContext(
            label=label,
            external_id=place_id,
            pois=merge_context_pois(list(batches)),
        )
        if context.pois:
            await self._caches.city_context.set(place_id, context)
        logger.info(f"[PLACES] Context for {label}: {len(context.pois)} POIs")
        return context

    # ── Places pool fetcher ───────────────────────────────────────────

    async def _pool_query(self, query: str) -> list[PoolPOI]:
        places = await self._search_text(query, POOL_FIELDS, page_size=POOL_PAGE_SIZE)
        pois: list[PoolPOI] = []
        for p in places:
            name = p.name
            if len(name) < MIN_NAME_LENGTH or is_generic_name(name):
                continue
            location = p.location or LatLng()
            pois.append(PoolPOI(
                external_id=p.id,
                title=name,
                lat=location.latitude,
                lng=location.longitude,
                category=map_category(p.types),
                address=p.formatted_address,
                rating=p.rating,
                rating_count=p.user_rating_count,
            ))
        return pois

    async def get_pool(self, city: str) -> list[PoolPOI]:
        """Categorised, deduplicated POI pool for suggestions (1h cache)."""
        cache_key = city.lower().strip()
        cached = await self._caches.pool.get(cache_key)
        if cached is not None:
            logger.info(f"[POOL] Cache HIT for '{cache_key}' ({len(cached)} places)")
            return cached
        if not self._api_key:
            return []

        batches = await asyncio.gather(*(self._pool_query(q) for q in pool_queries(city)))
        pool = merge_pool(list(batches))
        if pool:
            await self._caches.pool.set(cache_key, pool)
        logger.info(f"[POOL] Fetched {len(pool)} places for '{city}'")
        return pool
