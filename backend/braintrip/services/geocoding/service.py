"""Nominatim geocoding for hotel locations and the geocode endpoint.

Results are cached per lowercased address, including misses, so a
hotel that cannot be found is not looked up again on every page of
suggestions.
"""

import logging

import httpx

from braintrip.models import Coordinates
from braintrip.services.cache import CacheRegistry

logger = logging.getLogger(__name__)


class GeocodingTimeout(Exception):
    """Raised by :meth:`NominatimGeocodingService.lookup` when Nominatim times out."""


class NominatimGeocodingService:
    """OpenStreetMap Nominatim search, top-1 result."""

    NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
    HEADERS = {"User-Agent": "BrainTrip/1.0"}

    def __init__(
        self,
        caches: CacheRegistry,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._caches = caches
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self.HEADERS,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def lookup(self, address: str) -> Coordinates | None:
        """Geocode ``address``; ``None`` when nothing matches.

        Raises:
            GeocodingTimeout: Nominatim did not answer within the timeout.
            httpx.HTTPError: any other transport or status failure.
        """
        cache_key = address.lower().strip()
        hit, cached = await self._caches.geocode.lookup(cache_key)
        if hit:
            return cached

        try:
            response = await self._get_client().get(
                self.NOMINATIM_URL,
                params={"q": address, "format": "json", "limit": 1},
            )
        except httpx.TimeoutException as e:
            raise GeocodingTimeout(f"Nominatim timed out after {self._timeout}s") from e
        response.raise_for_status()
        results = response.json()

        coords: Coordinates | None = None
        if isinstance(results, list) and results:
            try:
                coords = Coordinates(lat=float(results[0]["lat"]), lng=float(results[0]["lon"]))
            except (KeyError, TypeError, ValueError):
                logger.info(f"[GEOCODE] Unusable result for '{address}'")
        await self._caches.geocode.set(cache_key, coords)
        logger.info(f"[GEOCODE] '{address}' → {coords.lat:.4f}, {coords.lng:.4f}" if coords else f"[GEOCODE] Not found: '{address}'")
        return coords

    async def geocode(self, address: str) -> Coordinates | None:
        """Soft variant of :meth:`lookup`: every failure is ``None``."""
        try:
            return await self.lookup(address)
        except GeocodingTimeout:
            logger.info(f"[GEOCODE] Timeout for '{address}'")
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"[GEOCODE] Error for '{address}': {type(e).__name__}: {e}")
        return None

    async def geocode_hotel(self, hotel: str, city: str) -> Coordinates | None:
        """Try ``"{hotel}, {city}"`` first, then the hotel text alone."""
        coords = await self.geocode(f"{hotel}, {city}")
        if coords is None:
            coords = await self.geocode(hotel)
        return coords
