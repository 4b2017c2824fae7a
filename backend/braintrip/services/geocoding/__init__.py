"""Geocoding via OpenStreetMap Nominatim."""

from .service import GeocodingTimeout, NominatimGeocodingService

__all__ = ["GeocodingTimeout", "NominatimGeocodingService"]
