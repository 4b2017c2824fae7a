"""Cache layer: per-domain TTL caches with an optional Redis tier."""

from .service import (
    CITY_CONTEXT_TTL,
    CITY_RESOLVE_TTL,
    ENRICHMENT_TTL,
    GEOCODE_TTL,
    POOL_TTL,
    TRIVIA_POOL_TTL,
    CacheRegistry,
    CacheService,
    DomainCache,
    RedisCacheService,
)

__all__ = [
    "CacheRegistry",
    "CacheService",
    "DomainCache",
    "RedisCacheService",
    "CITY_CONTEXT_TTL",
    "CITY_RESOLVE_TTL",
    "ENRICHMENT_TTL",
    "GEOCODE_TTL",
    "POOL_TTL",
    "TRIVIA_POOL_TTL",
]
