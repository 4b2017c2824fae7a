"""Cache service implementation.

Two tiers:

- Memory: one :class:`~braintrip.utils.cache.LRUCache` per domain, with the
  domain's TTL and an injected clock. Always present.
- Shared (optional): a :class:`CacheService`, normally Redis, so several
  workers share generated content. Failures here are logged and ignored;
  the memory tier keeps serving.

:class:`CacheRegistry` owns the six domain caches and is built once at
startup, then handed to the services that need it.

Writes are last-write-wins without locking. Concurrent requests may both
compute the same key; the values are equivalent so either may survive.
"""

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

import redis.asyncio as redis
from pydantic import TypeAdapter

from braintrip.models import (
    CityContext,
    Coordinates,
    EnrichmentRecord,
    PoolPOI,
    ResolvedCity,
    TriviaQuestion,
)
from braintrip.utils.cache import Clock, LRUCache

logger = logging.getLogger(__name__)

T = TypeVar("T")

HOUR = 60 * 60
DAY = 24 * HOUR

CITY_RESOLVE_TTL = DAY
CITY_CONTEXT_TTL = DAY
TRIVIA_POOL_TTL = DAY
ENRICHMENT_TTL = 30 * DAY
POOL_TTL = HOUR
GEOCODE_TTL = DAY


class CacheService(ABC):
    """Abstract base class for the shared cache tier.

    Values are JSON-serialisable; callers encode models before storing.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key, or None."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int = 3600) -> None:
        """Store value in cache with a TTL."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key; True if it existed."""

    @staticmethod
    def build_key(domain: str, key: str) -> str:
        """Namespaced key, e.g. ``braintrip:pool:paris``."""
        return f"braintrip:{domain}:{key}"


class RedisCacheService(CacheService):
    """Redis-based implementation of the shared cache tier.

    Attributes:
        _client: The Redis async client instance.
        _default_ttl: Default TTL in seconds for cached values.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        default_ttl: int = 3600,
    ) -> None:
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )

    async def disconnect(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _ensure_connected(self) -> redis.Redis:
        if self._client is None:
            await self.connect()
        return self._client  # type: ignore

    async def get(self, key: str) -> Any | None:
        client = await self._ensure_connected()
        value = await client.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        client = await self._ensure_connected()
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        serialized = value if isinstance(value, str) else json.dumps(value)
        await client.set(key, serialized, ex=ttl)

    async def delete(self, key: str) -> bool:
        client = await self._ensure_connected()
        return await client.delete(key) > 0


class DomainCache(Generic[T]):
    """One named cache with its own TTL, backed by memory and optionally Redis.

    ``adapter`` converts values to JSON for the shared tier and back.
    A cached ``None`` counts as a hit (used for negative geocodes).
    """

    def __init__(
        self,
        name: str,
        ttl_seconds: int,
        adapter: TypeAdapter,
        clock: Clock = time.time,
        shared: Optional[CacheService] = None,
        max_entries: int = 1000,
    ) -> None:
        self.name = name
        self.ttl_seconds = ttl_seconds
        self._adapter = adapter
        self._clock = clock
        self._memory = LRUCache(max_size=max_entries, ttl_seconds=ttl_seconds, clock=clock)
        self._shared = shared

    async def lookup(self, key: str) -> tuple[bool, Optional[T]]:
        hit, value = self._memory.lookup(key)
        if hit:
            logger.debug(f"[CACHE] {self.name} HIT (memory) {key}")
            return True, value
        if self._shared is None:
            return False, None
        try:
            payload = await self._shared.get(CacheService.build_key(self.name, key))
        except Exception as e:
            logger.info(f"[CACHE] {self.name} shared tier unavailable: {type(e).__name__}")
            return False, None
        if not isinstance(payload, dict) or "value" not in payload:
            return False, None
        stored_at = payload.get("ts")
        if not isinstance(stored_at, (int, float)) or isinstance(stored_at, bool):
            stored_at = None
        elif self._clock() - stored_at >= self.ttl_seconds:
            logger.debug(f"[CACHE] {self.name} shared entry {key} outlived its TTL")
            return False, None
        try:
            value = self._adapter.validate_python(payload["value"])
        except ValueError:
            logger.info(f"[CACHE] {self.name} dropping undecodable shared entry {key}")
            return False, None
        # Keep the writer's timestamp so the entry expires when it would have there.
        self._memory.set(key, value, stored_at=stored_at)
        logger.debug(f"[CACHE] {self.name} HIT (shared) {key}")
        return True, value

    async def get(self, key: str) -> Optional[T]:
        return (await self.lookup(key))[1]

    async def set(self, key: str, value: Optional[T]) -> None:
        stored_at = self._clock()
        self._memory.set(key, value, stored_at=stored_at)
        if self._shared is None:
            return
        try:
            encoded = self._adapter.dump_python(value, mode="json", by_alias=True)
            await self._shared.set(
                CacheService.build_key(self.name, key),
                {"value": encoded, "ts": stored_at},
                ttl_seconds=self.ttl_seconds,
            )
        except Exception as e:
            logger.info(f"[CACHE] {self.name} shared write skipped: {type(e).__name__}")

    async def delete(self, key: str) -> None:
        self._memory.delete(key)
        if self._shared is None:
            return
        try:
            await self._shared.delete(CacheService.build_key(self.name, key))
        except Exception as e:
            logger.info(f"[CACHE] {self.name} shared delete skipped: {type(e).__name__}")


class CacheRegistry:
    """The process-wide domain caches, built once and passed to services."""

    def __init__(
        self,
        clock: Clock = time.time,
        shared: Optional[CacheService] = None,
        max_entries: int = 1000,
    ) -> None:
        self.shared = shared

        def make(name: str, ttl: int, adapter: TypeAdapter) -> DomainCache:
            return DomainCache(name, ttl, adapter, clock=clock, shared=shared, max_entries=max_entries)

        self.city_resolve: DomainCache[ResolvedCity] = make(
            "city_resolve", CITY_RESOLVE_TTL, TypeAdapter(ResolvedCity)
        )
        self.city_context: DomainCache[CityContext] = make(
            "city_context", CITY_CONTEXT_TTL, TypeAdapter(CityContext)
        )
        self.trivia_pool: DomainCache[list[TriviaQuestion]] = make(
            "trivia_pool", TRIVIA_POOL_TTL, TypeAdapter(list[TriviaQuestion])
        )
        self.enrichment: DomainCache[EnrichmentRecord] = make(
            "enrichment", ENRICHMENT_TTL, TypeAdapter(EnrichmentRecord)
        )
        self.pool: DomainCache[list[PoolPOI]] = make(
            "pool", POOL_TTL, TypeAdapter(list[PoolPOI])
        )
        self.geocode: DomainCache[Optional[Coordinates]] = make(
            "geocode", GEOCODE_TTL, TypeAdapter(Optional[Coordinates])
        )

    async def close(self) -> None:
        if isinstance(self.shared, RedisCacheService):
            await self.shared.disconnect()
