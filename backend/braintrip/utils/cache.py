"""In-memory LRU cache with TTL expiration.

Process-level store backing every domain cache (city resolve, city
context, trivia pools, enrichment, place pools, geocodes). Survives
across requests in the same uvicorn worker.

The clock is injected so expiry can be tested without sleeping.
"""

import time
from collections import OrderedDict
from typing import Any, Callable

Clock = Callable[[], float]


class LRUCache:
    """TTL-aware LRU cache.

    An entry stored at time T is served while ``clock() - T < ttl`` and is
    dropped on the first read at or after ``T + ttl``.
    """

    def __init__(
        self,
        max_size: int = 1000,
        ttl_seconds: float = 86400,
        clock: Clock = time.time,
    ) -> None:
        self._cache: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._clock = clock

    @property
    def ttl(self) -> float:
        return self._ttl

    def lookup(self, key: str) -> tuple[bool, Any]:
        """Return ``(hit, value)`` so a cached ``None`` is not a miss."""
        if key not in self._cache:
            return False, None
        ts, value = self._cache[key]
        if self._clock() - ts >= self._ttl:
            del self._cache[key]
            return False, None
        self._cache.move_to_end(key)
        return True, value

    def get(self, key: str) -> Any | None:
        return self.lookup(key)[1]

    def set(self, key: str, value: Any, stored_at: float | None = None) -> None:
        """Store ``value``; ``stored_at`` backdates the entry (defaults to now)."""
        if key in self._cache:
            self._cache.move_to_end(key)
        self._cache[key] = (self._clock() if stored_at is None else stored_at, value)
        if len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
