"""
Caller-owned memoization for analytics results.

Analytics are pure functions of the record snapshot, so a store that
recomputes on every change can key results on a hash of its collections.
The cache is bounded and evicts the least recently used entry.

Typical usage:
    cache = AnalyticsCache(max_size=16)
    analytics = cache.analytics_for(period_records, daily_records)
    # Same snapshot again: served from the cache
    analytics = cache.analytics_for(period_records, daily_records)
"""
import hashlib
from collections import OrderedDict
from typing import Any, Callable, Optional, Sequence, TypeVar
from aws_lambda_powertools import Logger
from pydantic import BaseModel

from cycle_engine.models.analytics import AnalyticsResult
from cycle_engine.models.record import DailyRecord, PeriodRecord
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.analytics import compute_analytics
from cycle_engine.services.exceptions import AnalyticsCacheError
from cycle_engine.utils.logging import SERVICE_NAME

logger = Logger(service=SERVICE_NAME)

T = TypeVar("T")

DEFAULT_CACHE_SIZE = 32

def _fingerprint(part: Any, digest) -> None:
    if isinstance(part, BaseModel):
        digest.update(part.model_dump_json().encode())
    elif isinstance(part, (list, tuple)):
        digest.update(f"[{len(part)}".encode())
        for item in part:
            _fingerprint(item, digest)
        digest.update(b"]")
    else:
        digest.update(repr(part).encode())
    digest.update(b"|")

class AnalyticsCache:
    """Bounded LRU cache for engine results."""

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE):
        """
        Initialize an empty cache.

        Args:
            max_size: Maximum number of entries kept

        Raises:
            AnalyticsCacheError: If max_size is not positive
        """
        if max_size < 1:
            raise AnalyticsCacheError(f"Cache size must be positive, got {max_size}")
        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._entries: "OrderedDict[str, Any]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def make_key(*parts: Any) -> str:
        """
        Hash arbitrary arguments, including models and lists of models,
        into a cache key. Record order is significant.
        """
        digest = hashlib.sha256()
        for part in parts:
            _fingerprint(part, digest)
        return digest.hexdigest()

    def get(self, key: str) -> Optional[Any]:
        """Return a cached value and mark it recently used, or None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: str, value: Any) -> None:
        """Store a value, evicting the least recently used entry when full."""
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted analytics cache entry", extra={"key": evicted})

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        """Return the cached value for key, computing and storing it on a miss."""
        if key in self._entries:
            self.hits += 1
            logger.debug("Analytics cache lookup", extra={"cache_hit": True})
            return self.get(key)

        self.misses += 1
        logger.debug("Analytics cache lookup", extra={"cache_hit": False})
        value = compute()
        self.put(key, value)
        return value

    def invalidate(self, key: str) -> bool:
        """Drop one entry. Returns whether it was present."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop all entries and reset the hit/miss counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def analytics_for(
        self,
        period_records: Sequence[PeriodRecord],
        daily_records: Sequence[DailyRecord],
        settings: Optional[CycleSettings] = None
    ) -> AnalyticsResult:
        """Cached ``compute_analytics`` for a record snapshot."""
        key = self.make_key("analytics", list(period_records), list(daily_records), settings)
        return self.get_or_compute(key, lambda: compute_analytics(period_records, daily_records, settings))
