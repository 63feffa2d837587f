"""
Tests for the analytics cache.
"""
import pytest
from datetime import date

from cycle_engine.models.record import PeriodRecord
from cycle_engine.services.cache import AnalyticsCache
from cycle_engine.services.exceptions import AnalyticsCacheError

@pytest.fixture
def cache():
    """Small cache for eviction tests."""
    return AnalyticsCache(max_size=2)

def test_invalid_size():
    """Test that a non-positive size is rejected."""
    with pytest.raises(AnalyticsCacheError):
        AnalyticsCache(max_size=0)

def test_get_or_compute_counts_hits(cache):
    """Test that values are computed once per key."""
    calls = []

    def compute():
        calls.append(1)
        return "value"

    assert cache.get_or_compute("key", compute) == "value"
    assert cache.get_or_compute("key", compute) == "value"
    assert len(calls) == 1
    assert cache.hits == 1
    assert cache.misses == 1

def test_least_recently_used_is_evicted(cache):
    """Test LRU eviction order."""
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)

    assert len(cache) == 2
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3

def test_invalidate_and_clear(cache):
    """Test dropping entries."""
    cache.put("a", 1)
    assert cache.invalidate("a")
    assert not cache.invalidate("a")

    cache.get_or_compute("b", lambda: 2)
    cache.clear()
    assert len(cache) == 0
    assert cache.misses == 0

def test_make_key_depends_on_content_and_order(record_a, record_b):
    """Test key stability for equal snapshots."""
    copy_a = PeriodRecord(serial_num="period_a", start_date=date(2024, 1, 1), end_date=date(2024, 1, 5))

    assert AnalyticsCache.make_key([record_a, record_b]) == AnalyticsCache.make_key([copy_a, record_b])
    assert AnalyticsCache.make_key([record_a, record_b]) != AnalyticsCache.make_key([record_b, record_a])
    assert AnalyticsCache.make_key([record_a]) != AnalyticsCache.make_key([record_a], None)

def test_analytics_for_reuses_result(two_records, daily_records):
    """Test that the same snapshot is served from the cache."""
    cache = AnalyticsCache()
    first = cache.analytics_for(two_records, daily_records)
    second = cache.analytics_for(list(two_records), list(daily_records))

    assert first is second
    assert first.next_period_date == date(2024, 2, 26)
    assert cache.hits == 1

def test_analytics_for_changed_snapshot(two_records, record_a):
    """Test that a different snapshot is recomputed."""
    cache = AnalyticsCache()
    cache.analytics_for(two_records, [])
    single = cache.analytics_for([record_a], [])

    assert single.total_records == 1
    assert cache.misses == 2
