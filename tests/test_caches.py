"""Test on-demand caches and eviction order.

:author: Shay Hill
:created: 2026-10-17
"""

# pyright: reportPrivateUsage = false

import itertools as it
from concurrent.futures import ThreadPoolExecutor

import pytest

from fontmeter.caches import (
    EvictionPolicy,
    FifoCache,
    PopularityCache,
    UnlimitedCache,
    new_on_demand_cache,
)


def _widths(font_size: int) -> dict[str, float]:
    return {"x": 6.0 * font_size}


class TestEvictionPolicy:
    def test_disabled(self):
        policy = EvictionPolicy.DISABLED
        assert (policy.calculates, policy.caches, policy.bounded) == (
            False,
            False,
            False,
        )

    def test_uncached(self):
        policy = EvictionPolicy.UNCACHED
        assert policy.calculates
        assert not policy.caches

    @pytest.mark.parametrize(
        "policy", [EvictionPolicy.FIFO, EvictionPolicy.POPULARITY]
    )
    def test_bounded(self, policy: EvictionPolicy):
        assert policy.calculates
        assert policy.caches
        assert policy.bounded

    def test_unlimited(self):
        assert EvictionPolicy.UNLIMITED.caches
        assert not EvictionPolicy.UNLIMITED.bounded


class TestNewOnDemandCache:
    @pytest.mark.parametrize(
        "policy", [EvictionPolicy.DISABLED, EvictionPolicy.UNCACHED]
    )
    def test_no_cache(self, policy: EvictionPolicy):
        assert new_on_demand_cache(policy, 3) is None

    def test_unlimited(self):
        cache = new_on_demand_cache(EvictionPolicy.UNLIMITED)
        assert isinstance(cache, UnlimitedCache)
        assert cache.limit is None

    def test_fifo(self):
        cache = new_on_demand_cache(EvictionPolicy.FIFO, 3)
        assert isinstance(cache, FifoCache)
        assert cache.limit == 3

    def test_popularity(self):
        cache = new_on_demand_cache(EvictionPolicy.POPULARITY, 3)
        assert isinstance(cache, PopularityCache)
        assert cache.limit == 3

    def test_bounded_requires_limit(self):
        with pytest.raises(ValueError, match="requires a limit"):
            _ = new_on_demand_cache(EvictionPolicy.FIFO)


@pytest.mark.parametrize("cache_type", [FifoCache, PopularityCache])
@pytest.mark.parametrize("limit", [0, -1, -100])
def test_invalid_limit(cache_type: type[FifoCache | PopularityCache], limit: int):
    with pytest.raises(ValueError, match="cache limit must be positive"):
        _ = cache_type(limit)


class TestOnDemandCache:
    def test_miss(self):
        cache = UnlimitedCache()
        assert cache.get(14) is None
        assert 14 not in cache

    def test_put_then_get(self):
        cache = UnlimitedCache()
        stored = cache.put(14, _widths(14))
        assert stored == _widths(14)
        assert cache.get(14) == _widths(14)
        assert 14 in cache
        assert len(cache) == 1

    def test_stored_widths_read_only(self):
        cache = UnlimitedCache()
        stored = cache.put(14, _widths(14))
        with pytest.raises(TypeError):
            stored["x"] = 0.0  # pyright: ignore[reportIndexIssue]

    def test_put_copies(self):
        cache = UnlimitedCache()
        widths = _widths(14)
        _ = cache.put(14, widths)
        widths["x"] = 0.0
        assert cache.get(14) == _widths(14)

    def test_second_put_keeps_first(self):
        """A racing insert of the same size returns the existing entry."""
        cache = FifoCache(1)
        first = cache.put(14, _widths(14))
        second = cache.put(14, {"x": -1.0})
        assert second is first
        assert cache.font_sizes == (14,)

    def test_reads_count_hits_only(self):
        cache = UnlimitedCache()
        _ = cache.put(14, _widths(14))
        assert cache.reads(14) == 0
        _ = cache.get(14)
        _ = cache.get(14)
        _ = cache.get(15)
        assert cache.reads(14) == 2
        assert cache.reads(15) == 0

    def test_clear(self):
        cache = UnlimitedCache()
        for size in range(5):
            _ = cache.put(size + 1, _widths(size + 1))
        cache.clear()
        assert len(cache) == 0
        assert cache.get(1) is None

    def test_font_sizes_in_insertion_order(self):
        cache = UnlimitedCache()
        for size in (30, 10, 20):
            _ = cache.put(size, _widths(size))
        assert cache.font_sizes == (30, 10, 20)


class TestUnlimitedCache:
    def test_never_evicts(self):
        cache = UnlimitedCache()
        for size in range(1, 501):
            _ = cache.put(size, _widths(size))
        assert len(cache) == 500

    def test_select_victim_raises(self):
        with pytest.raises(RuntimeError):
            UnlimitedCache()._select_victim()


class TestFifoCache:
    def test_evicts_oldest(self):
        cache = FifoCache(2)
        for size in (14, 21, 28):
            _ = cache.put(size, _widths(size))
        assert cache.font_sizes == (21, 28)

    def test_reads_do_not_matter(self):
        cache = FifoCache(2)
        _ = cache.put(14, _widths(14))
        _ = cache.put(21, _widths(21))
        for _ in range(10):
            _ = cache.get(14)
        _ = cache.put(28, _widths(28))
        assert 14 not in cache
        assert cache.font_sizes == (21, 28)

    def test_one_eviction_per_insert(self):
        cache = FifoCache(3)
        for size in range(1, 11):
            _ = cache.put(size, _widths(size))
            assert len(cache) == min(size, 3)
        assert cache.font_sizes == (8, 9, 10)

    def test_reinsert_after_eviction(self):
        cache = FifoCache(2)
        for size in (14, 21, 28, 14):
            _ = cache.put(size, _widths(size))
        assert cache.font_sizes == (28, 14)

    def test_limit_one(self):
        cache = FifoCache(1)
        _ = cache.put(14, _widths(14))
        _ = cache.put(21, _widths(21))
        assert cache.font_sizes == (21,)


class TestPopularityCache:
    def test_evicts_least_read(self):
        cache = PopularityCache(2)
        _ = cache.put(10, _widths(10))
        _ = cache.put(20, _widths(20))
        for _ in range(5):
            _ = cache.get(10)
        _ = cache.get(20)
        _ = cache.put(30, _widths(30))
        assert set(cache.font_sizes) == {10, 30}

    def test_evicts_least_read_even_if_newest(self):
        cache = PopularityCache(2)
        _ = cache.put(10, _widths(10))
        _ = cache.put(20, _widths(20))
        _ = cache.get(10)
        _ = cache.get(10)
        _ = cache.get(20)
        _ = cache.put(30, _widths(30))
        assert set(cache.font_sizes) == {10, 30}

    def test_tie_evicts_oldest(self):
        cache = PopularityCache(2)
        _ = cache.put(10, _widths(10))
        _ = cache.put(20, _widths(20))
        _ = cache.get(10)
        _ = cache.get(20)
        _ = cache.put(30, _widths(30))
        assert set(cache.font_sizes) == {20, 30}

    def test_unread_tie_evicts_oldest(self):
        cache = PopularityCache(3)
        for size in (10, 20, 30, 40):
            _ = cache.put(size, _widths(size))
        assert set(cache.font_sizes) == {20, 30, 40}

    def test_new_entry_not_its_own_victim(self):
        """A new entry with zero reads still displaces a popular entry."""
        cache = PopularityCache(1)
        _ = cache.put(10, _widths(10))
        for _ in range(100):
            _ = cache.get(10)
        _ = cache.put(20, _widths(20))
        assert cache.font_sizes == (20,)

    def test_new_entry_starts_at_zero(self):
        cache = PopularityCache(2)
        _ = cache.put(10, _widths(10))
        _ = cache.get(10)
        _ = cache.put(20, _widths(20))
        _ = cache.put(30, _widths(30))
        assert set(cache.font_sizes) == {10, 30}
        assert cache.reads(10) == 1
        assert cache.reads(30) == 0


@pytest.mark.parametrize(
    "cache_type", [FifoCache, PopularityCache, lambda _: UnlimitedCache()]
)
def test_concurrent_access(cache_type: type[FifoCache]):
    """Concurrent gets and puts never exceed the limit or lose a count."""
    limit = 4
    cache = cache_type(limit)
    sizes = list(range(1, 13))

    def work(size: int) -> None:
        for _ in range(50):
            got = cache.get(size)
            if got is None:
                got = cache.put(size, _widths(size))
            assert got["x"] == 6.0 * size
            assert len(cache) <= (cache.limit or len(sizes))

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(work, it.chain(sizes, sizes, sizes)))

    assert len(cache) <= (cache.limit or len(sizes))
    for size in cache.font_sizes:
        assert cache.get(size) == _widths(size)


def test_eviction_logged(caplog: pytest.LogCaptureFixture):
    cache = FifoCache(1)
    with caplog.at_level("DEBUG", logger="fontmeter.caches.type_on_demand_cache"):
        _ = cache.put(14, _widths(14))
        _ = cache.put(21, _widths(21))
    assert "FIFO cache evicted font size 14 for 21" in caplog.text


@pytest.mark.parametrize("cache_type", [FifoCache, PopularityCache])
@pytest.mark.parametrize("limit", [1.5, 2.0, True, "2"])
def test_non_integer_limit(
    cache_type: type[FifoCache | PopularityCache], limit: object
):
    with pytest.raises(ValueError, match="cache limit must be an integer"):
        _ = cache_type(limit)  # type: ignore


def test_new_on_demand_cache_unlimited_ignores_limit():
    cache = new_on_demand_cache(EvictionPolicy.UNLIMITED, 3)
    assert isinstance(cache, UnlimitedCache)
    assert cache.limit is None
