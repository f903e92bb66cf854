"""
Unit tests for the LRU cache.
"""

import threading

import pytest
from quran_search.core import LRUCache
from quran_search.exceptions import CacheCapacityError, QuranSearchError


class TestCapacity:
    """Test capacity validation."""

    @pytest.mark.parametrize("capacity", [0, -1, 1.5, "3", None, True])
    def test_invalid_capacity(self, capacity):
        """Test that anything but a positive integer is rejected."""
        with pytest.raises(CacheCapacityError):
            LRUCache(capacity)

    def test_error_hierarchy(self):
        """Test that the capacity error is also a ValueError."""
        with pytest.raises(ValueError):
            LRUCache(0)
        with pytest.raises(QuranSearchError, match="positive integer"):
            LRUCache(-5)

    def test_capacity_property(self):
        """Test reading the capacity back."""
        assert LRUCache(3).capacity == 3


class TestOperations:
    """Test get/set/has/delete/clear."""

    def test_get_missing(self):
        """Test that a missing key returns the default."""
        cache = LRUCache(2)
        assert cache.get("a") is None
        assert cache.get("a", 0) == 0

    def test_set_and_get(self):
        """Test storing a value."""
        cache = LRUCache(2)
        cache.set("a", 1)

        assert cache.get("a") == 1
        assert cache.has("a")
        assert "a" in cache
        assert len(cache) == 1

    def test_update_existing(self):
        """Test that updating a key does not grow the cache."""
        cache = LRUCache(2)
        cache.set("a", 1)
        cache.set("a", 2)

        assert cache.get("a") == 2
        assert cache.size == 1

    def test_delete(self):
        """Test removing keys."""
        cache = LRUCache(2)
        cache.set("a", 1)

        assert cache.delete("a") is True
        assert cache.delete("a") is False
        assert "a" not in cache

    def test_clear(self):
        """Test removing everything."""
        cache = LRUCache(3)
        for key in "abc":
            cache.set(key, key)
        cache.clear()

        assert len(cache) == 0
        assert cache.keys() == []

    def test_tuple_keys(self):
        """Test the key shape used by searches."""
        cache = LRUCache(2)
        key = ("الله", (True, True, True, None, None, None), 1, 20)
        cache.set(key, "response")
        assert cache.get(("الله", (True, True, True, None, None, None), 1, 20)) == "response"


class TestEviction:
    """Test least-recently-used eviction."""

    def test_evicts_oldest(self):
        """Test that inserting past capacity drops the oldest key."""
        cache = LRUCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        assert not cache.has("a")
        assert cache.keys() == ["b", "c"]

    def test_get_refreshes(self):
        """Test that reading a key protects it from eviction."""
        cache = LRUCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.has("a")
        assert not cache.has("b")

    def test_set_refreshes(self):
        """Test that updating a key protects it from eviction."""
        cache = LRUCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)
        cache.set("c", 3)

        assert cache.keys() == ["a", "c"]

    def test_has_does_not_refresh(self):
        """Test that membership checks leave recency alone."""
        cache = LRUCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.has("a")
        cache.set("c", 3)

        assert not cache.has("a")

    def test_size_never_exceeds_capacity(self):
        """Test the bound over many inserts."""
        cache = LRUCache(5)
        for i in range(100):
            cache.set(i, i)
            assert cache.size <= 5
        assert cache.keys() == [95, 96, 97, 98, 99]

    def test_capacity_one(self):
        """Test the smallest cache."""
        cache = LRUCache(1)
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.keys() == ["b"]


class TestConcurrency:
    """Test sharing one cache between threads."""

    def test_concurrent_sets(self):
        """Test that concurrent writers keep the bound."""
        cache = LRUCache(50)

        def writer(offset):
            for i in range(200):
                cache.set(offset + i, i)
                cache.get(offset + i // 2)

        threads = [threading.Thread(target=writer, args=(n * 1000,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert cache.size == 50
        assert len(set(cache.keys())) == 50
