"""
Shared fixtures for the mfu_cache tests
"""
import pytest

from mfu_cache import MFUCache


@pytest.fixture
def cache4():
    """capacity 4, one victim per eviction pass"""
    return MFUCache(capacity=4, eviction_factor=0.25)


@pytest.fixture
def full_cache4(cache4):
    """cache4 holding a, b, c, d at frequency 0"""
    for key in "abcd":
        cache4.put(key, key.upper())
    return cache4


def _check_structure(cache):
    """Assert index, buckets and cursor agree with each other."""
    total = 0
    for freq, bucket in enumerate(cache._buckets):
        for key, entry in bucket.items():
            assert entry.frequency == freq
            assert cache._index[key] is entry
        total += len(bucket)
    assert total == len(cache._index)
    assert len(cache) <= cache.capacity

    busy = [f for f, n in enumerate(cache.bucket_sizes()) if n]
    assert cache.highest_frequency == (busy[-1] if busy else 0)


@pytest.fixture
def structure_ok():
    return _check_structure
