"""
CacheConfig validation and eviction sizing
"""
import dataclasses
import math

import numpy as np
import pytest

from mfu_cache import CacheConfig, CacheConfigError, MFUCache
from mfu_cache.config import DEFAULT_CAPACITY, DEFAULT_EVICTION_FACTOR


class TestCacheConfig:
    """Accepted configurations"""

    def test_defaults(self):
        config = CacheConfig()
        assert config.capacity == DEFAULT_CAPACITY
        assert config.eviction_factor == DEFAULT_EVICTION_FACTOR
        assert config.victim_count == 10

    def test_max_frequency_is_capacity_minus_one(self):
        assert CacheConfig(7, 0.2).max_frequency == 6

    @pytest.mark.parametrize("capacity, factor, expected", [
        (4, 0.25, 1),
        (4, 0.1, 1),
        (10, 0.25, 3),
        (10, 0.7, 7),
        (3, 0.3, 1),
        (1, 1.0, 1),
        (1, 0.01, 1),
    ])
    def test_victim_count_rounds_up(self, capacity, factor, expected):
        assert CacheConfig(capacity, factor).victim_count == expected

    def test_single_slot_cache_may_flush_everything(self):
        assert CacheConfig(1, 1.0).victim_count == 1

    def test_numpy_scalars_accepted(self):
        config = CacheConfig(np.int64(4), np.float64(0.25))
        assert config.capacity == 4
        assert type(config.capacity) is int
        assert type(config.eviction_factor) is float
        assert config.victim_count == 1

    def test_cache_from_numpy_capacity(self):
        cache = MFUCache(np.int32(3), 0.3)
        assert cache.bucket_sizes() == [0, 0, 0]

    def test_config_is_frozen(self):
        config = CacheConfig(4, 0.25)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.capacity = 8


class TestCacheConfigRejects:
    """Configurations refused at construction"""

    @pytest.mark.parametrize("capacity", [0, -1, -100])
    def test_non_positive_capacity(self, capacity):
        with pytest.raises(CacheConfigError):
            CacheConfig(capacity, 0.5)

    @pytest.mark.parametrize("capacity", [2.5, "10", None, True])
    def test_non_int_capacity(self, capacity):
        with pytest.raises(CacheConfigError):
            CacheConfig(capacity, 0.5)

    @pytest.mark.parametrize("factor", [0, 0.0, -0.1, 1.5, math.nan, "0.1", None])
    def test_bad_eviction_factor(self, factor):
        with pytest.raises(CacheConfigError):
            CacheConfig(10, factor)

    @pytest.mark.parametrize("capacity, factor", [(4, 1.0), (4, 0.8), (10, 0.95)])
    def test_factor_that_flushes_whole_cache(self, capacity, factor):
        with pytest.raises(CacheConfigError, match="evict all"):
            CacheConfig(capacity, factor)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            MFUCache(capacity=0)

    def test_cache_from_config(self):
        cache = MFUCache.from_config(CacheConfig(5, 0.4))
        assert cache.capacity == 5
        assert cache.victim_count == 2
        assert cache.max_frequency == 4
