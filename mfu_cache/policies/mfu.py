# mfu_cache/policies/mfu.py
import logging
from collections import OrderedDict

from ..config import CacheConfig, DEFAULT_CAPACITY, DEFAULT_EVICTION_FACTOR
from ..errors import CacheStateError
from .base import _MISS, BasePolicy

logger = logging.getLogger(__name__)


class CacheEntry:
    __slots__ = ("key", "value", "frequency")

    def __init__(self, key, value, frequency: int = 0):
        self.key       = key
        self.value     = value
        self.frequency = frequency

    def __repr__(self):
        return (f"CacheEntry(key={self.key!r}, value={self.value!r}, "
                f"frequency={self.frequency})")


class MFUCache(BasePolicy):
    """
    Most-Frequently-Used cache with an MRU tie-break at the top bucket.

    Entries live in one of `capacity` frequency buckets (OrderedDicts keyed
    by cache key, oldest member first). A get() promotes an entry one bucket
    up; once it sits in the last bucket (frequency == capacity - 1) a get()
    only moves it to the back of that bucket. When a new key arrives at a
    full cache, ceil(capacity * eviction_factor) entries are dropped,
    starting from the front of the highest non-empty bucket and walking
    down. Not thread-safe.
    """
    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 eviction_factor: float = DEFAULT_EVICTION_FACTOR):
        self.config = CacheConfig(capacity, eviction_factor)
        super().__init__(self.config.capacity)
        self.capacity        = self.config.capacity
        self.eviction_factor = self.config.eviction_factor
        self.max_frequency   = self.config.max_frequency
        self.victim_count    = self.config.victim_count

        self._index   = {}                                   # key -> entry
        self._buckets = [OrderedDict() for _ in range(self.capacity)]
        self._cursor  = 0                                    # top non-empty bucket

    @classmethod
    def from_config(cls, config: CacheConfig):
        return cls(config.capacity, config.eviction_factor)

    # ----------------------------------------------------------
    def put(self, key, value):
        """Insert or overwrite. Returns the previous value, or None."""
        entry = self._index.get(key)
        if entry is not None:
            old, entry.value = entry.value, value
            return old

        if len(self._index) >= self.capacity:
            self._evict()
        entry = CacheEntry(key, value)
        self._buckets[0][key] = entry
        self._index[key] = entry
        return None

    def get(self, key, default=None):
        """Return the value for key and count the access."""
        entry = self._index.get(key)
        if entry is None:
            self.misses += 1
            return default
        self.hits += 1
        self._touch(entry)
        return entry.value

    def remove(self, key):
        """Drop key. Returns its value, or None if it was not cached."""
        entry = self._index.pop(key, None)
        if entry is None:
            return None
        del self._buckets[entry.frequency][key]
        if entry.frequency == self._cursor:
            self._lower_cursor()
        return entry.value

    def frequency_of(self, key) -> int:
        """1-based access count of key, 0 when absent."""
        entry = self._index.get(key)
        return entry.frequency + 1 if entry is not None else 0

    def clear(self):
        for bucket in self._buckets:
            bucket.clear()
        self._index.clear()
        self._cursor = 0

    def contains_key(self, key) -> bool:
        return key in self._index

    def size(self) -> int:
        return len(self._index)

    def is_empty(self) -> bool:
        return not self._index

    # ---------------------------------------------------------- extras
    def put_all(self, other=(), **kwargs):
        """dict.update() semantics, one put() per pair."""
        pairs = other.items() if hasattr(other, "items") else other
        for key, value in pairs:
            self.put(key, value)
        for key, value in kwargs.items():
            self.put(key, value)

    update = put_all

    def pop(self, key, default=_MISS):
        if key not in self._index:
            if default is _MISS:
                raise KeyError(key)
            return default
        return self.remove(key)

    def keys(self):
        return list(self._index)

    def values(self):
        # snapshots; reading them is not an access
        return [entry.value for entry in self._index.values()]

    def items(self):
        return [(key, entry.value) for key, entry in self._index.items()]

    def contains_value(self, value) -> bool:
        return any(entry.value == value for entry in self._index.values())

    def bucket_sizes(self):
        return [len(bucket) for bucket in self._buckets]

    @property
    def highest_frequency(self) -> int:
        return self._cursor

    def describe_keys(self) -> str:
        return "".join(f"{key}, " for key in self._index)

    # ---------------------------------------------------------- dunders
    def __len__(self):
        return len(self._index)

    def __contains__(self, key):
        return key in self._index

    def __iter__(self):
        return iter(list(self._index))

    def __getitem__(self, key):
        entry = self._index.get(key)
        if entry is None:
            self.misses += 1
            raise KeyError(key)
        self.hits += 1
        self._touch(entry)
        return entry.value

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if key not in self._index:
            raise KeyError(key)
        self.remove(key)

    def __repr__(self):
        busy = {f: n for f, n in enumerate(self.bucket_sizes()) if n}
        return (f"MFUCache(capacity={self.capacity}, size={len(self)}, "
                f"highest_frequency={self._cursor}, "
                f"max_frequency={self.max_frequency}, buckets={busy})")

    # ---------------------------------------------------------- internals
    def _touch(self, entry: CacheEntry):
        freq = entry.frequency
        if freq < self.max_frequency:
            # promote: leave the old bucket, join the back of the next one
            del self._buckets[freq][entry.key]
            entry.frequency = freq + 1
            self._buckets[freq + 1][entry.key] = entry
            if entry.frequency > self._cursor:
                self._cursor = entry.frequency
        else:
            # saturated: MRU, most recently touched goes last in line
            self._buckets[freq].move_to_end(entry.key)

    def _lower_cursor(self):
        while self._cursor > 0 and not self._buckets[self._cursor]:
            self._cursor -= 1

    def _evict(self):
        target  = self.victim_count
        evicted = 0
        start   = self._cursor
        while evicted < target:
            bucket = self._buckets[self._cursor]
            if not bucket:
                logger.error(
                    f"Bucket {self._cursor} is empty but marked as the highest "
                    f"frequency ({len(self._index)} entries indexed)")
                raise CacheStateError(
                    f"highest-frequency bucket {self._cursor} is empty "
                    f"with {target - evicted} victims still to evict")
            while bucket and evicted < target:
                key, _ = bucket.popitem(last=False)     # oldest in this bucket
                del self._index[key]
                evicted += 1
            if not bucket:
                self._lower_cursor()

        self.evictions       += evicted
        self.eviction_passes += 1
        logger.debug(f"Evicted {evicted} entries starting at frequency {start}; "
                     f"highest frequency now {self._cursor}")
