from .config import CacheConfig, DEFAULT_CAPACITY, DEFAULT_EVICTION_FACTOR
from .errors import (CacheConfigError, CacheStateError, MFUCacheError,
                     TraceFormatError)
from .policies import BasePolicy, CacheEntry, MFUCache
from .simulator import CacheSim, load_trace, synthetic_trace

__version__ = "0.1.0"
