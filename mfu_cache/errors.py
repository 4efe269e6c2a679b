# mfu_cache/errors.py
class MFUCacheError(Exception):
    """Base class for everything this package raises on purpose."""


class CacheConfigError(MFUCacheError, ValueError):
    """Capacity / eviction factor that would make the cache misbehave."""


class CacheStateError(MFUCacheError, RuntimeError):
    """Bucket bookkeeping no longer matches the index. Not recoverable."""


class TraceFormatError(MFUCacheError, ValueError):
    """A trace file we cannot replay."""
