# mfu_cache/config.py
import math
import numbers
from dataclasses import dataclass

from .errors import CacheConfigError

DEFAULT_CAPACITY        = 100     # entries
DEFAULT_EVICTION_FACTOR = 0.1     # share of capacity freed per eviction pass


@dataclass(frozen=True)
class CacheConfig:
    """
    The two knobs an MFU cache accepts.

    capacity        : max number of entries held at once
    eviction_factor : fraction in (0, 1] of capacity dropped when a new key
                      arrives at a full cache
    """
    capacity: int = DEFAULT_CAPACITY
    eviction_factor: float = DEFAULT_EVICTION_FACTOR

    def __post_init__(self):
        # numpy / pandas scalars in, plain int and float out
        cap, factor = self.capacity, self.eviction_factor
        if isinstance(cap, numbers.Integral) and not isinstance(cap, bool):
            object.__setattr__(self, "capacity", int(cap))
        if isinstance(factor, numbers.Real) and not isinstance(factor, bool):
            object.__setattr__(self, "eviction_factor", float(factor))
        self.validate()

    # ----------------------------------------------------------
    def validate(self):
        cap, factor = self.capacity, self.eviction_factor
        if isinstance(cap, bool) or not isinstance(cap, int):
            raise CacheConfigError(f"capacity must be an int, got {cap!r}")
        if cap <= 0:
            raise CacheConfigError(f"capacity must be positive, got {cap}")
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise CacheConfigError(
                f"eviction_factor must be a number, got {factor!r}")
        if math.isnan(factor) or not 0 < factor <= 1:
            raise CacheConfigError(
                f"eviction_factor must be in (0, 1], got {factor}")
        # a pass that empties the whole cache is only sane for a 1-slot cache
        if cap > 1 and self.victim_count >= cap:
            raise CacheConfigError(
                f"eviction_factor {factor} would evict all {cap} entries "
                f"on every pass")

    @property
    def max_frequency(self) -> int:
        return self.capacity - 1

    @property
    def victim_count(self) -> int:
        """Entries dropped per eviction pass: ceil(capacity * factor)."""
        # round first: 10 * 0.7 is 7.000000000000001 in floating point
        return max(1, math.ceil(round(self.capacity * self.eviction_factor, 9)))
