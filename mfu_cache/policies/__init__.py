from .base import BasePolicy
from .mfu import CacheEntry, MFUCache

__all__ = ["BasePolicy", "CacheEntry", "MFUCache"]
