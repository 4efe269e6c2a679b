# mfu_cache/policies/base.py
_MISS = object()


class BasePolicy:
    """
    Anything CacheSim can replay a trace through.
    Subclasses provide get(key, default) and put(key, value); request()
    glues them into one hit-or-miss step.
    """
    def __init__(self, capacity: int):
        self.cap = capacity
        self.reset_stats()

    def reset_stats(self):
        self.hits            = 0
        self.misses          = 0
        self.evictions       = 0
        self.eviction_passes = 0

    def request(self, key, value=None) -> bool:
        """
        Process one lookup.
        Return True on hit, False on miss (after inserting).
        """
        if self.get(key, _MISS) is not _MISS:
            return True
        self.put(key, key if value is None else value)
        return False

    def get(self, key, default=None):
        raise NotImplementedError

    def put(self, key, value):
        raise NotImplementedError

    def __len__(self):
        raise NotImplementedError
