# mfu_cache/policies/metrics.py
from ..simulator import CacheSim
from .mfu import MFUCache


def replay_with_metrics(df, capacity, eviction_factor, key_func=None,
                        policy_ctor=MFUCache):
    sim = CacheSim(capacity, policy_ctor, eviction_factor=eviction_factor)
    hit_ratio = sim.replay(df, key_func=key_func)
    policy = sim.policy

    return {
        "hit_ratio": hit_ratio,
        "requests": len(df),
        "hits": sim.hits,
        "evictions": policy.evictions,
        "eviction_passes": policy.eviction_passes,
        "final_size": len(policy),
    }
