# mfu_cache/simulator.py
import logging
from pathlib import Path
from typing import Callable

import numpy as np
import pandas as pd
from tqdm import tqdm

from .errors import TraceFormatError
from .policies.mfu import MFUCache

logger = logging.getLogger(__name__)


class CacheSim:
    """
    Replays a trace through a policy object that implements:
      request(key, value=None) -> bool
    The policy is built as policy_ctor(capacity, **policy_kwargs).
    """
    def __init__(self, capacity: int, policy_ctor: Callable = MFUCache,
                 **policy_kwargs):
        self.capacity = capacity
        self.policy   = policy_ctor(capacity, **policy_kwargs)
        self.hits     = 0
        self.requests = 0

    def replay(self, df: pd.DataFrame, key_func: Callable = None,
               progress: bool = False) -> float:
        key_func = key_func or (lambda r: r.key)
        if len(df) == 0:
            return 0.0
        hits = 0
        it = df.itertuples(index=False)
        for row in tqdm(it, total=len(df), disable=not progress,
                        desc=f"replay cap={self.capacity}"):
            if self.policy.request(key_func(row)):
                hits += 1
        self.hits     += hits
        self.requests += len(df)
        logger.debug(f"Replayed {len(df)} requests at capacity "
                     f"{self.capacity}: {hits} hits")
        return hits / len(df)


# ----------------------------------------------------------
def load_trace(path) -> pd.DataFrame:
    """Read a .csv or .parquet trace with at least a `key` column."""
    path = Path(path)
    if path.suffix == ".csv":
        df = pd.read_csv(path)
    elif path.suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        raise TraceFormatError(f"unsupported trace format: {path.suffix!r}")

    if "key" not in df.columns:
        raise TraceFormatError(
            f"{path} has no 'key' column (columns: {list(df.columns)})")
    if "ts" in df.columns:
        df = df.sort_values("ts", kind="stable").reset_index(drop=True)
    logger.info(f"Loaded {len(df)} requests from {path}")
    return df


def synthetic_trace(n_requests: int, n_keys: int, alpha: float = 1.2,
                    seed=None) -> pd.DataFrame:
    """
    Zipf-popular request stream: key 0 hottest, keys folded into
    range(n_keys). numpy's zipf needs alpha > 1.
    """
    if alpha <= 1:
        raise ValueError(f"alpha must be > 1, got {alpha}")
    rng   = np.random.default_rng(seed)
    draws = rng.zipf(alpha, size=n_requests)
    keys  = (draws - 1) % n_keys
    return pd.DataFrame({"ts": np.arange(n_requests), "key": keys})
