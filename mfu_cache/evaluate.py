# mfu_cache/evaluate.py
"""
Hit-ratio grid for the MFU cache.

    python -m mfu_cache.evaluate --trace data/trace.parquet --capacity 100 500
    python -m mfu_cache.evaluate --requests 50000 --keys 2000 --alpha 1.1
"""
import argparse
import logging

import pandas as pd

from .config import DEFAULT_CAPACITY, DEFAULT_EVICTION_FACTOR
from .errors import CacheConfigError
from .policies.metrics import replay_with_metrics
from .simulator import load_trace, synthetic_trace

logger = logging.getLogger(__name__)

COLUMNS = ["capacity", "eviction_factor", "hit_ratio", "hits", "requests",
           "evictions", "eviction_passes", "final_size"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mfu_cache.evaluate",
                                description=__doc__.strip().splitlines()[0])
    p.add_argument("--trace", help=".csv or .parquet file with a 'key' column; "
                                   "a synthetic Zipf trace is used if omitted")
    p.add_argument("--capacity", type=int, nargs="+",
                   default=[DEFAULT_CAPACITY])
    p.add_argument("--eviction-factor", type=float, nargs="+",
                   default=[DEFAULT_EVICTION_FACTOR])
    p.add_argument("--requests", type=int, default=20_000)
    p.add_argument("--keys", type=int, default=1_000)
    p.add_argument("--alpha", type=float, default=1.2)
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--out", help="write the results table to this CSV")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def run_grid(df: pd.DataFrame, capacities, factors) -> pd.DataFrame:
    rows = []
    for cap in capacities:
        for factor in factors:
            try:
                m = replay_with_metrics(df, cap, factor)
            except CacheConfigError as e:
                logger.warning(f"Skipping capacity={cap} factor={factor}: {e}")
                continue
            rows.append((cap, factor, m["hit_ratio"], m["hits"], m["requests"],
                         m["evictions"], m["eviction_passes"], m["final_size"]))
    return pd.DataFrame(rows, columns=COLUMNS)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.trace:
        df = load_trace(args.trace)
    else:
        df = synthetic_trace(args.requests, args.keys, args.alpha, args.seed)
        logger.info(f"Generated {len(df)} synthetic requests over "
                    f"{args.keys} keys (alpha={args.alpha})")

    res = run_grid(df, args.capacity, args.eviction_factor)
    print(res.to_string(index=False))
    if args.out:
        res.to_csv(args.out, index=False)
        logger.info(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
