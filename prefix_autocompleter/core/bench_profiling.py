# bench_profiling.py
"""
Simple profiling harness for BinarySearchAutocompleter.top_matches

Usage:
    python -m prefix_autocompleter.core.bench_profiling data/sample_terms.txt --runs 200 --warmup 20
    python -m prefix_autocompleter.core.bench_profiling words.txt --prefix th --prefix a -k 10
"""

import argparse
import math
import statistics
import sys
import time
from typing import Dict, List, Sequence

from prefix_autocompleter.core.protocols import Autocompletor
from prefix_autocompleter.utils.term_loader import build_from_file

DEFAULT_PREFIXES = ["", "a", "b", "th", "the", "wh", "qu", "zzz"]


def profile(
    ac: Autocompletor,
    prefixes: Sequence[str],
    runs: int = 200,
    warmup: int = 20,
    k: int = 5,
) -> List[float]:
    """Run top_matches over prefixes round-robin; return per-call latency in ms."""
    if not prefixes:
        raise ValueError("need at least one prefix to profile")
    for i in range(warmup):
        ac.top_matches(prefixes[i % len(prefixes)], k)

    times = []
    for i in range(runs):
        p = prefixes[i % len(prefixes)]
        t0 = time.perf_counter()
        ac.top_matches(p, k)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def _pct(times_sorted: List[float], q: float) -> float:
    """Nearest-rank percentile: smallest sample with at least q of the data at or below it."""
    # epsilon absorbs float error in q * n
    idx = max(0, math.ceil(q * len(times_sorted) - 1e-9) - 1)
    return times_sorted[idx]


def summarize(times: Sequence[float]) -> Dict[str, float]:
    """count/mean/median/p90/p99/max of a list of latencies (ms)."""
    if not times:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "p90_ms": 0.0, "p99_ms": 0.0, "max_ms": 0.0}
    ts = sorted(times)
    return {
        "count": len(ts),
        "mean_ms": statistics.mean(ts),
        "median_ms": statistics.median(ts),
        "p90_ms": _pct(ts, 0.90),
        "p99_ms": _pct(ts, 0.99),
        "max_ms": ts[-1],
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="profile top_matches latency")
    parser.add_argument("terms", help="term file (<weight>\\t<word> per line)")
    parser.add_argument("--runs", type=int, default=200)
    parser.add_argument("--warmup", type=int, default=20)
    parser.add_argument("-k", type=int, default=5)
    parser.add_argument("--prefix", action="append", dest="prefixes",
                        help="prefix to query (repeatable)")
    args = parser.parse_args(argv)

    ac = build_from_file(args.terms)
    prefixes = args.prefixes or DEFAULT_PREFIXES
    times = profile(ac, prefixes, runs=args.runs, warmup=args.warmup, k=args.k)
    s = summarize(times)
    print(f"terms: {len(ac)}")
    print("calls:", s["count"])
    print("mean ms: %.4f  median ms: %.4f  p90 ms: %.4f  p99 ms: %.4f  max ms: %.4f" % (
        s["mean_ms"], s["median_ms"], s["p90_ms"], s["p99_ms"], s["max_ms"],
    ))
    print("sample:", {p: ac.top_matches(p, args.k) for p in prefixes[:3]})
    return 0


if __name__ == "__main__":
    sys.exit(main())
