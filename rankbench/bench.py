"""Timing benchmarks for PageRank over random graphs."""

from __future__ import annotations

import math
import random
import re
import sys
import time
from collections.abc import Sequence
from typing import NamedTuple, TextIO

from rankbench.graph import PageRankGraph, randomly_populate
from rankbench.pagerank import page_rank

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_FLT_MAX = 3.4028234663852886e38
_FLT_MIN = 1.1754943508222875e-38


class TimingSummary(NamedTuple):
    average: int
    maximum: int
    minimum: int


def parse_float(text: str) -> float:
    """Parse the leading single-precision number of ``text``; trailing text is ignored."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"Bad format: {text}")
    value = float(match.group(1))
    if math.isfinite(value) and (
        abs(value) > _FLT_MAX or (value != 0.0 and abs(value) < _FLT_MIN)
    ):
        raise ValueError(f"Out of range: {text}")
    return value


def time_page_rank(graph: PageRankGraph, damp: float, epsilon: float) -> int:
    """Return the nanoseconds one PageRank run takes."""
    start = time.perf_counter_ns()
    page_rank(graph, damp, epsilon)
    return time.perf_counter_ns() - start


def multi_sample(
    graph: PageRankGraph, damp: float, epsilon: float, iters: int
) -> list[int]:
    """Time ``iters`` PageRank runs."""
    return [time_page_rank(graph, damp, epsilon) for _ in range(iters)]


def summarize(times: Sequence[int]) -> TimingSummary:
    """Return the integer average, maximum and minimum of ``times``."""
    if not times:
        raise ValueError("no timings to summarize")
    return TimingSummary(sum(times) // len(times), max(times), min(times))


def _run_one(
    size: int,
    damp: float,
    epsilon: float,
    samples: int,
    rng: random.Random,
    out: TextIO,
) -> None:
    adj_list: list[list[int]] = [[] for _ in range(size)]
    randomly_populate(adj_list, rng)
    graph = PageRankGraph.from_adjacency(size, adj_list)
    summary = summarize(multi_sample(graph, damp, epsilon, samples))
    out.write(
        f"Size: {size}, Damp: {damp:g}, Epsilon: {epsilon:g}"
        f" PageRank takes an average time of: {summary.average} nanoseconds,"
        f" max time: {summary.maximum}, min time: {summary.minimum}\n"
    )


def size_scale_test(
    damp: float,
    epsilon: float,
    scale_factor: int,
    start_size: int,
    iters: int,
    samples: int,
    out: TextIO | None = None,
) -> None:
    """Time PageRank on random graphs whose size grows by ``scale_factor`` each step."""
    out = out if out is not None else sys.stdout
    rng = random.Random()
    size = start_size
    for _ in range(iters):
        _run_one(size, damp, epsilon, samples, rng, out)
        size *= scale_factor


def epsilon_scale_test(
    damp: float,
    starting_epsilon: float,
    scale_factor: int,
    size: int,
    iters: int,
    samples: int,
    out: TextIO | None = None,
) -> None:
    """Time PageRank with a tolerance divided by ``scale_factor`` each step."""
    out = out if out is not None else sys.stdout
    rng = random.Random()
    epsilon = starting_epsilon
    for _ in range(iters):
        _run_one(size, damp, epsilon, samples, rng, out)
        epsilon /= scale_factor


def main(argv: Sequence[str] | None = None) -> int:
    """Run the size and tolerance scaling benchmarks: ``<damp> <epsilon>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: rankbench <number of nodes> <damp> <epsilon>", file=sys.stderr)
        return 1
    try:
        damp = parse_float(args[0])
        epsilon = parse_float(args[1])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("SIZE SCALE TEST")
    size_scale_test(damp, epsilon, 2, 128, 5, 30, sys.stdout)
    print("EPSILON SCALE TEST")
    epsilon_scale_test(damp, epsilon, 10, 128, 7, 30, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())