# bench_profiling.py
"""
Simple profiling harness for AutoCorrector.correct

Usage:
    python -m trie_autocorrector.core.bench_profiling --queries 1000 --size 20000
"""

from __future__ import annotations
import argparse
import statistics
import time
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Sequence

from trie_autocorrector.core.corrector import AutoCorrector

DEFAULT_QUERIES = [
    "hello",
    "wrold",
    "speling",
    "corect",
    "programing",
    "algorith",
    "structur",
    "efficent",
    "optimze",
    "implementaion",
]

BASE_WORDS = [
    "program", "algorithm", "structure", "performance", "optimization", "database",
    "application", "implementation", "efficiency", "scalability", "development",
    "architecture", "framework", "integration", "deployment", "configuration",
    "authentication", "authorization", "encryption", "validation", "testing",
    "debugging", "refactoring", "maintenance", "documentation", "repository",
    "version", "control", "pipeline", "container", "orchestration", "microservice",
    "middleware", "interface", "protocol", "network", "security", "infrastructure",
    "monitoring", "logging", "analytics", "processing", "computing", "storage",
    "memory", "cache", "queue", "stream", "batch", "real", "time", "synchronous",
    "asynchronous", "concurrent", "parallel", "distributed", "scalable", "reliable",
    "available", "consistent", "durable", "transaction", "isolation", "atomicity",
    "consistency", "durability", "serializable", "snapshot", "commit", "rollback",
    "recovery", "backup", "restore", "migration", "replication", "sharding",
    "partitioning", "indexing", "query", "execution", "planning", "normalization",
    "denormalization", "schema", "model", "entity", "relationship", "attribute",
    "constraint", "foreign", "primary", "unique", "composite", "clustered",
    "nonclustered", "hello", "world", "spelling", "correct",
]


@dataclass
class BenchmarkResult:
    count: int
    total_ms: float
    avg_ms: float
    qps: float
    median_ms: float
    p99_ms: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _letters(n: int) -> str:
    """1 -> "a", 26 -> "z", 27 -> "aa"  (bijective base 26)."""
    out = []
    while n > 0:
        n, rem = divmod(n - 1, 26)
        out.append(chr(ord("a") + rem))
    return "".join(reversed(out))


def generate_dictionary(size: int, base: Sequence[str] = BASE_WORDS) -> List[str]:
    """
    Synthetic vocabulary of `size` words: the base words first, then base
    words with a letter suffix so the tokens survive normalization.
    """
    if size <= 0:
        return []
    words = []
    for i in range(size):
        w = base[i % len(base)]
        if i >= len(base):
            w = w + _letters(i // len(base))
        words.append(w)
    return words


def run_benchmark(
    ac: AutoCorrector,
    num_queries: int,
    queries: Optional[Sequence[str]] = None,
    warmup: int = 0,
) -> BenchmarkResult:
    """Issue num_queries corrections round-robin over `queries` and time them."""
    if num_queries <= 0:
        raise ValueError(f"num_queries must be > 0, got {num_queries}")
    queries = list(queries or DEFAULT_QUERIES)
    if not queries:
        raise ValueError("queries must not be empty")

    for i in range(warmup):
        ac.correct(queries[i % len(queries)])

    times = []
    t_start = time.perf_counter()
    for i in range(num_queries):
        q = queries[i % len(queries)]
        t0 = time.perf_counter()
        ac.correct(q)
        times.append((time.perf_counter() - t0) * 1000.0)
    total_ms = (time.perf_counter() - t_start) * 1000.0

    times.sort()
    return BenchmarkResult(
        count=num_queries,
        total_ms=total_ms,
        avg_ms=total_ms / num_queries,
        qps=num_queries / (total_ms / 1000.0) if total_ms > 0 else float("inf"),
        median_ms=statistics.median(times),
        p99_ms=times[max(0, int(len(times) * 0.99) - 1)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark AutoCorrector.correct")
    parser.add_argument("--queries", type=int, default=1000)
    parser.add_argument("--warmup", type=int, default=20)
    parser.add_argument("--size", type=int, default=20000, help="synthetic dictionary size")
    parser.add_argument("--prune", action="store_true")
    args = parser.parse_args(argv)

    ac = AutoCorrector(prune=args.prune)
    ac.load_words(generate_dictionary(args.size))
    res = run_benchmark(ac, args.queries, warmup=args.warmup)
    print("Benchmark Results:")
    print(f"Total Queries: {res.count}")
    print(f"Total Time: {res.total_ms:.2f} ms")
    print(f"Average Time per Query: {res.avg_ms:.4f} ms")
    print(f"Queries per Second: {res.qps:.0f}")
    print(f"median ms: {res.median_ms:.4f}  p99 ms: {res.p99_ms:.4f}")


if __name__ == "__main__":
    main()
