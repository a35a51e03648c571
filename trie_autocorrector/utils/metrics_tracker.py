# metrics_tracker.py

from collections import defaultdict


class Metrics:
    """Running sums and counts per key, e.g. record("suggest_ms", 0.4)."""

    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def count(self, key):
        return self.n[key]

    def total(self, key):
        return self.m[key]

    def reset(self):
        self.m.clear()
        self.n.clear()


class QueryStats(Metrics):
    """
    Per-corrector query statistics:
     - total queries seen
     - queries that produced at least one suggestion
     - exact hits (word already in the dictionary)
     - average latency in ms
    """

    def record_query(self, suggestions, exact, elapsed_ms):
        self.record("queries", 1)
        self.record("latency_ms", elapsed_ms)
        if suggestions:
            self.record("answered", 1)
        if exact:
            self.record("exact", 1)

    @property
    def total_queries(self):
        return self.count("queries")

    @property
    def answered(self):
        return self.count("answered")

    @property
    def exact_hits(self):
        return self.count("exact")

    def success_rate(self):
        """Percentage of queries that got any suggestion."""
        if not self.total_queries:
            return 0.0
        return 100.0 * self.answered / self.total_queries

    def avg_latency_ms(self):
        return self.avg("latency_ms")

    def summary(self):
        return {
            "total_queries": self.total_queries,
            "answered": self.answered,
            "exact_hits": self.exact_hits,
            "success_rate": round(self.success_rate(), 2),
            "avg_latency_ms": round(self.avg_latency_ms(), 4),
        }
