# tests/test_metrics.py
import pytest

from trie_autocorrector.utils.metrics_tracker import Metrics, QueryStats


def test_metrics_avg():
    m = Metrics()
    assert m.avg("x") == 0.0
    m.record("x", 1.0)
    m.record("x", 3.0)
    assert m.avg("x") == pytest.approx(2.0)
    assert m.count("x") == 2
    assert m.total("x") == pytest.approx(4.0)
    m.reset()
    assert m.count("x") == 0


def test_query_stats_summary():
    s = QueryStats()
    assert s.success_rate() == 0.0
    s.record_query(["hello"], True, 0.5)
    s.record_query(["world"], False, 1.5)
    s.record_query([], False, 1.0)
    s.record_query([], False, 1.0)
    assert s.total_queries == 4
    assert s.answered == 2
    assert s.exact_hits == 1
    assert s.success_rate() == pytest.approx(50.0)
    assert s.avg_latency_ms() == pytest.approx(1.0)
    assert s.summary() == {
        "total_queries": 4,
        "answered": 2,
        "exact_hits": 1,
        "success_rate": 50.0,
        "avg_latency_ms": 1.0,
    }
