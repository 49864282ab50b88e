"""
Tests for enrichment metrics.
"""

from kubernetes_metadata.models import EnrichmentMetrics


def test_hit_rate():
    """Test hit rate over cache lookups only."""
    metrics = EnrichmentMetrics()
    assert metrics.hit_rate == 0.0

    metrics.record_hit()
    metrics.record_hit()
    metrics.record_miss()
    metrics.record_skip()

    assert metrics.total_requests == 4
    assert metrics.hit_rate == 2 / 3


def test_lookup_timing_and_reset():
    """Test lookup counters."""
    metrics = EnrichmentMetrics()
    metrics.record_lookup(10.0, succeeded=True)
    metrics.record_lookup(30.0, succeeded=False)

    data = metrics.to_dict()
    assert data["lookups"] == 2
    assert data["lookup_failures"] == 1
    assert data["avg_lookup_time_ms"] == 20.0

    metrics.reset()
    assert metrics.to_dict()["lookups"] == 0
