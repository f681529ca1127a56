"""
Tests for escalation metrics
"""
from prometheus_client import CollectorRegistry

from escalator import metrics as metrics_module
from escalator.metrics import EscalationMetrics, get_default_metrics


class TestEscalationMetrics:
    """Test counters"""

    def test_counts_by_label(self):
        """Test outcomes are counted per platform"""
        metrics = EscalationMetrics(registry=CollectorRegistry())

        metrics.record_success("AWS")
        metrics.record_success("AWS")
        metrics.record_failure("AWS", "InstanceTypeNotSupported")

        assert metrics.count("AWS", "escalated") == 2
        assert metrics.count("AWS", "InstanceTypeNotSupported") == 1
        assert metrics.count("GCP", "escalated") == 0

    def test_registries_are_independent(self):
        """Test separate registries do not share counts"""
        first = EscalationMetrics(registry=CollectorRegistry())
        second = EscalationMetrics(registry=CollectorRegistry())

        first.record_success("Azure")

        assert second.count("Azure", "escalated") == 0

    def test_default_metrics_singleton(self, monkeypatch):
        """Test the default metrics are created once"""
        monkeypatch.setattr(metrics_module, "_default_metrics", None)
        monkeypatch.setattr(metrics_module, "REGISTRY", CollectorRegistry())

        assert get_default_metrics() is get_default_metrics()
