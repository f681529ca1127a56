"""
Prometheus Metrics
Counts escalation attempts by platform and outcome
"""

from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter

OUTCOME_ESCALATED = "escalated"


class EscalationMetrics:
    """Escalation counters"""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else REGISTRY

        self.escalations_total = Counter(
            "instance_escalations_total",
            "Instance size escalation attempts",
            ["platform", "outcome"],
            registry=self.registry,
        )

    def record_success(self, platform: str):
        self.escalations_total.labels(platform=platform, outcome=OUTCOME_ESCALATED).inc()

    def record_failure(self, platform: str, kind: str):
        self.escalations_total.labels(platform=platform, outcome=kind).inc()

    def count(self, platform: str, outcome: str) -> float:
        """Current counter value, 0 when the label set has not been seen"""
        value = self.registry.get_sample_value(
            "instance_escalations_total",
            {"platform": platform, "outcome": outcome},
        )
        return value or 0.0


_default_metrics: Optional[EscalationMetrics] = None


def get_default_metrics() -> EscalationMetrics:
    """Get or create the metrics bound to the global registry"""
    global _default_metrics
    if _default_metrics is None:
        _default_metrics = EscalationMetrics()
    return _default_metrics
