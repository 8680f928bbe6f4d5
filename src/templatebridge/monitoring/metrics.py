"""
Metrics Collection
Prometheus metrics for template reconciliation and event dispatch
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, REGISTRY, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the template bridge.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry

        # Reconfiguration metrics
        self.configure_total = Counter(
            "bridge_configure_total",
            "Total number of template configure calls",
            ["template_type", "status"],
            registry=registry,
        )
        self.configure_duration = Histogram(
            "bridge_configure_duration_seconds",
            "Walk, prune and push duration in seconds",
            ["template_type"],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
            registry=registry,
        )

        # Registry metrics
        self.callbacks_registered = Gauge(
            "bridge_callbacks_registered",
            "Callbacks currently held per template",
            ["template_id"],
            registry=registry,
        )
        self.callbacks_pruned = Counter(
            "bridge_callbacks_pruned_total",
            "Callbacks dropped because their node left the tree",
            registry=registry,
        )

        # Dispatch metrics
        self.fire_events = Counter(
            "bridge_fire_events_total",
            "Fire events received from the host",
            ["result"],
            registry=registry,
        )
        self.template_events = Counter(
            "bridge_template_events_total",
            "Template-level events received from the host",
            ["event", "result"],
            registry=registry,
        )

        # Error metrics
        self.errors_total = Counter(
            "bridge_errors_total",
            "Total number of errors",
            ["error_type", "component"],
            registry=registry,
        )

    def record_configure(self, template_type: str, status: str, duration: float) -> None:
        """Record one configure call."""
        self.configure_total.labels(template_type=template_type, status=status).inc()
        self.configure_duration.labels(template_type=template_type).observe(duration)

    def set_registered(self, template_id: str, count: int) -> None:
        """Set how many callbacks a template holds."""
        self.callbacks_registered.labels(template_id=template_id).set(count)

    def forget_template(self, template_id: str) -> None:
        """Drop the per-template series of a closed template."""
        try:
            self.callbacks_registered.remove(template_id)
        except KeyError:
            pass

    def record_pruned(self, count: int) -> None:
        """Record pruned callbacks."""
        if count:
            self.callbacks_pruned.inc(count)

    def record_fire(self, result: str) -> None:
        """Record a fire event outcome (hit, miss, error, invalid)."""
        self.fire_events.labels(result=result).inc()

    def record_template_event(self, event: str, result: str) -> None:
        """Record a template-level event outcome."""
        self.template_events.labels(event=event, result=result).inc()

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    @contextmanager
    def measure_duration(self, callback: Callable[[float], None]) -> Iterator[None]:
        """Context manager to measure operation duration."""
        start = time.perf_counter()
        try:
            yield
        finally:
            callback(time.perf_counter() - start)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector()
