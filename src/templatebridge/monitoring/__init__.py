"""
Monitoring
Prometheus metrics and tracing for the template bridge
"""

from ..core.tracing import trace_operation
from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
    "trace_operation",
]
