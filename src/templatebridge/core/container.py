"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..bridge.loopback import LoopbackBridge
from ..bridge.types import HostBridge
from ..monitoring import MetricsCollector, metrics_collector
from ..templates.factory import TemplateFactory
from .config import Settings, get_settings
from .logging_config import configure_logging
from .tracing import init_tracer, shutdown_tracer


class BridgeModule(Module):
    """Bridge dependencies."""

    def __init__(
        self,
        bridge: HostBridge | None = None,
        settings: Settings | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.bridge = bridge
        self.settings = settings
        self.metrics = metrics

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings singleton."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_metrics(self) -> MetricsCollector:
        """Provide metrics collector."""
        return self.metrics or metrics_collector

    @singleton
    @provider
    def provide_bridge(self, settings: Settings) -> HostBridge:
        """Provide host bridge, in-process loopback unless one was given."""
        if self.bridge is not None:
            return self.bridge
        return LoopbackBridge(max_depth=settings.max_config_depth)

    @singleton
    @provider
    def provide_template_factory(
        self, bridge: HostBridge, settings: Settings, metrics: MetricsCollector
    ) -> TemplateFactory:
        """Provide template factory with all dependencies."""
        return TemplateFactory(bridge=bridge, settings=settings, metrics=metrics)


def init_observability(settings: Settings) -> None:
    """Configure logging and tracing from settings."""
    configure_logging(settings.log_level, settings.json_logs)
    if settings.enable_tracing:
        init_tracer("template-bridge")
    else:
        shutdown_tracer()


def create_container(
    bridge: HostBridge | None = None,
    settings: Settings | None = None,
    metrics: MetricsCollector | None = None,
) -> Injector:
    """Create configured injector."""
    container = Injector([BridgeModule(bridge, settings, metrics)])
    init_observability(container.get(Settings))
    return container
