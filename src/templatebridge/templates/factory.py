"""Template factory - builds templates with shared collaborators."""

from collections.abc import Mapping
from typing import Any, TypeVar

from ..bridge.types import HostBridge
from ..core.config import Settings
from ..monitoring import MetricsCollector
from .template import Template

T = TypeVar("T", bound=Template)


class TemplateFactory:
    """Creates templates bound to one bridge, settings and metrics."""

    def __init__(self, bridge: HostBridge, settings: Settings, metrics: MetricsCollector) -> None:
        self.bridge = bridge
        self.settings = settings
        self.metrics = metrics

    def create(self, template_cls: type[T], config: Mapping[str, Any], **kwargs: Any) -> T:
        """Instantiate ``template_cls`` and push its first config."""
        return template_cls(
            config,
            bridge=self.bridge,
            settings=self.settings,
            metrics=self.metrics,
            **kwargs,
        )
