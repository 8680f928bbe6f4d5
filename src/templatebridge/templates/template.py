"""Template - a long-lived UI element whose config is replaced over time."""

import time
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any, ClassVar

from ..bridge.emitter import Subscription
from ..bridge.types import BUTTON_PRESSED, HostBridge
from ..core.config import Settings, get_settings
from ..core.errors import TemplateClosedError
from ..core.id import new_callback_id, new_template_id
from ..core.logging_config import LogContext, get_logger
from ..core.tracing import trace_operation
from ..handlers.dispatch import EventDispatcher
from ..handlers.events import TemplateEventRouter
from ..monitoring import MetricsCollector, metrics_collector
from ..reconcile.registry import CallbackRegistry
from ..reconcile.walker import TreeWalker

logger = get_logger(__name__)

COMPONENT_KEY = "component"
RENDER_KEY = "render"
TYPE_KEY = "type"


class Template:
    """
    Owner of one callback registry.

    The constructor subscribes to the bridge, reconciles the initial
    config and pushes it. configure() replaces the config: it walks the
    new tree, prunes callbacks that are no longer referenced and pushes
    the clean result. close() releases the subscriptions and callbacks.
    """

    TYPE: ClassVar[str] = "template"
    EVENT_MAP: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        config: Mapping[str, Any],
        *,
        bridge: HostBridge,
        settings: Settings | None = None,
        metrics: MetricsCollector | None = None,
        template_id: str | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.metrics = metrics or metrics_collector
        self.bridge = bridge
        self.id = template_id or new_template_id(self.settings.template_id_prefix)

        self.registry = CallbackRegistry(self.id)
        self.walker = TreeWalker(
            new_id=partial(new_callback_id, self.settings.callback_id_prefix),
            log_collisions=self.settings.log_id_collisions,
        )
        self.dispatcher = EventDispatcher(
            self.registry,
            template_id=self.id,
            metrics=self.metrics,
            route_by_template_id=self.settings.route_by_template_id,
        )
        self.events = TemplateEventRouter(self.EVENT_MAP, template_id=self.id, metrics=self.metrics)

        self.component: Callable[..., Any] | None = None
        self.config: dict[str, Any] = {}
        self._closed = False

        self._subscriptions: list[Subscription] = [
            bridge.emitter.add_listener(BUTTON_PRESSED, self.dispatcher.handle_message)
        ]
        self._subscriptions.extend(self.events.subscribe(bridge.emitter))

        try:
            self._reconcile(
                config, lambda clean: bridge.create_template(self.id, clean, self._on_created)
            )
        except Exception:
            self.close()
            raise

    @property
    def closed(self) -> bool:
        return self._closed

    def configure(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """
        Replace the template's configuration.

        Args:
            config: Raw config, possibly holding callbacks

        If the push fails, the previous config, callbacks and handlers stay
        in place, so the host keeps a consistent tree.

        Returns:
            The callback-free config that was pushed to the host

        Raises:
            TemplateClosedError: If the template was closed
        """
        if self._closed:
            raise TemplateClosedError(self.id)

        return self._reconcile(config, lambda clean: self.bridge.update_template(self.id, clean))

    def on_fire(self, identifier: str, payload: Any = None) -> bool:
        """Dispatch a fire event to this template's registry."""
        return self.dispatcher.on_fire(identifier, payload)

    def close(self) -> None:
        """Remove subscriptions, drop callbacks and invalidate on the host."""
        if self._closed:
            return
        self._closed = True

        for subscription in self._subscriptions:
            subscription.remove()
        self._subscriptions.clear()

        released = self.registry.clear()
        self.events.clear()
        self.metrics.forget_template(self.id)
        self.bridge.invalidate(self.id)
        logger.info("template_closed", template_id=self.id, released=released)

    def __enter__(self) -> "Template":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, callbacks={len(self.registry)})"

    def _reconcile(
        self, config: Mapping[str, Any], push: Callable[[dict[str, Any]], None]
    ) -> dict[str, Any]:
        """
        Walk into a staging registry, push, then swap the new state in.

        Nothing on the template changes until ``push`` has returned.
        """
        start = time.perf_counter()
        with LogContext(template_id=self.id), trace_operation(
            "template_configure", template_type=self.TYPE
        ) as span:
            try:
                raw = dict(config) if isinstance(config, Mapping) else {}
                component = raw.pop(COMPONENT_KEY, None)
                handlers, rest = self.events.split(raw)

                staged = CallbackRegistry(self.id)
                result = self.walker.walk(rest, staged)
                clean = {TYPE_KEY: self.TYPE, **result.config, RENDER_KEY: component is not None}

                push(clean)
            except Exception:
                self.metrics.record_configure(self.TYPE, "error", time.perf_counter() - start)
                raise

            pruned = self.registry.adopt(staged)
            self.events.install(handlers)
            self.component = component
            self.config = clean

            duration = time.perf_counter() - start
            self.metrics.record_configure(self.TYPE, "success", duration)
            self.metrics.record_pruned(len(pruned))
            self.metrics.set_registered(self.id, len(self.registry))
            if span is not None:
                span.set_tag("callbacks", len(self.registry))
                span.set_tag("pruned", len(pruned))

            logger.info(
                "template_configured",
                template_type=self.TYPE,
                callbacks=len(self.registry),
                identifiers=len(result.alive_ids),
                pruned=len(pruned),
            )
            return clean

    def _on_created(self, reply: Mapping[str, Any] | None = None) -> None:
        error = reply.get("error") if reply else None
        if error:
            self.metrics.record_error("create_failed", "bridge")
            logger.error("template_create_failed", template_id=self.id, error=error)
