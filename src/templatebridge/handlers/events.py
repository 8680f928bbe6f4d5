"""Template-level event routing (gestures, back button, alerts)."""

from collections.abc import Callable, Mapping
from typing import Any

from ..bridge.emitter import EventEmitter, Subscription
from ..core.logging_config import LogContext, get_logger
from ..monitoring import MetricsCollector, metrics_collector

logger = get_logger(__name__)

TEMPLATE_ID_KEY = "templateId"


class TemplateEventRouter:
    """
    Holds the template-level handlers of one template.

    ``event_map`` maps host event names to config keys. Callables found
    under those keys are taken out of the config by bind() and called
    when the host sends the matching event for this template.
    """

    def __init__(
        self,
        event_map: Mapping[str, str],
        template_id: str,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.event_map = dict(event_map)
        self.template_id = template_id
        self.metrics = metrics or metrics_collector
        self._handlers: dict[str, Callable[..., Any]] = {}

    def bind(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """
        Replace the handler table from a raw config.

        Returns:
            The config without the handler entries
        """
        handlers, rest = self.split(raw)
        self.install(handlers)
        return rest

    def split(self, raw: Mapping[str, Any]) -> tuple[dict[str, Callable[..., Any]], dict[str, Any]]:
        """Separate handler callables from the rest of a raw config, without binding them."""
        handler_keys = set(self.event_map.values())
        handlers: dict[str, Callable[..., Any]] = {}
        rest: dict[str, Any] = {}
        for key, value in raw.items():
            if key in handler_keys and callable(value):
                handlers[key] = value
            elif key in handler_keys and value is None:
                continue
            else:
                rest[key] = value
        return handlers, rest

    def install(self, handlers: Mapping[str, Callable[..., Any]]) -> None:
        """Replace the handler table."""
        self._handlers = dict(handlers)

    def subscribe(self, emitter: EventEmitter) -> list[Subscription]:
        """Listen for every mapped event on the emitter."""
        subscriptions = []
        for event in self.event_map:
            subscriptions.append(
                emitter.add_listener(event, lambda body, event=event: self.handle(event, body))
            )
        return subscriptions

    def handle(self, event: str, body: Any) -> bool:
        """
        Run the handler for ``event`` if the event targets this template.

        The handler gets the event body without the template id, or no
        argument at all when nothing else is left.
        """
        if not isinstance(body, Mapping) or body.get(TEMPLATE_ID_KEY) != self.template_id:
            return False

        handler = self._handlers.get(self.event_map.get(event, ""))
        if handler is None:
            self.metrics.record_template_event(event, "unhandled")
            return False

        details = {key: value for key, value in body.items() if key != TEMPLATE_ID_KEY}
        with LogContext(template_id=self.template_id):
            try:
                if details:
                    handler(details)
                else:
                    handler()
            except Exception as e:
                self.metrics.record_template_event(event, "error")
                self.metrics.record_error(type(e).__name__, "template_events")
                logger.error("template_event_failed", event_name=event, error=str(e))
                raise

        self.metrics.record_template_event(event, "handled")
        return True

    def handles(self, event: str) -> bool:
        """True if a handler is currently bound for the event."""
        return self.event_map.get(event) in self._handlers

    def clear(self) -> None:
        """Forget every handler."""
        self._handlers.clear()
