"""Event Dispatch - routes host fire events to registered callbacks."""

from typing import Any

from returns.result import Failure

from ..core.logging_config import LogContext, get_logger
from ..core.tracing import trace_operation
from ..core.validate import parse_fire_event
from ..monitoring import MetricsCollector, metrics_collector
from ..reconcile.registry import CallbackRegistry

logger = get_logger(__name__)


class EventDispatcher:
    """Resolves fire events against one template's registry."""

    def __init__(
        self,
        registry: CallbackRegistry,
        template_id: str | None = None,
        metrics: MetricsCollector | None = None,
        route_by_template_id: bool = True,
    ) -> None:
        self.registry = registry
        self.template_id = template_id
        self.metrics = metrics or metrics_collector
        self.route_by_template_id = route_by_template_id

    def on_fire(self, identifier: str, payload: Any = None) -> bool:
        """
        Invoke the callback bound to ``identifier``.

        Unknown identifiers are expected after a reconfiguration races an
        in-flight host event; they are dropped.

        Args:
            identifier: Node identifier sent by the host
            payload: Event payload, passed only when the host supplied one

        Returns:
            True if a callback ran, False on a miss
        """
        callback = self.registry.resolve(identifier)
        if callback is None:
            logger.debug("fire_miss", template_id=self.template_id, callback_id=identifier)
            self.metrics.record_fire("miss")
            return False

        with LogContext(template_id=self.template_id), trace_operation(
            "callback_dispatch", callback_id=identifier
        ):
            try:
                if payload is None:
                    callback()
                else:
                    callback(payload)
            except Exception as e:
                self.metrics.record_fire("error")
                self.metrics.record_error(type(e).__name__, "dispatch")
                logger.error("callback_failed", callback_id=identifier, error=str(e))
                raise

        self.metrics.record_fire("hit")
        return True

    def handle_message(self, body: Any) -> bool:
        """
        Entry point for raw buttonPressed messages from the bridge.

        Malformed messages and messages addressed to another template are
        ignored.
        """
        result = parse_fire_event(body)
        if isinstance(result, Failure):
            error = result.failure()
            logger.debug("fire_invalid", template_id=self.template_id, error=error.message, field=error.field)
            self.metrics.record_fire("invalid")
            return False

        event = result.unwrap()
        if (
            self.route_by_template_id
            and event.template_id is not None
            and self.template_id is not None
            and event.template_id != self.template_id
        ):
            return False

        return self.on_fire(event.button_id, event.payload)
