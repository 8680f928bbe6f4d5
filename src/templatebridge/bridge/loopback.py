"""
Loopback Bridge
In-process host used for tests and diagnostics
"""

from typing import Any

from ..core.json import loads, safe_json_dumps, validate_json_depth
from ..core.logging_config import get_logger
from .emitter import EventEmitter
from .types import BUTTON_PRESSED, CreateCallback

logger = get_logger(__name__)


class LoopbackBridge:
    """
    Host bridge that keeps pushed configs in memory.

    Every config goes through the same JSON encoding a real transport
    would apply, so anything that cannot cross the boundary fails here
    with SerializationError. The stored copy is the decoded JSON.
    """

    def __init__(self, max_depth: int = 32, reply_error: str | None = None) -> None:
        self.emitter = EventEmitter()
        self.max_depth = max_depth
        self.reply_error = reply_error
        self.templates: dict[str, Any] = {}
        self.pushes: list[tuple[str, str, Any]] = []
        self.invalidated: list[str] = []

    def create_template(
        self,
        template_id: str,
        config: dict[str, Any],
        callback: CreateCallback | None = None,
    ) -> None:
        """Store the first config of a template and reply to the callback."""
        self._store("create", template_id, config)
        if callback is not None:
            callback({"error": self.reply_error} if self.reply_error else {})

    def update_template(self, template_id: str, config: dict[str, Any]) -> None:
        """Replace the stored config of a template."""
        self._store("update", template_id, config)

    def invalidate(self, template_id: str) -> None:
        """Forget a template."""
        self.templates.pop(template_id, None)
        self.invalidated.append(template_id)
        logger.debug("template_invalidated", template_id=template_id)

    def fire(self, button_id: str, template_id: str | None = None, payload: Any = None) -> int:
        """
        Emit a buttonPressed event as the native host would.

        Returns:
            Number of listeners that received the event
        """
        body: dict[str, Any] = {"buttonId": button_id}
        if template_id is not None:
            body["templateId"] = template_id
        if payload is not None:
            body["payload"] = payload
        return self.emitter.emit(BUTTON_PRESSED, body)

    def send(self, event: str, template_id: str, **fields: Any) -> int:
        """Emit a template-level event (didPress, backButtonPressed, ...)."""
        return self.emitter.emit(event, {"templateId": template_id, **fields})

    def _store(self, operation: str, template_id: str, config: dict[str, Any]) -> None:
        validate_json_depth(config, self.max_depth)
        encoded = safe_json_dumps(config)
        decoded = loads(encoded)
        self.templates[template_id] = decoded
        self.pushes.append((operation, template_id, decoded))
        logger.debug(
            "template_pushed", operation=operation, template_id=template_id, size=len(encoded)
        )
