"""
Host Bridge Types
Interface of the transport that carries configs to the native host
"""

from collections.abc import Callable
from typing import Any, Protocol

from .emitter import EventEmitter

# Inbound event carrying the identifier of a pressed node
BUTTON_PRESSED = "buttonPressed"

CreateCallback = Callable[[dict[str, Any]], None]


class HostBridge(Protocol):
    """Protocol for transports between templates and the native host"""

    emitter: EventEmitter

    def create_template(
        self,
        template_id: str,
        config: dict[str, Any],
        callback: CreateCallback | None = None,
    ) -> None:
        """Push the first config of a template"""
        ...

    def update_template(self, template_id: str, config: dict[str, Any]) -> None:
        """Push a replacement config"""
        ...

    def invalidate(self, template_id: str) -> None:
        """Tell the host a template is gone"""
        ...
