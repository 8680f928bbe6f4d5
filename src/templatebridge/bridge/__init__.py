"""Host bridge interfaces and the in-process loopback implementation."""

from .emitter import EventEmitter, Subscription
from .loopback import LoopbackBridge
from .types import BUTTON_PRESSED, HostBridge

__all__ = ["BUTTON_PRESSED", "EventEmitter", "HostBridge", "LoopbackBridge", "Subscription"]
