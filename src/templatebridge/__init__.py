"""
Template Bridge

Keeps the callbacks of declarative UI templates on the application side
while their plain, serializable configs are pushed to a native host.
"""

from .bridge import EventEmitter, HostBridge, LoopbackBridge
from .core import Settings, create_container, get_settings
from .reconcile import CallbackRegistry, TreeWalker, WalkResult
from .templates import MapTemplate, NavigationTemplate, Template, TemplateFactory

__all__ = [
    "CallbackRegistry",
    "EventEmitter",
    "HostBridge",
    "LoopbackBridge",
    "MapTemplate",
    "NavigationTemplate",
    "Settings",
    "Template",
    "TemplateFactory",
    "TreeWalker",
    "WalkResult",
    "create_container",
    "get_settings",
]

__version__ = "0.1.0"
