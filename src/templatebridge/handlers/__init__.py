"""Handlers for events coming from the host."""

from .dispatch import EventDispatcher
from .events import TemplateEventRouter

__all__ = ["EventDispatcher", "TemplateEventRouter"]
