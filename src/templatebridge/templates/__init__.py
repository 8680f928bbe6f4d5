"""Configuration owners."""

from .factory import TemplateFactory
from .navigation import MapTemplate, NavigationBaseTemplate, NavigationTemplate
from .template import Template

__all__ = [
    "MapTemplate",
    "NavigationBaseTemplate",
    "NavigationTemplate",
    "Template",
    "TemplateFactory",
]
