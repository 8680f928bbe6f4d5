"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import BridgeError, SerializationError, TemplateClosedError, ValidationError
from .id import CallbackID, TemplateID, new_callback_id, new_template_id
from .json import safe_json_dumps, validate_json_depth
from .logging_config import LogContext, configure_logging, get_logger
from .validate import FireEvent, ValidationResult, parse_fire_event, validate_fire_event


def create_container(*args, **kwargs):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(*args, **kwargs)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "BridgeError",
    "SerializationError",
    "TemplateClosedError",
    "ValidationError",
    # IDs
    "CallbackID",
    "TemplateID",
    "new_callback_id",
    "new_template_id",
    # JSON
    "safe_json_dumps",
    "validate_json_depth",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Validation
    "FireEvent",
    "ValidationResult",
    "parse_fire_event",
    "validate_fire_event",
    # DI
    "create_container",
]
