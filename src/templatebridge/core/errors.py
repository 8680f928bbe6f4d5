"""Bridge error types."""


class BridgeError(Exception):
    """Base error for the template bridge."""

    pass


class SerializationError(BridgeError):
    """Configuration cannot cross the host boundary."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class ValidationError(BridgeError):
    """Inbound host message failed validation."""

    pass


class TemplateClosedError(BridgeError):
    """Template was used after close()."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Template {template_id} is closed")
        self.template_id = template_id
