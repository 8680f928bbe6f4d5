"""
Tracing
Spans around template configuration and callback dispatch.

A span started inside another one shares its trace id, so a press that
triggers a reconfiguration shows up as one trace in the logs.
"""

import contextvars
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from .logging_config import get_logger

logger = get_logger(__name__)

_trace_id: contextvars.ContextVar[str] = contextvars.ContextVar("trace_id", default="")
_span_id: contextvars.ContextVar[str] = contextvars.ContextVar("span_id", default="")


@dataclass
class Span:
    """One traced operation. Tag values are stored as strings."""

    name: str
    trace_id: str
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex[:16])
    parent_id: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    duration: float = 0.0
    error: Exception | None = None

    def finish(self) -> None:
        self.duration = time.perf_counter() - self.started

    def set_tag(self, key: str, value: Any) -> None:
        self.tags[key] = str(value)

    def set_error(self, error: Exception) -> None:
        self.error = error


class Tracer:
    """
    Reports finished spans as log events.

    Spans slower than ``slow_threshold`` seconds are logged as warnings,
    failed spans as errors, everything else at debug. With ``keep`` set
    the most recent spans stay available in ``finished``.
    """

    def __init__(self, service: str, keep: int = 0, slow_threshold: float = 0.05) -> None:
        self.service = service
        self.keep = keep
        self.slow_threshold = slow_threshold
        self.finished: list[Span] = []

    def start_span(self, name: str, **tags: str) -> Span:
        return Span(
            name=name,
            trace_id=_trace_id.get() or uuid.uuid4().hex,
            parent_id=_span_id.get(),
            tags=dict(tags),
        )

    def submit(self, span: Span) -> None:
        if self.keep:
            self.finished.append(span)
            del self.finished[: -self.keep]

        fields: dict[str, Any] = {
            "service": self.service,
            "operation": span.name,
            "trace_id": span.trace_id,
            "span_id": span.span_id,
            "duration_ms": round(span.duration * 1000, 3),
            **span.tags,
        }
        if span.parent_id:
            fields["parent_id"] = span.parent_id

        if span.error is not None:
            logger.error("span_completed_with_error", error=str(span.error), **fields)
        elif span.duration > self.slow_threshold:
            logger.warning("span_completed_slow", **fields)
        else:
            logger.debug("span_completed", **fields)

    def spans(self, name: str | None = None) -> list[Span]:
        """Kept spans, optionally only those with the given name."""
        if name is None:
            return list(self.finished)
        return [span for span in self.finished if span.name == name]


_tracer: Tracer | None = None


def init_tracer(service: str = "template-bridge", keep: int = 0, slow_threshold: float = 0.05) -> Tracer:
    """Install the process-wide tracer.

    Args:
        service: Service name stamped on every span
        keep: Number of finished spans kept in memory for inspection
        slow_threshold: Duration in seconds above which a span is logged as slow
    """
    global _tracer
    _tracer = Tracer(service, keep=keep, slow_threshold=slow_threshold)
    return _tracer


def get_tracer() -> Tracer | None:
    """Current tracer, None while tracing is off."""
    return _tracer


def shutdown_tracer() -> None:
    global _tracer
    _tracer = None


@contextmanager
def trace_operation(operation: str, **tags: Any) -> Iterator[Span | None]:
    """Trace the enclosed block. Yields None when no tracer is installed."""
    tracer = _tracer
    if tracer is None:
        yield None
        return

    span = tracer.start_span(operation, **{key: str(value) for key, value in tags.items()})
    tokens = (_trace_id.set(span.trace_id), _span_id.set(span.span_id))
    try:
        yield span
    except Exception as e:
        span.set_error(e)
        raise
    finally:
        _span_id.reset(tokens[1])
        _trace_id.reset(tokens[0])
        span.finish()
        tracer.submit(span)


def get_trace_id() -> str:
    """Trace id of the innermost active span, empty outside any span."""
    return _trace_id.get()
