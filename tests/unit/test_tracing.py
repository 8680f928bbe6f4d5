"""Tracing tests."""

import pytest

from templatebridge.core.tracing import (
    get_trace_id,
    get_tracer,
    init_tracer,
    shutdown_tracer,
    trace_operation,
)
from templatebridge.templates import Template


@pytest.fixture
def tracer():
    """Tracer keeping its finished spans."""
    tracer = init_tracer("test", keep=10)
    yield tracer
    shutdown_tracer()


@pytest.mark.unit
def test_no_tracer_is_noop():
    """Test trace_operation yields None when tracing is off."""
    shutdown_tracer()

    with trace_operation("noop") as span:
        assert span is None
        assert get_trace_id() == ""


@pytest.mark.unit
def test_span_recorded(tracer):
    """Test spans carry name, tags and duration."""
    with trace_operation("work", items=3) as span:
        assert get_trace_id() == span.trace_id

    assert get_tracer() is tracer
    assert tracer.finished == [span]
    assert span.tags == {"items": "3"}
    assert span.duration >= 0
    assert get_trace_id() == ""


@pytest.mark.unit
def test_nested_spans_share_trace(tracer):
    """Test child spans point at their parent."""
    with trace_operation("outer") as outer:
        with trace_operation("inner") as inner:
            pass

    assert inner.trace_id == outer.trace_id
    assert inner.parent_id == outer.span_id
    assert outer.parent_id == ""


@pytest.mark.unit
def test_error_span(tracer):
    """Test exceptions are recorded and re-raised."""
    with pytest.raises(RuntimeError):
        with trace_operation("failing"):
            raise RuntimeError("boom")

    assert str(tracer.finished[-1].error) == "boom"


@pytest.mark.unit
def test_keep_limit():
    """Test only the most recent spans are kept."""
    tracer = init_tracer("test", keep=2)
    try:
        for name in ("a", "b", "c"):
            with trace_operation(name):
                pass
        assert [span.name for span in tracer.finished] == ["b", "c"]
    finally:
        shutdown_tracer()


@pytest.mark.unit
def test_configure_and_dispatch_traced(tracer, factory, bridge, recorder):
    """Test template operations emit spans."""
    with factory.create(Template, {"actions": [{"id": "x", "onPress": recorder()}]}):
        bridge.fire("x")

    names = [span.name for span in tracer.finished]
    assert "template_configure" in names
    assert "callback_dispatch" in names

    configure = tracer.spans("template_configure")[0]
    assert configure.tags["template_type"] == "template"
    assert configure.tags["callbacks"] == "1"


@pytest.mark.unit
def test_slow_threshold():
    """Test the threshold is configurable per tracer."""
    tracer = init_tracer("test", keep=1, slow_threshold=0.0)
    try:
        with trace_operation("instant"):
            pass
        assert tracer.slow_threshold == 0.0
        assert tracer.spans("instant")[0].duration >= 0
        assert tracer.spans("other") == []
    finally:
        shutdown_tracer()
