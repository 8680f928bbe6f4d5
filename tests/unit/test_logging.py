"""Logging configuration tests."""

import logging

import pytest
import structlog

from templatebridge.core.logging_config import (
    LogContext,
    add_service_name,
    configure_logging,
    get_logger,
)


@pytest.mark.unit
def test_log_context_binds_and_unbinds():
    """Test fields are visible only inside the block."""
    with LogContext(template_id="tpl_1"):
        assert structlog.contextvars.get_contextvars()["template_id"] == "tpl_1"

    assert "template_id" not in structlog.contextvars.get_contextvars()


@pytest.mark.unit
def test_nested_log_context_restores_outer_value():
    """Test rebinding a key inside a nested context."""
    with LogContext(template_id="outer", callback_id="cb_1"):
        with LogContext(template_id="inner"):
            assert structlog.contextvars.get_contextvars()["template_id"] == "inner"
        context = structlog.contextvars.get_contextvars()
        assert context["template_id"] == "outer"
        assert context["callback_id"] == "cb_1"


@pytest.mark.unit
def test_service_name_processor():
    """Test the service stamp keeps an explicit value."""
    assert add_service_name(None, "info", {"event": "x"})["service"] == "template-bridge"
    assert add_service_name(None, "info", {"service": "host"})["service"] == "host"


@pytest.mark.unit
@pytest.mark.parametrize("json_logs", [False, True])
def test_configure_logging_sets_level(json_logs):
    """Test the root level follows the setting."""
    configure_logging("WARNING", json_logs=json_logs)
    try:
        assert logging.getLogger().level == logging.WARNING
        get_logger(__name__).warning("logging_configured", json_logs=json_logs)
    finally:
        configure_logging("DEBUG")
