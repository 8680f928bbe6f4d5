"""Pytest configuration and fixtures."""

import os

import pytest
from prometheus_client import CollectorRegistry

from templatebridge.bridge import LoopbackBridge
from templatebridge.core.config import Settings
from templatebridge.monitoring import MetricsCollector
from templatebridge.reconcile import CallbackRegistry, TreeWalker
from templatebridge.templates import NavigationTemplate, Template, TemplateFactory


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['BRIDGE_LOG_LEVEL'] = 'DEBUG'
    os.environ['BRIDGE_ENABLE_TRACING'] = 'false'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings()


@pytest.fixture
def metrics():
    """Metrics collector on a private Prometheus registry."""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def bridge():
    """In-process host bridge."""
    return LoopbackBridge()


# ============================================================================
# Reconciliation Fixtures
# ============================================================================

@pytest.fixture
def registry():
    """Empty callback registry."""
    return CallbackRegistry("tpl_test")


@pytest.fixture
def counter_ids():
    """Deterministic identifier factory: id-1, id-2, ..."""
    state = {"n": 0}

    def new_id():
        state["n"] += 1
        return f"id-{state['n']}"

    return new_id


@pytest.fixture
def walker(counter_ids):
    """Tree walker with deterministic identifiers."""
    return TreeWalker(new_id=counter_ids)


# ============================================================================
# Template Fixtures
# ============================================================================

@pytest.fixture
def factory(bridge, settings, metrics):
    """Template factory bound to the loopback bridge."""
    return TemplateFactory(bridge=bridge, settings=settings, metrics=metrics)


@pytest.fixture
def make_template(factory):
    """Build templates and close them after the test."""
    created = []

    def _make(config=None, template_cls=Template, **kwargs):
        template = factory.create(template_cls, config or {}, **kwargs)
        created.append(template)
        return template

    yield _make

    for template in created:
        template.close()


@pytest.fixture
def navigation(make_template):
    """Navigation template with an empty config."""
    return make_template({}, NavigationTemplate)


class Recorder:
    """Callable that records its calls."""

    def __init__(self, name="recorder"):
        self.name = name
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)

    @property
    def count(self):
        return len(self.calls)

    def __repr__(self):
        return f"Recorder({self.name!r}, calls={self.count})"


@pytest.fixture
def recorder():
    """Factory for call-recording callbacks."""
    return Recorder
