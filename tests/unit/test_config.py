"""Configuration tests."""

import pytest
from pydantic import ValidationError

from templatebridge.core import get_settings
from templatebridge.core.config import Settings


@pytest.mark.unit
def test_settings_defaults():
    """Test default settings load correctly."""
    settings = Settings()

    assert settings.callback_id_prefix == "cb"
    assert settings.template_id_prefix == "tpl"
    assert settings.log_id_collisions is True
    assert settings.route_by_template_id is True
    assert settings.max_config_depth == 32
    assert settings.json_logs is False


@pytest.mark.unit
def test_settings_from_test_environment():
    """Test the pytest hook values reach the settings."""
    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.enable_tracing is False


@pytest.mark.unit
def test_settings_env_override(monkeypatch):
    """Test BRIDGE_ prefixed variables override defaults."""
    monkeypatch.setenv("BRIDGE_CALLBACK_ID_PREFIX", "btn")
    monkeypatch.setenv("BRIDGE_ROUTE_BY_TEMPLATE_ID", "false")
    monkeypatch.setenv("BRIDGE_MAX_CONFIG_DEPTH", "8")

    settings = Settings()

    assert settings.callback_id_prefix == "btn"
    assert settings.route_by_template_id is False
    assert settings.max_config_depth == 8


@pytest.mark.unit
def test_settings_validation():
    """Test settings validation."""
    assert Settings(template_id_prefix="view").template_id_prefix == "view"

    # Prefixes are joined with an underscore and must stay lowercase letters
    with pytest.raises(ValidationError):
        Settings(callback_id_prefix="CB_1")

    with pytest.raises(ValidationError):
        Settings(template_id_prefix="")

    with pytest.raises(ValidationError):
        Settings(max_config_depth=0)


@pytest.mark.unit
def test_get_settings_cached():
    """Test settings are built once."""
    assert get_settings() is get_settings()
