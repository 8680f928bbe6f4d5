"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Bridge settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="BRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Identifiers
    callback_id_prefix: str = Field(
        default="cb", min_length=1, pattern=r"^[a-z]+$", description="Prefix of generated callback ids"
    )
    template_id_prefix: str = Field(
        default="tpl", min_length=1, pattern=r"^[a-z]+$", description="Prefix of generated template ids"
    )

    # Reconciliation
    log_id_collisions: bool = Field(
        default=True, description="Warn when one explicit id is bound twice in a single walk"
    )
    route_by_template_id: bool = Field(
        default=True, description="Ignore fire events addressed to another template"
    )

    # Bridge
    max_config_depth: int = Field(default=32, gt=0, description="Max nesting of a pushed config")

    # Tracing
    enable_tracing: bool = Field(default=True, description="Emit spans for configure and dispatch")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
