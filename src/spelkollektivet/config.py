"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (SPELKOLLEKTIVET_*)
3. Defaults (lowest priority)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class OpenTelemetrySettings(BaseSettings):
    """Settings for tracing."""

    enabled: bool = Field(
        default=False,
        description="Whether to record and export spans",
    )
    service_name: str = Field(
        default="spelkollektivet",
        description="Service name attached to every span",
    )
    endpoint: str = Field(
        default="",
        description="OTLP gRPC endpoint (console export only when empty)",
    )

    model_config = {"env_prefix": "SPELKOLLEKTIVET_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    world_file: Path | None = Field(
        default=None,
        description="World JSON file to play (the bundled house when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    print_pause_ms: int = Field(
        default=50,
        ge=0,
        description="Delay between printed lines, in milliseconds",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="Tracing settings",
    )

    model_config = {"env_prefix": "SPELKOLLEKTIVET_"}


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings(otel=OpenTelemetrySettings())
