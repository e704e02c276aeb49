"""
observability/__init__.py

PURPOSE: OpenTelemetry observability module for tracing.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
This module provides tracing capabilities that are opt-in:
- Non-recording spans until init_telemetry() runs with tracing enabled
- Console output by default when enabled
- OTLP export when endpoint is configured
"""

from spelkollektivet.observability.telemetry import (
    get_tracer,
    init_telemetry,
    shutdown_telemetry,
)

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
