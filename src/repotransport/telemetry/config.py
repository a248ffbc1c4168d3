"""
Configuration functions for the telemetry module.

This module configures the OpenTelemetry SDK and structlog with sensible
defaults, reading the standard ``OTEL_*`` environment variables.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from repotransport.config import as_bool


def get_env_bool(name: str, default: bool = False) -> bool:
    """Read ``name`` from the environment as a boolean, ``default`` if unset."""
    value = os.environ.get(name)
    return default if value is None else as_bool(value)


def get_env_dict(name: str, default: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Read ``name`` as comma-separated ``key=value`` pairs; malformed pairs are skipped."""
    value = os.environ.get(name)
    if not value:
        return default or {}
    pairs = (pair.split("=", 1) for pair in value.split(",") if "=" in pair)
    return {key.strip(): val.strip() for key, val in pairs}


def configure_telemetry(
    service_name: Optional[str] = None,
    resource_attributes: Optional[Dict[str, str]] = None,
    trace_enabled: Optional[bool] = None,
    log_level: str = "INFO",
    log_processors: Optional[List[Any]] = None,
    trace_exporters: Optional[List[str]] = None,
) -> bool:
    """
    Configure OpenTelemetry and structlog with sensible defaults.

    Args:
        service_name: The name of the service
        resource_attributes: Additional resource attributes
        trace_enabled: Whether tracing is enabled
        log_level: The log level
        log_processors: Additional log processors, run before rendering
        trace_exporters: The trace exporters to use

    Returns:
        True if tracing is enabled, False otherwise
    """
    if trace_enabled is None:
        trace_enabled = not get_env_bool("OTEL_SDK_DISABLED", False)

    if service_name is None:
        service_name = os.environ.get("OTEL_SERVICE_NAME", "repotransport")

    env_attrs = get_env_dict("OTEL_RESOURCE_ATTRIBUTES")
    resource_attributes = {**env_attrs, **(resource_attributes or {})}
    resource_attributes["service.name"] = service_name

    if trace_enabled:
        tracer_provider = TracerProvider(resource=Resource.create(resource_attributes))
        trace.set_tracer_provider(tracer_provider)
        _configure_exporters(tracer_provider, trace_exporters)

    _configure_structlog(log_level, log_processors)

    return trace_enabled


def _configure_exporters(tracer_provider, exporters=None):
    """
    Configure trace exporters.

    Args:
        tracer_provider: The tracer provider to configure
        exporters: The exporters to use, or None to read OTEL_TRACES_EXPORTER
    """
    if exporters is None:
        exporter_env = os.environ.get("OTEL_TRACES_EXPORTER", "console")
        exporters = [ex.strip() for ex in exporter_env.split(",") if ex.strip()]

    for exporter_name in exporters:
        if exporter_name == "console":
            tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        elif exporter_name != "none":
            structlog.get_logger(__name__).warning(
                "telemetry.unknown_exporter", exporter=exporter_name
            )


def _add_trace_context(_, __, event_dict):
    """Add trace context to log entries if a span is active."""
    context = trace.get_current_span().get_span_context()
    if context.is_valid:
        event_dict.setdefault("trace_id", format(context.trace_id, "032x"))
        event_dict.setdefault("span_id", format(context.span_id, "016x"))
    return event_dict


def _configure_structlog(log_level, processors=None):
    """
    Configure structlog to render JSON through the standard library.

    Args:
        log_level: The log level name
        processors: Additional processors to add before rendering
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level),
    )

    all_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _add_trace_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if processors:
        all_processors.extend(processors)
    all_processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=all_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
