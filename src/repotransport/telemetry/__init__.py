"""
Telemetry for repotransport.

Tracing goes through the OpenTelemetry API and structured logging through
structlog. Without ``configure_telemetry`` both fall back to their library
defaults: a no-op tracer provider and structlog's development renderer.
"""

from repotransport.telemetry.config import configure_telemetry
from repotransport.telemetry.facade import LoggingFacade, TracingFacade


def get_telemetry(name: str) -> tuple:
    """
    Get tracer and logger instances for the given name.

    Args:
        name: The name to use for the tracer and logger

    Returns:
        A tuple containing a tracer and logger
    """
    return TracingFacade(name), LoggingFacade(name)


__all__ = [
    "LoggingFacade",
    "TracingFacade",
    "configure_telemetry",
    "get_telemetry",
]
