"""Observability: structured logging and tracing."""

from fit_engine.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)
from fit_engine.observability.tracing import (
    configure_tracing,
    disable_tracing,
    get_tracer,
    traced_operation,
)

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "configure_tracing",
    "disable_tracing",
    "get_tracer",
    "traced_operation",
]
