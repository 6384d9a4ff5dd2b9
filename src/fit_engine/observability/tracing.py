"""OpenTelemetry spans around engine operations."""

from __future__ import annotations

import time
from collections.abc import Callable
from functools import wraps
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import structlog

if TYPE_CHECKING:
    from fit_core.config.settings import Settings

logger = structlog.get_logger()

# Module-level tracer, set by configure_tracing(). None when disabled.
_tracer: Any = None

P = ParamSpec("P")
R = TypeVar("R")


def configure_tracing(settings: Settings) -> None:
    """Configure OpenTelemetry tracing based on settings.

    All OTEL imports are deferred so the default install never loads them.
    """
    global _tracer

    if settings.otel_exporter == "none":
        _tracer = None
        return

    # Deferred imports, only loaded when tracing is enabled
    from opentelemetry import trace
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)

    if settings.otel_exporter == "console":
        from opentelemetry.sdk.trace.export import (
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )

        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    elif settings.otel_exporter == "otlp":
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.trace.export import BatchSpanProcessor

        exporter = OTLPSpanExporter(endpoint=settings.otel_endpoint)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer("proof-of-fit")
    logger.info("tracing_configured", exporter=settings.otel_exporter)


def disable_tracing() -> None:
    """Drop the active tracer; decorated operations become plain calls."""
    global _tracer
    _tracer = None


def get_tracer() -> Any:
    """Return the active tracer, or None when tracing is disabled."""
    return _tracer


def traced_operation(
    operation: str,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that wraps an engine operation in an OTEL span.

    Noop when tracing is disabled (_tracer is None).
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            if _tracer is None:
                return fn(*args, **kwargs)

            with _tracer.start_as_current_span(f"fit.{operation}") as span:
                span.set_attribute("fit.operation", operation)
                start = time.monotonic()
                try:
                    result = fn(*args, **kwargs)
                    span.set_attribute("fit.status", "ok")
                    return result
                except Exception as exc:
                    span.set_attribute("fit.status", "error")
                    span.set_attribute("fit.error", str(exc))
                    raise
                finally:
                    elapsed = time.monotonic() - start
                    span.set_attribute("fit.duration_seconds", round(elapsed, 6))

        return wrapper

    return decorator
