"""
Tracer Factory and NoOp Implementations

Provides get_tracer() factory that returns either a real OTel tracer
or a NoOpTracer when tracing is disabled.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol

from opentelemetry import trace
from opentelemetry.trace import StatusCode


# ---------------------------------------------------------------------------
# PROTOCOLS
# ---------------------------------------------------------------------------


class SpanProtocol(Protocol):
    """Protocol for span operations."""

    def set_attribute(self, key: str, value: Any) -> None:
        """Set a span attribute."""
        ...

    def set_status(self, status: str, description: str | None = None) -> None:
        """Set span status (ok, error)."""
        ...

    def record_exception(self, exception: Exception) -> None:
        """Record an exception on the span."""
        ...


class TracerProtocol(Protocol):
    """Protocol for tracer operations."""

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[SpanProtocol]:
        """Start a new span as context manager."""
        ...


# ---------------------------------------------------------------------------
# NOOP IMPLEMENTATIONS (tracing disabled)
# ---------------------------------------------------------------------------


class NoOpSpan:
    """No-op span that does nothing."""

    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def set_status(self, status: str, description: str | None = None) -> None:
        pass

    def record_exception(self, exception: Exception) -> None:
        pass


class NoOpTracer:
    """No-op tracer that creates no-op spans."""

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[NoOpSpan]:
        yield NoOpSpan()


# ---------------------------------------------------------------------------
# REAL OTEL TRACER (wrapped for our protocol)
# ---------------------------------------------------------------------------


class OTelSpan:
    """Wrapper around OTel span to match our protocol."""

    def __init__(self, span: Any):
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def set_status(self, status: str, description: str | None = None) -> None:
        code = StatusCode.OK if status == "ok" else StatusCode.ERROR
        self._span.set_status(code, description)

    def record_exception(self, exception: Exception) -> None:
        self._span.record_exception(exception)


class OTelTracer:
    """Wrapper around OTel tracer to match our protocol."""

    def __init__(self, tracer: Any):
        self._tracer = tracer

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[OTelSpan]:
        # Exceptions are recorded explicitly by callers
        with self._tracer.start_as_current_span(
            name,
            attributes=attributes,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            yield OTelSpan(span)


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------


_tracer: TracerProtocol | None = None


def get_tracer() -> TracerProtocol:
    """
    Get the global tracer instance.

    Returns OTelTracer if tracing is enabled, otherwise NoOpTracer for
    zero overhead.
    """
    global _tracer
    if _tracer is not None:
        return _tracer

    from scaffold_retrieval.observability.config import get_config

    config = get_config()

    if not config.enabled:
        _tracer = NoOpTracer()
        return _tracer

    _tracer = OTelTracer(trace.get_tracer(config.service_name))
    return _tracer


def reset_tracer() -> None:
    """Reset tracer (useful for testing)."""
    global _tracer
    _tracer = None
