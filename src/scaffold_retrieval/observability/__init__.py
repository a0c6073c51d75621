"""
Observability Module - OpenTelemetry tracing for retrieval requests.

USAGE:
------
# At application startup:
from scaffold_retrieval.observability import init_tracing

init_tracing()  # Installs an exporter if TRACING_ENABLED=true

# In code that needs tracing:
from scaffold_retrieval.observability import get_tracer

tracer = get_tracer()
with tracer.start_span("my_operation", attributes={"key": "value"}) as span:
    # ... do work ...
    span.set_attribute("result", "success")
"""

from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from scaffold_retrieval.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from scaffold_retrieval.observability.tracer import (
    TracerProtocol,
    SpanProtocol,
    NoOpTracer,
    NoOpSpan,
    OTelTracer,
    get_tracer,
    reset_tracer,
)
from scaffold_retrieval.observability.attributes import (
    GEN_AI_REQUEST_MODEL,
    RETRIEVAL_K,
    RETRIEVAL_THRESHOLD,
    RETRIEVAL_RESULT_COUNT,
    RETRIEVAL_DEGRADED_COUNT,
    RETRIEVAL_QUERY_LENGTH,
    retrieval_request_attributes,
    retrieval_outcome_attributes,
)

logger = logging.getLogger(__name__)

_provider: TracerProvider | None = None


def init_tracing(config: TracingConfig | None = None) -> bool:
    """
    Initialize OpenTelemetry tracing.

    Call once at process start. Installs an SDK TracerProvider that
    exports to OTLP/HTTP when an endpoint is configured, else to stdout.

    Returns:
        True if tracing was initialized, False if disabled
    """
    global _provider
    if _provider is not None:
        return True

    config = config or get_config()

    if not config.enabled:
        logger.debug("Tracing disabled")
        return False

    if config.otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=config.otlp_endpoint)
        logger.info(f"Tracing exporting to: {config.otlp_endpoint}")
    else:
        exporter = ConsoleSpanExporter()
        logger.info("Tracing exporting to console")

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: config.service_name}))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    _provider = provider
    reset_tracer()
    return True


def shutdown_tracing() -> None:
    """Flush pending spans and reset tracing state."""
    global _provider

    if _provider is None:
        return

    _provider.shutdown()
    reset_tracer()
    reset_config()
    _provider = None


__all__ = [
    # Initialization
    "init_tracing",
    "shutdown_tracing",
    # Config
    "TracingConfig",
    "get_config",
    "reset_config",
    # Tracer
    "TracerProtocol",
    "SpanProtocol",
    "NoOpTracer",
    "NoOpSpan",
    "OTelTracer",
    "get_tracer",
    "reset_tracer",
    # Attributes
    "GEN_AI_REQUEST_MODEL",
    "RETRIEVAL_K",
    "RETRIEVAL_THRESHOLD",
    "RETRIEVAL_RESULT_COUNT",
    "RETRIEVAL_DEGRADED_COUNT",
    "RETRIEVAL_QUERY_LENGTH",
    "retrieval_request_attributes",
    "retrieval_outcome_attributes",
]
