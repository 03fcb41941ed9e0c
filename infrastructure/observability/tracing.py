"""
OpenTelemetry Distributed Tracing

Configures OpenTelemetry for the API process. Spans are printed by the console
exporter when tracing is enabled; with tracing disabled the module tracer is a
no-op and service code can open spans unconditionally.
"""

import logging

from opentelemetry import trace
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)

_initialized = False


def setup_tracing(service_name: str = "b2b-marketplace-api", enable: bool = True) -> None:
    """
    Initialize OpenTelemetry tracing.

    Args:
        service_name: Name of the service for tracing
        enable: Enable/disable tracing
    """
    global _initialized

    if _initialized:
        logger.debug("Tracing already initialized. Skipping.")
        return

    if not enable:
        logger.info("Tracing disabled via configuration")
        return

    resource = Resource(attributes={SERVICE_NAME: service_name})
    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(tracer_provider)

    # Auto-instrument Django (traces all HTTP requests)
    DjangoInstrumentor().instrument()

    _initialized = True
    logger.info(f"OpenTelemetry tracing initialized for service: {service_name}")


def get_tracer(name: str = __name__) -> trace.Tracer:
    """
    Get tracer instance for creating custom spans.

    Example:
        tracer = get_tracer(__name__)

        with tracer.start_as_current_span("my_operation"):
            ...
    """
    return trace.get_tracer(name)


def add_span_attributes(span: trace.Span, **attributes) -> None:
    """Add custom attributes to a span, stringifying the values."""
    for key, value in attributes.items():
        span.set_attribute(key, str(value))


tracer = get_tracer("b2b_marketplace")
