import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore

logger = logging.getLogger(__name__)

# Healthcheck polls are not traced.
EXCLUDED_URLS = "healthcheck"


def setup_opentelemetry(service_name: str, app: FastAPI) -> TracerProvider:
    logger.info("Setting up instrumentation...")

    trace_provider = TracerProvider(
        resource=Resource(attributes={SERVICE_NAME: service_name})
    )
    trace_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    trace.set_tracer_provider(trace_provider)

    FastAPIInstrumentor.instrument_app(  # type: ignore
        app, tracer_provider=trace_provider, excluded_urls=EXCLUDED_URLS
    )
    logger.info(f"FastAPI Instrumentation enabled for service '{service_name}'.")

    return trace_provider
