"""OpenTelemetry tracer provider for the search service.

Spans come from three places: incoming HTTP requests (FastAPI), record-store
and audit SQL (SQLAlchemy), and the search pipeline itself (see tracing.traced).
Exporters: "otlp" (gRPC collector), "console", or "none".
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Health probes and the landing page are not worth a span each.
UNTRACED_URLS = "/api/v1/health,/$"


class TelemetryConfig:
    """Owns the tracer provider and the instrumentors attached to it."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )

    @property
    def active(self) -> bool:
        return self.enabled and self.tracer_provider is not None

    def _build_exporter(
        self, exporter_type: str, otlp_endpoint: str | None
    ) -> SpanExporter | None:
        if exporter_type == "none":
            return None
        if exporter_type == "otlp":
            if otlp_endpoint:
                logger.info("Exporting spans over OTLP to %s", otlp_endpoint)
                return OTLPSpanExporter(
                    endpoint=otlp_endpoint,
                    insecure=otlp_endpoint.startswith("http://"),
                )
            logger.warning("otlp exporter selected without an endpoint; using console")
        elif exporter_type != "console":
            logger.warning("Unknown span exporter %r; using console", exporter_type)
        return ConsoleSpanExporter()

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Returns:
            The provider, or None when telemetry is disabled or setup failed.
            A failure here never prevents the service from serving searches.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = self._build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Telemetry setup failed; continuing without tracing")
            return None
        self.tracer_provider = provider
        logger.info(
            "Tracing %s %s (%s, exporter=%s, sample_rate=%s)",
            self.service_name,
            self.service_version,
            self.environment,
            exporter_type,
            sample_rate,
        )
        return provider

    def _instrument(self, target: str, install: Callable[[], None]) -> None:
        if not self.active:
            return
        try:
            install()
        except Exception:
            logger.exception("Could not instrument %s", target)

    def instrument_fastapi(self, app: FastAPI) -> None:
        self._instrument(
            "FastAPI",
            lambda: FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=UNTRACED_URLS,
            ),
        )

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        """Trace record-store reads and audit inserts on the given engine."""
        self._instrument(
            "SQLAlchemy",
            lambda: SQLAlchemyInstrumentor().instrument(
                engine=engine.sync_engine,
                tracer_provider=self.tracer_provider,
                enable_commenter=True,
            ),
        )

    def instrument_logging(self) -> None:
        """Add otelTraceID/otelSpanID to log records."""
        self._instrument(
            "logging",
            lambda: LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider,
                set_logging_format=False,
            ),
        )

    def shutdown(self) -> None:
        """Flush pending spans. Called once from the lifespan on shutdown."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Telemetry shutdown failed")
        finally:
            self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
