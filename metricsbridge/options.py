"""Reporter configuration."""

from dataclasses import dataclass
from datetime import timedelta

from opentelemetry.sdk._logs.export import LogRecordExporter

from .sources import MetricsFilter
from .telemetry.formatting import MetricsOutputFormatter

DEFAULT_FLUSH_INTERVAL = timedelta(seconds=10)


def resolve_flush_interval(interval: timedelta | None) -> timedelta:
    """Return ``interval`` when positive, else :data:`DEFAULT_FLUSH_INTERVAL`."""
    if interval is not None and interval > timedelta(0):
        return interval
    return DEFAULT_FLUSH_INTERVAL


@dataclass
class ReporterOptions:
    """Typed configuration of a :class:`~metricsbridge.reporter.MetricsReporter`.

    Attributes:
        instrumentation_key: Backend access key. Required.
        flush_interval: Interval between scheduled flushes; zero or negative
            means :data:`DEFAULT_FLUSH_INTERVAL`.
        filter: Optional context filter applied on every flush.
        formatter: Output formatter; also used by the default console exporter.
        exporter: Exporter receiving the records; console output when None.
        batch: Buffer records until the reporter flushes.
        service_name: Service identifier for resource attributes.
    """

    instrumentation_key: str
    flush_interval: timedelta = timedelta(0)
    filter: MetricsFilter | None = None
    formatter: MetricsOutputFormatter | None = None
    exporter: LogRecordExporter | None = None
    batch: bool = True
    service_name: str = "metricsbridge"

    def __post_init__(self):
        if not isinstance(self.instrumentation_key, str) or not self.instrumentation_key.strip():
            raise ValueError("instrumentation_key must be a non-empty string")
