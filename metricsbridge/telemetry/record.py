"""Telemetry record emitted for each translated metric.

Provides :class:`MetricTelemetry`, the unit submitted to the backend client,
and :func:`to_log_record`, which lays a record out as an OTel log record so
it can travel through a ``LoggerProvider`` pipeline.
"""

from dataclasses import dataclass, field
from datetime import datetime

from opentelemetry._logs import LogRecord, SeverityNumber

PropertyValue = str | float | int

# Attribute layout of a metric carried as an OTel log record
NAME_ATTR = "metric.name"
NAMESPACE_ATTR = "metric.namespace"
PROPERTY_PREFIX = "property."
METRIC_SEVERITY_TEXT = "METRIC"


@dataclass
class MetricTelemetry:
    """One discrete data point for the observability backend.

    Attributes:
        name: Metric name.
        namespace: Name of the context the metric belongs to.
        timestamp: Capture time, shared by every record of one flush.
        sum: Primary numeric value (gauge reading, count, score...).
        count: Number of samples or events behind ``sum``.
        min: Smallest sample, for distributions.
        max: Largest sample, for distributions.
        std_dev: Standard deviation, for distributions.
        properties: ``context`` plus copied tags and kind-specific statistics.
    """

    name: str
    namespace: str
    timestamp: datetime
    sum: float = 0.0
    count: int | None = None
    min: float | None = None
    max: float | None = None
    std_dev: float | None = None
    properties: dict[str, PropertyValue] = field(default_factory=dict)


def to_log_record(record: MetricTelemetry) -> LogRecord:
    """Convert a :class:`MetricTelemetry` into an OTel ``LogRecord``.

    The record name becomes the body; numeric fields become ``metric.*``
    attributes (unset ones are omitted) and properties are prefixed with
    ``property.``.
    """
    attributes: dict[str, PropertyValue] = {
        NAME_ATTR: record.name,
        NAMESPACE_ATTR: record.namespace,
        "metric.sum": record.sum,
    }
    for key, value in (
        ("metric.count", record.count),
        ("metric.min", record.min),
        ("metric.max", record.max),
        ("metric.std_dev", record.std_dev),
    ):
        if value is not None:
            attributes[key] = value
    for key, value in record.properties.items():
        attributes[f"{PROPERTY_PREFIX}{key}"] = value

    return LogRecord(
        timestamp=round(record.timestamp.timestamp() * 1e6) * 1000,
        body=record.name,
        severity_text=METRIC_SEVERITY_TEXT,
        severity_number=SeverityNumber.INFO,
        attributes=attributes,
    )
