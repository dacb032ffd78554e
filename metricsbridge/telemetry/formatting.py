"""Text and JSON rendering of records flowing through the OTel pipeline.

Metric records (see :func:`~metricsbridge.telemetry.record.to_log_record`)
and plain diagnostic log records share the same pipeline, so each formatter
handles both shapes.
"""

import json
from datetime import UTC, datetime
from typing import Literal

from opentelemetry._logs import LogRecord

from .record import NAME_ATTR, NAMESPACE_ATTR, PROPERTY_PREFIX

OUTPUT_FORMAT = Literal["text", "json"]


def _timestamp(record: LogRecord) -> datetime:
    timestamp_ns = record.timestamp or 0
    return datetime.fromtimestamp(timestamp_ns / 1e9, tz=UTC)


def _is_metric(attrs) -> bool:
    return NAME_ATTR in attrs


def format_log_record(record: LogRecord) -> str:
    """
    Format a diagnostic LogRecord as a human-readable line.

    Format: YYYY-MM-DDTHH:MM:SSZ [LEVEL] source\\t: body\\n
    """
    timestamp_str = _timestamp(record).strftime("%Y-%m-%dT%H:%M:%SZ")
    attrs = record.attributes or {}
    source = attrs.get("log.source", "Unknown")
    service = attrs.get("service.name", "")
    prefix = f"{service} " if service else ""
    return f"{timestamp_str} [{record.severity_text}] {prefix}{source}\t: {record.body!r}\n"


def format_metric_record(record: LogRecord) -> str:
    """
    Format a metric LogRecord as a human-readable line.

    Format: YYYY-MM-DDTHH:MM:SSZ [METRIC] namespace/name sum=.. count=.. {k=v, ...}\\n

    Only the ``metric.*`` fields present on the record are printed.
    """
    timestamp_str = _timestamp(record).strftime("%Y-%m-%dT%H:%M:%SZ")
    attrs = record.attributes or {}
    fields = " ".join(
        f"{key.removeprefix('metric.')}={attrs[key]}"
        for key in ("metric.sum", "metric.count", "metric.min", "metric.max", "metric.std_dev")
        if key in attrs
    )
    props = ", ".join(
        f"{key.removeprefix(PROPERTY_PREFIX)}={value}"
        for key, value in attrs.items()
        if key.startswith(PROPERTY_PREFIX)
    )
    return (
        f"{timestamp_str} [{record.severity_text}] "
        f"{attrs.get(NAMESPACE_ATTR, '')}/{attrs[NAME_ATTR]} {fields} {{{props}}}\n"
    )


def format_record_json(record: LogRecord) -> str:
    """
    Format a LogRecord as a JSON line.

    Metric records are laid out as ``name``/``namespace``/``value`` fields
    plus a ``properties`` object; other records keep their attributes as is.

    Returns:
        JSON string (single line) with newline terminator.
    """
    timestamp = _timestamp(record)
    attrs = dict(record.attributes) if record.attributes else {}

    data: dict = {
        "timestamp": timestamp.isoformat(),
        "timestamp_ns": record.timestamp or 0,
        "severity_text": record.severity_text,
    }
    if _is_metric(attrs):
        data["name"] = attrs.pop(NAME_ATTR)
        data["namespace"] = attrs.pop(NAMESPACE_ATTR, "")
        data["properties"] = {
            key.removeprefix(PROPERTY_PREFIX): attrs.pop(key)
            for key in list(attrs)
            if key.startswith(PROPERTY_PREFIX)
        }
        data["value"] = {key.removeprefix("metric."): value for key, value in attrs.items()}
    else:
        data["body"] = record.body
        data["attributes"] = attrs

    return json.dumps(data, default=str) + "\n"


class MetricsOutputFormatter:
    """Renders pipeline records as text or JSON lines.

    Example:
        >>> formatter = MetricsOutputFormatter("json")
        >>> exporter = ConsoleTelemetryExporter(formatter=formatter)
    """

    def __init__(self, format: OUTPUT_FORMAT = "text"):
        if format not in ("text", "json"):
            raise ValueError(f"Invalid format: {format}. Choose from 'text' or 'json'.")
        self.format = format

    @property
    def media_type(self) -> str:
        return "application/x-ndjson" if self.format == "json" else "text/plain"

    def __call__(self, record: LogRecord) -> str:
        if self.format == "json":
            return format_record_json(record)
        if _is_metric(record.attributes or {}):
            return format_metric_record(record)
        return format_log_record(record)
