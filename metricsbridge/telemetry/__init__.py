"""Telemetry records and the OTel pipeline delivering them.

This package provides the record builder and per-kind translators, the
backend client and its configuration, log-record exporters, output
formatting, and the diagnostics logger wrapper.
"""

from .client import BackendClient, TelemetryClient, TelemetryConfiguration
from .config import configure_telemetry, get_default_logger_provider
from .exporters import ConsoleTelemetryExporter, FileTelemetryExporter
from .factory import create_metric, metric_name
from .formatting import (
    OUTPUT_FORMAT,
    MetricsOutputFormatter,
    format_log_record,
    format_metric_record,
    format_record_json,
)
from .logger import OTelLogger
from .record import MetricTelemetry, to_log_record
from .translate import TRANSLATORS, translate_context

__all__ = [
    # records
    "MetricTelemetry",
    "to_log_record",
    "create_metric",
    "metric_name",
    "TRANSLATORS",
    "translate_context",
    # client
    "BackendClient",
    "TelemetryClient",
    "TelemetryConfiguration",
    # config
    "configure_telemetry",
    "get_default_logger_provider",
    # exporters
    "ConsoleTelemetryExporter",
    "FileTelemetryExporter",
    # formatting
    "OUTPUT_FORMAT",
    "MetricsOutputFormatter",
    "format_log_record",
    "format_metric_record",
    "format_record_json",
    # logger
    "OTelLogger",
]
