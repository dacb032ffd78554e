"""Convenience exports for the :mod:`metricsbridge` package."""

from .options import DEFAULT_FLUSH_INTERVAL, ReporterOptions  # noqa: F401
from .opt import flush_to, schedule_reports  # noqa: F401
from .reporter import MetricsReporter  # noqa: F401
from .sources import (  # noqa: F401
    ApdexValueSource,
    CounterValueSource,
    GaugeValueSource,
    HistogramValueSource,
    MeterValueSource,
    MetricsContext,
    MetricsFilter,
    MetricsSnapshot,
    MetricValueSource,
    TimerValueSource,
)
from .telemetry import (  # noqa: F401
    ConsoleTelemetryExporter,
    FileTelemetryExporter,
    MetricsOutputFormatter,
    MetricTelemetry,
    TelemetryClient,
    TelemetryConfiguration,
    configure_telemetry,
)
from .units import TimeUnit  # noqa: F401
from .values import (  # noqa: F401
    ApdexValue,
    CounterSetItem,
    CounterValue,
    HistogramValue,
    MeterSetItem,
    MeterValue,
    TimerValue,
)

__all__ = [
    # reporter
    "MetricsReporter",
    "ReporterOptions",
    "DEFAULT_FLUSH_INTERVAL",
    "flush_to",
    "schedule_reports",

    # snapshot model
    "MetricsSnapshot",
    "MetricsContext",
    "MetricsFilter",
    "MetricValueSource",
    "ApdexValueSource",
    "CounterValueSource",
    "GaugeValueSource",
    "HistogramValueSource",
    "MeterValueSource",
    "TimerValueSource",
    "TimeUnit",

    # values
    "ApdexValue",
    "CounterValue",
    "CounterSetItem",
    "HistogramValue",
    "MeterValue",
    "MeterSetItem",
    "TimerValue",

    # telemetry
    "MetricTelemetry",
    "TelemetryClient",
    "TelemetryConfiguration",
    "configure_telemetry",
    "ConsoleTelemetryExporter",
    "FileTelemetryExporter",
    "MetricsOutputFormatter",
]
