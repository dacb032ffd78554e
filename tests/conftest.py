"""Shared test fixtures for metricsbridge tests."""

from unittest.mock import MagicMock

import pytest

from opentelemetry.sdk._logs.export import LogRecordExportResult

from builders import make_counter, make_histogram_value, make_meter_value, make_timer
from metricsbridge import (
    ApdexValue,
    ApdexValueSource,
    GaugeValueSource,
    HistogramValueSource,
    MeterValueSource,
    MetricsContext,
    MetricsReporter,
    ReporterOptions,
)


@pytest.fixture
def full_context() -> MetricsContext:
    """A context with one source of every kind."""
    return MetricsContext(
        "web",
        apdex_scores=(
            ApdexValueSource(
                "satisfaction",
                ApdexValue(score=0.9, satisfied=8, tolerating=2, frustrating=0, sample_size=10),
                tags={"region": "eu"},
            ),
        ),
        counters=(make_counter(items=1),),
        gauges=(GaugeValueSource("memory.used", 512.0, tags={"host": "a", "region": "eu"}),),
        histograms=(HistogramValueSource("payload", make_histogram_value(), tags={"region": "eu"}),),
        meters=(MeterValueSource("hits", make_meter_value(items=1), tags={"region": "eu"}),),
        timers=(make_timer(items=1),),
    )


@pytest.fixture
def mock_client():
    """Backend client double recording track_metric / flush calls."""
    return MagicMock()


@pytest.fixture
def mock_exporter():
    exporter = MagicMock()
    exporter.export.return_value = LogRecordExportResult.SUCCESS
    return exporter


@pytest.fixture
def reporter(mock_client, mock_exporter):
    """Reporter wired to a mock client, disposed after the test."""
    options = ReporterOptions("test-key", exporter=mock_exporter, batch=False)
    reporter = MetricsReporter(options, client=mock_client)
    yield reporter
    reporter.dispose()


