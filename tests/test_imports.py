"""Tests for the public import surface."""


def test_basic_imports():
    import metricsbridge

    for name in (
        "MetricsReporter",
        "ReporterOptions",
        "MetricsSnapshot",
        "MetricsContext",
        "GaugeValueSource",
        "TimerValueSource",
        "MetricTelemetry",
        "flush_to",
        "schedule_reports",
    ):
        assert hasattr(metricsbridge, name), name


def test_all_exports():
    import metricsbridge
    import metricsbridge.telemetry

    for module in (metricsbridge, metricsbridge.telemetry):
        for export in module.__all__:
            assert hasattr(module, export), f"{export} missing from {module.__name__}"
