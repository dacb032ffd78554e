"""Builders for snapshot test data."""

from metricsbridge import (
    CounterSetItem,
    CounterValue,
    CounterValueSource,
    HistogramValue,
    MeterSetItem,
    MeterValue,
    MetricsContext,
    MetricsSnapshot,
    TimerValue,
    TimerValueSource,
    TimeUnit,
)


def make_counter(items: int = 3, report_set_items: bool = True) -> CounterValueSource:
    return CounterValueSource(
        "requests",
        CounterValue(
            count=30,
            items=tuple(
                CounterSetItem(f"route:{i}", 10, percent=100 / items, tags={"route": str(i)})
                for i in range(items)
            ),
        ),
        tags={"env": "test", "region": "eu"},
        report_set_items=report_set_items,
    )


def make_meter_value(items: int = 0) -> MeterValue:
    return MeterValue(
        count=120,
        mean_rate=2.0,
        one_minute_rate=1.5,
        five_minute_rate=1.2,
        fifteen_minute_rate=1.1,
        rate_unit=TimeUnit.SECONDS,
        items=tuple(
            MeterSetItem(
                f"status:{code}",
                50.0,
                MeterValue(count=60, mean_rate=1.0),
                tags={"status": str(code)},
            )
            for code in (200, 500)[:items]
        ),
    )


def make_histogram_value() -> HistogramValue:
    return HistogramValue(
        count=10,
        sum=55.0,
        last_value=10.0,
        max=10.0,
        mean=5.5,
        median=5.0,
        min=1.0,
        std_dev=2.87,
        percentile75=8.0,
        percentile95=10.0,
        percentile98=10.0,
        percentile99=10.0,
        percentile999=10.0,
        sample_size=10,
    )


def make_timer(items: int = 2) -> TimerValueSource:
    return TimerValueSource(
        "latency",
        TimerValue(rate=make_meter_value(items), histogram=make_histogram_value()),
        tags={"host": "a", "region": "eu"},
        duration_unit=TimeUnit.MILLISECONDS,
    )


def tracked(mock_client) -> list:
    """Records submitted to a mock client, in order."""
    return [c.args[0] for c in mock_client.track_metric.call_args_list]


def snapshot_of(*contexts: MetricsContext) -> MetricsSnapshot:
    return MetricsSnapshot(contexts=contexts)
