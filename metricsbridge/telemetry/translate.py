"""Per-kind translation of metric sources into telemetry records.

Each translator is a generator yielding the records of one source in a
fixed order: base record first, then one record per set item. Translators
are registered in :data:`TRANSLATORS`, keyed by the bucket attribute of
:class:`~metricsbridge.sources.MetricsContext` they consume, in export order.
"""

from collections.abc import Callable, Iterator
from datetime import datetime

from ..sources import (
    ApdexValueSource,
    CounterValueSource,
    GaugeValueSource,
    HistogramValueSource,
    MetricsContext,
    MeterValueSource,
    TimerValueSource,
)
from ..values import ApdexValue, CounterSetItem, HistogramValue, MeterValue
from .factory import create_metric
from .record import MetricTelemetry

UNIT_KEY = "unit"
ITEM_KEY = "item"
PERCENT_KEY = "percent"

Translator = Callable[..., Iterator[MetricTelemetry]]


# =============================================================================
# Payload copying
# =============================================================================


def _copy_apdex(value: ApdexValue, record: MetricTelemetry) -> None:
    size = value.sample_size
    record.sum = value.score
    record.count = size
    record.properties["score"] = value.score
    record.properties["satisfied"] = value.satisfied / size if size else 0.0
    record.properties["tolerating"] = value.tolerating / size if size else 0.0
    record.properties["frustrating"] = value.frustrating / size if size else 0.0


def _copy_histogram(value: HistogramValue, record: MetricTelemetry) -> None:
    record.sum = value.sum
    record.count = value.sample_size
    record.min = value.min
    record.max = value.max
    record.std_dev = value.std_dev
    record.properties.update(
        {
            "count": value.count,
            "mean": value.mean,
            "median": value.median,
            "last": value.last_value,
            "p75": value.percentile75,
            "p95": value.percentile95,
            "p98": value.percentile98,
            "p99": value.percentile99,
            "p999": value.percentile999,
        }
    )
    # user values are optional labels of the sample that produced the stat
    for key, user_value in (
        ("last.user", value.last_user_value),
        ("min.user", value.min_user_value),
        ("max.user", value.max_user_value),
    ):
        if user_value is not None:
            record.properties[key] = user_value


def _copy_rate(value: MeterValue, record: MetricTelemetry, unit: str) -> None:
    record.sum = value.count
    record.count = value.count
    record.properties.update(
        {
            "rate.mean": value.mean_rate,
            "rate.1m": value.one_minute_rate,
            "rate.5m": value.five_minute_rate,
            "rate.15m": value.fifteen_minute_rate,
            UNIT_KEY: unit,
        }
    )


def _forward_counter_item(
    item: CounterSetItem, record: MetricTelemetry, report_percentage: bool
) -> None:
    record.sum = item.count
    record.count = item.count
    record.properties[ITEM_KEY] = item.item
    if report_percentage:
        record.properties[PERCENT_KEY] = item.percent
    record.properties.update(item.tags)


def _meter_items(
    source: MeterValueSource | TimerValueSource,
    value: MeterValue,
    context_name: str,
    now: datetime,
    unit: str,
) -> Iterator[MetricTelemetry]:
    for item in value.items:
        record = create_metric(source, context_name, now)
        _copy_rate(item.value, record, unit)
        record.properties[ITEM_KEY] = item.item
        record.properties[PERCENT_KEY] = item.percent
        record.properties.update(item.tags)
        yield record


# =============================================================================
# Translators
# =============================================================================


def translate_apdex(
    source: ApdexValueSource, context_name: str, now: datetime
) -> Iterator[MetricTelemetry]:
    record = create_metric(source, context_name, now)
    _copy_apdex(source.value, record)
    yield record


def translate_counter(
    source: CounterValueSource, context_name: str, now: datetime
) -> Iterator[MetricTelemetry]:
    """Yield the counter total, then its set items when enabled on the source."""
    record = create_metric(source, context_name, now)
    record.sum = source.value.count
    record.count = source.value.count
    yield record

    if source.report_set_items:
        for item in source.value.items:
            record = create_metric(source, context_name, now)
            _forward_counter_item(item, record, source.report_item_percentages)
            yield record


def translate_gauge(
    source: GaugeValueSource, context_name: str, now: datetime
) -> Iterator[MetricTelemetry]:
    record = create_metric(source, context_name, now)
    record.sum = source.value
    yield record


def translate_histogram(
    source: HistogramValueSource, context_name: str, now: datetime
) -> Iterator[MetricTelemetry]:
    record = create_metric(source, context_name, now)
    _copy_histogram(source.value, record)
    yield record


def translate_meter(
    source: MeterValueSource, context_name: str, now: datetime
) -> Iterator[MetricTelemetry]:
    """Yield the aggregate rates, then one record per set item."""
    unit = source.value.rate_unit.rate_string()
    record = create_metric(source, context_name, now)
    _copy_rate(source.value, record, unit)
    yield record

    yield from _meter_items(source, source.value, context_name, now, unit)


def translate_timer(
    source: TimerValueSource, context_name: str, now: datetime
) -> Iterator[MetricTelemetry]:
    """Yield the duration distribution, the rates, then the rate set items."""
    record = create_metric(source, context_name, now)
    record.properties[UNIT_KEY] = source.duration_unit.short_string()
    _copy_histogram(source.value.histogram, record)
    yield record

    rate = source.value.rate
    unit = rate.rate_unit.rate_string()
    record = create_metric(source, context_name, now)
    _copy_rate(rate, record, unit)
    yield record

    yield from _meter_items(source, rate, context_name, now, unit)


TRANSLATORS: dict[str, Translator] = {
    "apdex_scores": translate_apdex,
    "counters": translate_counter,
    "gauges": translate_gauge,
    "histograms": translate_histogram,
    "meters": translate_meter,
    "timers": translate_timer,
}


def translate_context(context: MetricsContext, now: datetime) -> Iterator[MetricTelemetry]:
    """Yield the records of every source of ``context`` in export order."""
    for kind, translator in TRANSLATORS.items():
        for source in getattr(context, kind):
            yield from translator(source, context.context, now)
