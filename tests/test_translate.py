"""Tests for per-kind translation of metric sources."""

from datetime import UTC, datetime

from builders import make_counter, make_histogram_value, make_meter_value, make_timer
from metricsbridge import (
    ApdexValue,
    ApdexValueSource,
    CounterValue,
    CounterValueSource,
    GaugeValueSource,
    HistogramValue,
    HistogramValueSource,
    MeterValue,
    MeterValueSource,
    MetricsContext,
    TimeUnit,
)
from metricsbridge.telemetry import TRANSLATORS, translate_context
from metricsbridge.telemetry.translate import (
    translate_apdex,
    translate_counter,
    translate_gauge,
    translate_histogram,
    translate_meter,
    translate_timer,
)

NOW = datetime(2026, 2, 3, 10, 30, tzinfo=UTC)


def test_translators_follow_export_order():
    assert list(TRANSLATORS) == [
        "apdex_scores",
        "counters",
        "gauges",
        "histograms",
        "meters",
        "timers",
    ]


class TestGauge:
    def test_single_record_carries_reading(self):
        source = GaugeValueSource("memory.used", 512.0, tags={"host": "a"})
        records = list(translate_gauge(source, "web", NOW))

        assert len(records) == 1
        assert records[0].sum == 512.0
        assert records[0].properties == {"context": "web", "host": "a"}


class TestCounter:
    def test_set_items_disabled_emits_base_only(self):
        records = list(translate_counter(make_counter(3, report_set_items=False), "web", NOW))

        assert len(records) == 1
        assert records[0].sum == 30
        assert records[0].count == 30

    def test_set_items_enabled_emits_base_and_items(self):
        records = list(translate_counter(make_counter(3), "web", NOW))

        assert len(records) == 4
        assert records[0].sum == 30
        for i, record in enumerate(records[1:]):
            assert record.name == "requests"
            assert record.namespace == "web"
            assert record.sum == 10
            assert record.properties["route"] == str(i)
            assert record.properties["item"] == f"route:{i}"
            assert record.properties["env"] == "test"
            assert record.properties["context"] == "web"

    def test_base_record_has_no_item_tags(self):
        base = next(translate_counter(make_counter(2), "web", NOW))
        assert "route" not in base.properties

    def test_percentages_omitted_when_disabled(self):
        source = CounterValueSource(
            "requests",
            make_counter(1).value,
            report_item_percentages=False,
        )
        item = list(translate_counter(source, "web", NOW))[1]
        assert "percent" not in item.properties

    def test_no_items_emits_base_only(self):
        source = CounterValueSource("requests", CounterValue(5))
        assert len(list(translate_counter(source, "web", NOW))) == 1


class TestHistogramAndApdex:
    def test_histogram_statistics_flattened(self):
        source = HistogramValueSource("payload", make_histogram_value())
        records = list(translate_histogram(source, "web", NOW))

        assert len(records) == 1
        record = records[0]
        assert record.sum == 55.0
        assert record.count == 10
        assert record.min == 1.0
        assert record.max == 10.0
        assert record.std_dev == 2.87
        assert record.properties["mean"] == 5.5
        assert record.properties["median"] == 5.0
        assert record.properties["p75"] == 8.0
        assert record.properties["p999"] == 10.0
        assert "last.user" not in record.properties

    def test_histogram_event_count_kept_beside_sample_size(self):
        source = HistogramValueSource(
            "payload", HistogramValue(count=500, sum=10.0, sample_size=100)
        )
        record = next(translate_histogram(source, "web", NOW))

        assert record.count == 100
        assert record.properties["count"] == 500

    def test_histogram_user_values_copied_when_present(self):
        source = HistogramValueSource(
            "payload", HistogramValue(last_user_value="u1", max_user_value="u2")
        )
        record = next(translate_histogram(source, "web", NOW))
        assert record.properties["last.user"] == "u1"
        assert record.properties["max.user"] == "u2"
        assert "min.user" not in record.properties

    def test_apdex_proportions(self):
        source = ApdexValueSource(
            "satisfaction",
            ApdexValue(score=0.85, satisfied=6, tolerating=3, frustrating=1, sample_size=10),
        )
        records = list(translate_apdex(source, "web", NOW))

        assert len(records) == 1
        record = records[0]
        assert record.sum == 0.85
        assert record.count == 10
        assert record.properties["satisfied"] == 0.6
        assert record.properties["tolerating"] == 0.3
        assert record.properties["frustrating"] == 0.1

    def test_apdex_empty_sample(self):
        source = ApdexValueSource("satisfaction", ApdexValue(score=1.0))
        record = next(translate_apdex(source, "web", NOW))
        assert record.properties["satisfied"] == 0.0


class TestMeter:
    def test_base_then_items_share_unit(self):
        source = MeterValueSource("hits", make_meter_value(items=2), tags={"host": "a"})
        records = list(translate_meter(source, "web", NOW))

        assert len(records) == 3
        base, *items = records
        assert base.sum == 120
        assert base.properties["rate.mean"] == 2.0
        assert base.properties["rate.1m"] == 1.5
        assert base.properties["unit"] == "per second"
        assert [r.properties["status"] for r in items] == ["200", "500"]
        for item in items:
            assert item.properties["unit"] == "per second"
            assert item.properties["rate.mean"] == 1.0
            assert item.properties["percent"] == 50.0
            assert item.properties["host"] == "a"

    def test_rate_unit_follows_meter(self):
        source = MeterValueSource("hits", MeterValue(rate_unit=TimeUnit.MINUTES))
        record = next(translate_meter(source, "web", NOW))
        assert record.properties["unit"] == "per minute"


class TestTimer:
    def test_two_items_yield_four_records(self):
        records = list(translate_timer(make_timer(items=2), "web", NOW))

        assert len(records) == 4
        assert {r.timestamp for r in records} == {NOW}

    def test_record_shapes(self):
        histogram, rate, *items = list(translate_timer(make_timer(items=1), "web", NOW))

        assert histogram.properties["unit"] == "ms"
        assert histogram.properties["p75"] == 8.0
        assert histogram.properties["count"] == 10
        assert histogram.std_dev == 2.87

        assert rate.properties["unit"] == "per second"
        assert rate.properties["rate.mean"] == 2.0
        assert "p75" not in rate.properties

        assert len(items) == 1
        assert items[0].properties["status"] == "200"
        assert items[0].properties["unit"] == "per second"


class TestTranslateContext:
    def test_fixed_kind_order(self, full_context):
        records = list(translate_context(full_context, NOW))

        # apdex, counter + 1 item, gauge, histogram, meter + 1 item, timer 2 + 1 item
        assert [r.name for r in records] == [
            "satisfaction",
            "requests",
            "requests",
            "memory.used",
            "payload",
            "hits",
            "hits",
            "latency",
            "latency",
            "latency",
        ]

    def test_every_record_carries_namespace_and_context(self, full_context):
        for record in translate_context(full_context, NOW):
            assert record.namespace == "web"
            assert record.properties["context"] == "web"
            assert record.timestamp == NOW
            assert record.properties["region"] == "eu"

    def test_source_order_preserved(self):
        context = MetricsContext(
            "web",
            gauges=tuple(GaugeValueSource(f"g{i}", float(i)) for i in range(5)),
        )
        assert [r.name for r in translate_context(context, NOW)] == [
            "g0",
            "g1",
            "g2",
            "g3",
            "g4",
        ]


class TestMetricsContext:
    def test_is_empty_without_sources(self):
        assert MetricsContext("web").is_empty

    def test_is_empty_false_with_one_source(self):
        assert not MetricsContext("web", gauges=(GaugeValueSource("g", 1.0),)).is_empty

    def test_filter_sources_can_empty_context(self, full_context):
        assert not full_context.is_empty
        assert full_context.filter_sources(lambda source: False).is_empty
