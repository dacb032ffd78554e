"""Snapshot data model: metric value sources grouped by named contexts.

Structure:
    MetricsSnapshot
      └─ MetricsContext (one per named context, in order)
           ├─ apdex_scores: ApdexValueSource
           ├─ counters:     CounterValueSource
           ├─ gauges:       GaugeValueSource
           ├─ histograms:   HistogramValueSource
           ├─ meters:       MeterValueSource
           └─ timers:       TimerValueSource

Every source carries a flat ``name``, an optional ``multidimensional_name``
and an ordered tag mapping. The whole tree is immutable; filtering builds
new contexts instead of editing existing ones.

Example:
    >>> ctx = MetricsContext(
    ...     "web",
    ...     gauges=(GaugeValueSource("memory.used", 512.0, tags={"host": "a"}),),
    ... )
    >>> snapshot = MetricsSnapshot(contexts=(ctx,))
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Union

from .units import TimeUnit
from .values import ApdexValue, CounterValue, HistogramValue, MeterValue, TimerValue


@dataclass(frozen=True)
class MetricValueSource:
    """Fields shared by every metric kind."""

    name: str
    tags: Mapping[str, str] = field(default_factory=dict, kw_only=True)
    multidimensional_name: str | None = field(default=None, kw_only=True)

    @property
    def is_multidimensional(self) -> bool:
        return self.multidimensional_name is not None


@dataclass(frozen=True)
class ApdexValueSource(MetricValueSource):
    value: ApdexValue


@dataclass(frozen=True)
class CounterValueSource(MetricValueSource):
    """Counter source.

    ``report_set_items`` controls whether set items are exported as their own
    records; ``report_item_percentages`` adds each item's share of the total.
    """

    value: CounterValue
    report_set_items: bool = field(default=True, kw_only=True)
    report_item_percentages: bool = field(default=True, kw_only=True)


@dataclass(frozen=True)
class GaugeValueSource(MetricValueSource):
    value: float


@dataclass(frozen=True)
class HistogramValueSource(MetricValueSource):
    value: HistogramValue


@dataclass(frozen=True)
class MeterValueSource(MetricValueSource):
    value: MeterValue


@dataclass(frozen=True)
class TimerValueSource(MetricValueSource):
    value: TimerValue
    duration_unit: TimeUnit = field(default=TimeUnit.MILLISECONDS, kw_only=True)


AnyValueSource = Union[
    ApdexValueSource,
    CounterValueSource,
    GaugeValueSource,
    HistogramValueSource,
    MeterValueSource,
    TimerValueSource,
]

# Bucket attributes of MetricsContext, in export order.
METRIC_KINDS = ("apdex_scores", "counters", "gauges", "histograms", "meters", "timers")


@dataclass(frozen=True)
class MetricsContext:
    """A named group of metric sources, one tuple per metric kind."""

    context: str
    apdex_scores: tuple[ApdexValueSource, ...] = ()
    counters: tuple[CounterValueSource, ...] = ()
    gauges: tuple[GaugeValueSource, ...] = ()
    histograms: tuple[HistogramValueSource, ...] = ()
    meters: tuple[MeterValueSource, ...] = ()
    timers: tuple[TimerValueSource, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not any(getattr(self, kind) for kind in METRIC_KINDS)

    def filter(
        self, metrics_filter: Callable[["MetricsContext"], "MetricsContext"]
    ) -> "MetricsContext":
        """Return the view of this context produced by ``metrics_filter``."""
        return metrics_filter(self)

    def filter_sources(
        self, predicate: Callable[[AnyValueSource], bool]
    ) -> "MetricsContext":
        """Return a new context keeping only the sources ``predicate`` accepts."""
        return replace(
            self,
            **{
                kind: tuple(s for s in getattr(self, kind) if predicate(s))
                for kind in METRIC_KINDS
            },
        )


MetricsFilter = Callable[[MetricsContext], MetricsContext]


@dataclass(frozen=True)
class MetricsSnapshot:
    """One frozen capture of all contexts."""

    contexts: tuple[MetricsContext, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
