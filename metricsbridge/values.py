"""Frozen metric payloads carried by value sources.

Each payload is the kind-specific part of a metric source: a running count
for counters, distribution statistics for histograms, rates for meters and
both for timers. Payloads are produced by the instrumentation layer and
never mutated during an export.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .units import TimeUnit


@dataclass(frozen=True)
class ApdexValue:
    """Apdex score with the sample split into its three zones."""

    score: float
    satisfied: int = 0
    tolerating: int = 0
    frustrating: int = 0
    sample_size: int = 0


@dataclass(frozen=True)
class CounterSetItem:
    """One labeled component of a counter.

    Attributes:
        item: Label of the item (usually rendered from its tags).
        count: Count attributed to this item.
        percent: Share of the counter total, in percent.
        tags: Dimensional labels of the item.
    """

    item: str
    count: int
    percent: float = 0.0
    tags: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CounterValue:
    count: int
    items: tuple[CounterSetItem, ...] = ()


@dataclass(frozen=True)
class HistogramValue:
    """Distribution statistics of a histogram sample."""

    count: int = 0
    sum: float = 0.0
    last_value: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    min: float = 0.0
    std_dev: float = 0.0
    percentile75: float = 0.0
    percentile95: float = 0.0
    percentile98: float = 0.0
    percentile99: float = 0.0
    percentile999: float = 0.0
    sample_size: int = 0
    last_user_value: str | None = None
    max_user_value: str | None = None
    min_user_value: str | None = None


@dataclass(frozen=True)
class MeterValue:
    """Rate statistics of a meter, expressed per ``rate_unit``."""

    count: int = 0
    mean_rate: float = 0.0
    one_minute_rate: float = 0.0
    five_minute_rate: float = 0.0
    fifteen_minute_rate: float = 0.0
    rate_unit: TimeUnit = TimeUnit.SECONDS
    items: tuple["MeterSetItem", ...] = ()


@dataclass(frozen=True)
class MeterSetItem:
    """One labeled component of a meter, with its own rates."""

    item: str
    percent: float
    value: MeterValue
    tags: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TimerValue:
    rate: MeterValue
    histogram: HistogramValue
