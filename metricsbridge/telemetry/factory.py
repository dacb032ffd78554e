"""Builds telemetry record shells from metric sources."""

from datetime import datetime

from ..sources import MetricValueSource
from .record import MetricTelemetry

CONTEXT_KEY = "context"


def metric_name(source: MetricValueSource) -> str:
    """Return the multidimensional name when the source has one, else its name."""
    return source.multidimensional_name if source.is_multidimensional else source.name


def create_metric(
    source: MetricValueSource,
    context_name: str,
    now: datetime,
    name: str | None = None,
) -> MetricTelemetry:
    """Create a record for ``source`` inside context ``context_name``.

    The record carries the ``context`` property followed by every tag of the
    source. Tags are copied last, so a tag named ``context`` wins.
    """
    record = MetricTelemetry(
        name=name if name is not None else metric_name(source),
        namespace=context_name,
        timestamp=now,
    )
    record.properties[CONTEXT_KEY] = context_name
    record.properties.update(source.tags)
    return record
