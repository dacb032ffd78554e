"""Metrics reporter: exports snapshots as telemetry records.

:class:`MetricsReporter` owns the flush cycle. Each call to
:meth:`MetricsReporter.flush` walks every context of a snapshot, applies the
optional filter, translates every source into records (see
:mod:`metricsbridge.telemetry.translate`), submits them to the backend client
and flushes the client once if anything was submitted.
"""

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol

from opentelemetry._logs import LoggerProvider

from .options import ReporterOptions, resolve_flush_interval
from .sources import MetricsFilter, MetricsSnapshot
from .telemetry.client import BackendClient, TelemetryClient, TelemetryConfiguration
from .telemetry.exporters import ConsoleTelemetryExporter
from .telemetry.formatting import MetricsOutputFormatter
from .telemetry.logger import OTelLogger
from .telemetry.translate import translate_context


class Cancellation(Protocol):
    """Anything exposing ``is_set()``, e.g. :class:`threading.Event`."""

    def is_set(self) -> bool: ...


class MetricsReporter:
    """Exports metrics snapshots to a telemetry backend.

    The backend configuration and client are created at construction and
    released by :meth:`dispose` (also called when leaving a ``with`` block).
    An injected ``client`` is used as is and no configuration is built.

    Diagnostics are optional -- pass ``logger_provider`` to enable them.
    Without a provider, the reporter operates silently.

    Example:
        >>> options = ReporterOptions("my-key", flush_interval=timedelta(seconds=30))
        >>> with MetricsReporter(options) as reporter:
        ...     reporter.flush(snapshot)
        True
    """

    def __init__(
        self,
        options: ReporterOptions,
        *,
        client: BackendClient | None = None,
        logger_provider: LoggerProvider | None = None,
    ):
        if options is None:
            raise ValueError("options must not be None")

        self._logger = OTelLogger(
            logger_provider.get_logger("metricsbridge.MetricsReporter")
            if logger_provider
            else None,
            source="MetricsReporter",
        )

        self.formatter: MetricsOutputFormatter | None = options.formatter
        self.filter: MetricsFilter | None = options.filter
        self.flush_interval = options.flush_interval

        # an injected client brings its own pipeline
        self._configuration: TelemetryConfiguration | None = None
        if client is None:
            exporter = options.exporter
            if exporter is None:
                exporter = ConsoleTelemetryExporter(formatter=self.formatter)
            self._configuration = TelemetryConfiguration(
                options.instrumentation_key,
                exporter=exporter,
                batch=options.batch,
                service_name=options.service_name,
            )
            client = TelemetryClient(self._configuration)
        self._client: BackendClient = client
        self._disposed = False

        self._logger.info(
            f"Using metrics reporter MetricsReporter. FlushInterval: {self.flush_interval}"
        )

    @property
    def flush_interval(self) -> timedelta:
        return self._flush_interval

    @flush_interval.setter
    def flush_interval(self, value: timedelta | None) -> None:
        self._flush_interval = resolve_flush_interval(value)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def flush(
        self,
        snapshot: MetricsSnapshot | None,
        cancellation: Cancellation | None = None,
    ) -> bool:
        """Translate ``snapshot`` into records and submit them.

        Args:
            snapshot: Snapshot to export.
            cancellation: Checked once before anything is submitted.

        Returns:
            False when cancelled or when there is no snapshot, True otherwise,
            including when every source was filtered out.
        """
        if (cancellation is not None and cancellation.is_set()) or snapshot is None:
            return False

        started = time.perf_counter()
        now = datetime.now(UTC)
        count = 0
        for ctx in snapshot.contexts:
            context = ctx.filter(self.filter) if self.filter is not None else ctx
            if context.is_empty:
                continue
            for record in translate_context(context, now):
                self._client.track_metric(record)
                count += 1

        if count <= 0:
            return True

        self._client.flush()
        self._logger.debug(
            f"Flushed TelemetryClient; {count} records; "
            f"elapsed: {time.perf_counter() - started:.6f}s.",
            records=count,
        )
        return True

    def dispose(self) -> None:
        """Release the backend configuration. Safe to call more than once."""
        if self._disposed:
            return

        if self._configuration is not None:
            self._configuration.dispose()
        self._disposed = True

    def __enter__(self) -> "MetricsReporter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
