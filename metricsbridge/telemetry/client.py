"""Backend client submitting telemetry records through an OTel pipeline.

:class:`TelemetryConfiguration` owns the ``LoggerProvider`` (and therefore
the processors and exporter behind it) and must be disposed;
:class:`TelemetryClient` is a lightweight handle that emits records into it.
"""

from typing import Protocol, runtime_checkable

from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import LogRecordExporter

from .config import configure_telemetry
from .record import MetricTelemetry, to_log_record


@runtime_checkable
class BackendClient(Protocol):
    """What the reporter needs from a backend client."""

    def track_metric(self, record: MetricTelemetry) -> None: ...

    def flush(self) -> None: ...


class TelemetryConfiguration:
    """Backend access settings and the OTel pipeline built from them.

    Args:
        instrumentation_key: Backend access key.
        exporter: Exporter receiving the records.
        batch: Buffer records in a BatchLogRecordProcessor until flushed.
        service_name: Service identifier for resource attributes.
    """

    def __init__(
        self,
        instrumentation_key: str,
        exporter: LogRecordExporter | None = None,
        batch: bool = True,
        service_name: str = "metricsbridge",
    ):
        self.instrumentation_key = instrumentation_key
        self.logger_provider: LoggerProvider = configure_telemetry(
            service_name=service_name,
            instrumentation_key=instrumentation_key,
            exporter=exporter,
            batch=batch,
        )

    def dispose(self) -> None:
        """Flush and shut down the pipeline."""
        self.logger_provider.shutdown()


class TelemetryClient:
    """Submits :class:`MetricTelemetry` records to a configured pipeline.

    ``track_metric`` is fire-and-forget; ``flush`` asks the processors to
    deliver whatever they buffered.
    """

    def __init__(self, configuration: TelemetryConfiguration):
        self._configuration = configuration
        self._logger = configuration.logger_provider.get_logger("metricsbridge.telemetry")

    def track_metric(self, record: MetricTelemetry) -> None:
        self._logger.emit(to_log_record(record))

    def flush(self) -> None:
        self._configuration.logger_provider.force_flush()
