"""OTel provider configuration for metricsbridge.

Provides :func:`configure_telemetry` (logger provider carrying telemetry
records or diagnostics) and :func:`get_default_logger_provider` (lazy
singleton with console output).
"""

from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import (
    BatchLogRecordProcessor,
    LogRecordExporter,
    SimpleLogRecordProcessor,
)
from opentelemetry.sdk.resources import Resource

from .exporters import ConsoleTelemetryExporter


def configure_telemetry(
    service_name: str = "metricsbridge",
    service_version: str = "",
    instrumentation_key: str = "",
    exporter: LogRecordExporter | None = None,
    batch: bool = True,
) -> LoggerProvider:
    """
    Configure an OTel LoggerProvider for metricsbridge components.

    Does NOT set the global provider; the returned provider is meant for
    explicit injection.

    Args:
        service_name: Service identifier for resource attributes.
        service_version: Service version for resource attributes.
        instrumentation_key: Backend access key, recorded as the
            ``telemetry.instrumentation_key`` resource attribute when set.
        exporter: Optional log-record exporter
            (e.g., FileTelemetryExporter, OTLPLogExporter).
        batch: If True, use BatchLogRecordProcessor
            (better for network exporters). If False, use
            SimpleLogRecordProcessor (immediate, better for console).

    Returns:
        Configured :class:`LoggerProvider`.

    Example:
        >>> provider = configure_telemetry(
        ...     service_name="my-app",
        ...     exporter=ConsoleTelemetryExporter(),
        ...     batch=False,
        ... )
        >>> reporter = MetricsReporter(options, logger_provider=provider)
    """
    attributes = {
        "service.name": service_name,
        "service.version": service_version,
    }
    if instrumentation_key:
        attributes["telemetry.instrumentation_key"] = instrumentation_key
    logger_provider = LoggerProvider(resource=Resource.create(attributes))

    if exporter:
        if batch:
            logger_provider.add_log_record_processor(BatchLogRecordProcessor(exporter))
        else:
            logger_provider.add_log_record_processor(SimpleLogRecordProcessor(exporter))

    return logger_provider


# =============================================================================
# Default Provider
# =============================================================================


_default_logger_provider: LoggerProvider | None = None


def get_default_logger_provider(service_name: str = "metricsbridge") -> LoggerProvider:
    """Get or create the default diagnostics provider with console output.

    Lazily initializes the provider on first call and returns the same
    provider on subsequent calls. Output goes to stderr through
    ConsoleTelemetryExporter with immediate (non-batched) processing.

    Args:
        service_name: Service name for the default provider (only used on first call).
    """
    global _default_logger_provider

    if _default_logger_provider is None:
        _default_logger_provider = configure_telemetry(
            service_name=service_name,
            exporter=ConsoleTelemetryExporter(),
            batch=False,  # Immediate output for CLI
        )
    return _default_logger_provider
