"""OTel logger wrapper used for the bridge's own diagnostics.

Provides :class:`OTelLogger`, a thin wrapper around the OTel Logger API
with convenience ``info``/``debug``/``warning``/``error`` methods. A wrapper
built without a logger is silent, so components can make diagnostics
optional.
"""

import time

from opentelemetry._logs import LogRecord, SeverityNumber


class OTelLogger:
    """Thin wrapper for OTel Logger with convenient emit methods.

    Example:
        >>> logger = OTelLogger(logger_provider.get_logger("metricsbridge"), source="MetricsReporter")
        >>> logger.info("Using metrics reporter", flush_interval="0:00:10")
        >>> OTelLogger(None, source="Quiet").info("dropped")
    """

    def __init__(
        self,
        logger,
        source: str,
        attributes: dict[str, str] | None = None,
        min_severity: SeverityNumber | None = None,
    ):
        """Initialize OTel logger wrapper.

        Args:
            logger: OTel Logger instance from LoggerProvider.get_logger(),
                or None to drop every record.
            source: Source identifier for log.source attribute
            attributes: Attributes attached to every record.
            min_severity: Optional minimum severity -- records below this
                level are silently dropped.
        """
        self._logger = logger
        self._source = source
        self._attributes = attributes or {}
        self._min_severity = min_severity

    def info(self, message: str, **attrs) -> None:
        """Emit INFO level log."""
        self._emit(SeverityNumber.INFO, "INFO", message, attrs)

    def debug(self, message: str, **attrs) -> None:
        """Emit DEBUG level log."""
        self._emit(SeverityNumber.DEBUG, "DEBUG", message, attrs)

    def warning(self, message: str, **attrs) -> None:
        """Emit WARN level log."""
        self._emit(SeverityNumber.WARN, "WARN", message, attrs)

    def error(self, message: str, **attrs) -> None:
        """Emit ERROR level log."""
        self._emit(SeverityNumber.ERROR, "ERROR", message, attrs)

    def _emit(
        self,
        severity_number: SeverityNumber,
        severity_text: str,
        message: str,
        attrs: dict,
    ) -> None:
        if self._logger is None:
            return
        if self._min_severity and severity_number.value < self._min_severity.value:
            return
        merged = {
            "log.source": self._source,
            **self._attributes,
            **attrs,
        }
        record = LogRecord(
            timestamp=time.time_ns(),
            body=message,
            severity_text=severity_text,
            severity_number=severity_number,
            attributes=merged,
        )
        self._logger.emit(record)
