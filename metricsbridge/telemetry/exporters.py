"""OTel log-record exporters delivering telemetry records.

Provides :class:`ConsoleTelemetryExporter` (stderr output) and
:class:`FileTelemetryExporter` (timestamped files with rotation by record
count). Both render records through a
:class:`~metricsbridge.telemetry.formatting.MetricsOutputFormatter`.
"""

import os
import sys
from collections.abc import Sequence
from datetime import datetime
from io import TextIOWrapper

from opentelemetry.sdk._logs._internal import ReadableLogRecord
from opentelemetry.sdk._logs.export import (
    LogRecordExporter,
    LogRecordExportResult,
)

from .formatting import MetricsOutputFormatter


# =============================================================================
# Console Telemetry Exporter
# =============================================================================


class ConsoleTelemetryExporter(LogRecordExporter):
    """OTel LogRecordExporter that writes one line per record to stderr.

    Example output:
        2026-02-03T10:30:00Z [METRIC] web/requests sum=42 count=42 {context=web, host=a}
    """

    def __init__(self, formatter: MetricsOutputFormatter | None = None):
        self.formatter = formatter or MetricsOutputFormatter()

    def export(self, batch: Sequence[ReadableLogRecord]) -> LogRecordExportResult:
        try:
            for readable_record in batch:
                sys.stderr.write(self.formatter(readable_record.log_record))
            sys.stderr.flush()
            return LogRecordExportResult.SUCCESS
        except Exception:
            return LogRecordExportResult.FAILURE

    def shutdown(self) -> None:
        """Shutdown the exporter (no-op for console)."""
        pass

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        sys.stderr.flush()
        return True


# =============================================================================
# File Telemetry Exporter
# =============================================================================


class FileTelemetryExporter(LogRecordExporter):
    """
    OTel LogRecordExporter that appends records to a file.

    The active file name is the base path with a timestamp postfix, e.g.
    ``metrics_20260203T103000.jsonl``. With ``rotate_interval`` set, a new
    file is started once that many records have been written.

    Parameters:
        path: Base path for the telemetry files.
        formatter: Record formatter; defaults to JSON lines.
        rotate_interval: Records per file, or None for a single file.

    Example:
        >>> exporter = FileTelemetryExporter("out/metrics.jsonl", rotate_interval=10_000)
        >>> provider = configure_telemetry(exporter=exporter, batch=True)
    """

    def __init__(
        self,
        path: str,
        *,
        formatter: MetricsOutputFormatter | None = None,
        rotate_interval: int | None = None,
    ):
        if rotate_interval is not None and rotate_interval <= 0:
            raise ValueError(f"rotate_interval must be positive, got {rotate_interval}")
        self._path_base = path
        self.formatter = formatter or MetricsOutputFormatter("json")
        self._rotate_interval = rotate_interval

        self._current_path: str | None = None
        self._file: TextIOWrapper | None = None
        self._record_count = 0
        self._rotation = 0

    @property
    def path(self) -> str | None:
        """Return the current active file path."""
        return self._current_path

    def _generate_path(self) -> str:
        timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
        base, ext = os.path.splitext(self._path_base)
        # several rotations may happen within the same second
        suffix = f"_{self._rotation}" if self._rotation else ""
        return f"{base}_{timestamp}{suffix}{ext}"

    def _rotate_file(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.close()
        self._file = None
        self._current_path = None
        self._record_count = 0
        self._rotation += 1

    def _ensure_file_open(self) -> TextIOWrapper:
        if (
            self._rotate_interval is not None
            and self._record_count >= self._rotate_interval
        ):
            self._rotate_file()

        if self._current_path is None:
            self._current_path = self._generate_path()

        if self._file is None or self._file.closed:
            dir_name = os.path.dirname(self._current_path)
            if dir_name:
                os.makedirs(dir_name, exist_ok=True)
            self._file = open(self._current_path, "a")
        return self._file

    def export(self, batch: Sequence[ReadableLogRecord]) -> LogRecordExportResult:
        try:
            for readable_record in batch:
                file = self._ensure_file_open()
                file.write(self.formatter(readable_record.log_record))
                self._record_count += 1
            if self._file is not None:
                self._file.flush()
            return LogRecordExportResult.SUCCESS
        except Exception:
            return LogRecordExportResult.FAILURE

    def shutdown(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.close()
        self._file = None

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        if self._file is not None and not self._file.closed:
            self._file.flush()
        return True
