"""Structured JSON-lines logging for catalog builds."""

from __future__ import annotations

import json
import sys
import threading
import time
import uuid
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union


class LogLevel(Enum):
    """Standard log levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class StructuredLogger:
    """Structured logger writing one JSON object per line."""

    def __init__(
        self,
        component: str,
        session_id: Optional[str] = None,
        output_file: Optional[Union[str, Path, TextIO]] = None,
        enable_console: bool = False,
        max_log_size_mb: Optional[int] = None,
        max_log_files: int = 5,
    ) -> None:
        """Initialize structured logger.

        Args:
            component: Component identifier (e.g., 'catalog')
            session_id: Optional ID correlating the entries of one build
            output_file: Optional file path or handle for log output
            enable_console: Whether to echo entries to stdout
            max_log_size_mb: Maximum log file size in MB before rotation (None = no limit)
            max_log_files: Maximum number of rotated log files to keep
        """
        self.component = component
        self.session_id = session_id or str(uuid.uuid4())[:8]
        self.start_time = time.time()

        self.max_log_size_bytes = (max_log_size_mb * 1024 * 1024) if max_log_size_mb else None
        self.max_log_files = max_log_files
        self.log_file_path: Optional[Path] = None

        self.console_enabled = enable_console
        self.log_file: Optional[TextIO] = None
        self._lock = threading.Lock()

        if output_file:
            if isinstance(output_file, (str, Path)):
                self.log_file_path = Path(output_file)
                self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
                self._open_log_file()
            else:
                self.log_file = output_file

    def _format_log_entry(self, level: LogLevel, message: str, **context: Any) -> Dict[str, Any]:
        return {
            "timestamp": time.time(),
            "iso_timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()) + "Z",
            "level": level.value,
            "component": self.component,
            "session_id": self.session_id,
            "session_time": time.time() - self.start_time,
            "message": message,
            **context,
        }

    def _open_log_file(self) -> None:
        if self.log_file_path:
            self.log_file = open(self.log_file_path, "a", encoding="utf-8")

    def _rotate_log_if_needed(self) -> None:
        """Rotate log file if size limit is exceeded."""
        if not self.log_file_path or not self.max_log_size_bytes:
            return
        if not (
            self.log_file_path.exists()
            and self.log_file_path.stat().st_size > self.max_log_size_bytes
        ):
            return

        if self.log_file:
            self.log_file.close()

        for i in range(self.max_log_files - 1, 0, -1):
            old_file = self.log_file_path.with_suffix(f".{i}{self.log_file_path.suffix}")
            new_file = self.log_file_path.with_suffix(f".{i+1}{self.log_file_path.suffix}")
            if old_file.exists():
                old_file.replace(new_file)

        self.log_file_path.replace(self.log_file_path.with_suffix(f".1{self.log_file_path.suffix}"))
        self._open_log_file()

    def _write_log(self, entry: Dict[str, Any]) -> None:
        json_line = json.dumps(entry, default=str, ensure_ascii=False, separators=(",", ":"))

        with self._lock:
            if self.console_enabled:
                print(json_line, file=sys.stdout, flush=True)

            if self.log_file:
                self._rotate_log_if_needed()
                self.log_file.write(json_line + "\n")
                self.log_file.flush()

    def debug(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.DEBUG, message, **context))

    def info(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.INFO, message, **context))

    def warning(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.WARNING, message, **context))

    def error(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.ERROR, message, **context))

    def close(self) -> None:
        """Close log file handle if this logger opened it."""
        if self.log_file is not None and self.log_file_path is not None:
            self.log_file.close()
        self.log_file = None


def create_logger(
    component: str,
    session_id: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> StructuredLogger:
    """Create a structured logger with standard configuration.

    Args:
        component: Component identifier
        session_id: Optional session ID for correlation
        log_dir: Directory for log files (defaults to GA_LOG_DIR)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        Configured StructuredLogger instance
    """
    from geoabbrev.config import settings

    if log_dir is None:
        log_dir = settings.log_dir
    kwargs.setdefault("enable_console", settings.log_console)

    # One log file per session
    session_id = session_id or str(uuid.uuid4())[:8]
    output_file = None
    if log_dir:
        output_file = Path(log_dir) / f"{component}_{session_id}.jsonl"

    return StructuredLogger(
        component=component, session_id=session_id, output_file=output_file, **kwargs
    )
