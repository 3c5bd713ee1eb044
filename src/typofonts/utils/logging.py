"""Logging utilities for Typofonts."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "typofonts"


@dataclass
class ScanStats:
    """Statistics from a scanning run."""

    files_scanned: int = 0
    fonts_found: int = 0
    empty_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    file_timings_ms: list[float] = field(default_factory=list)
    was_cancelled: bool = False
    cancelled_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate scanning duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_file_time_ms(self) -> float | None:
        """Average parse time per file, if any file was parsed."""
        if not self.file_timings_ms:
            return None
        return sum(self.file_timings_ms) / len(self.file_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are replaced, so the function can
    be called once per scanner without duplicating output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("typofonts")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ScanLogger:
    """Logger for tracking scanning progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ScanStats()

    def log_file_start(self, path: str) -> None:
        """Log start of file parsing."""
        self._logger.debug("Scanning file", path=path)

    def log_file_complete(self, path: str, font_count: int, duration_ms: float) -> None:
        """Log a file that yielded fonts."""
        self._logger.info(
            "File scanned",
            path=path,
            fonts=font_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.files_scanned += 1
        self._stats.fonts_found += font_count
        self._stats.file_timings_ms.append(duration_ms)

    def log_file_empty(self, path: str, duration_ms: float) -> None:
        """Log a file that holds no usable OpenType font."""
        self._logger.info("No usable fonts", path=path)
        self._stats.files_scanned += 1
        self._stats.empty_count += 1
        self._stats.file_timings_ms.append(duration_ms)

    def log_file_error(
        self,
        path: str,
        error: Exception | str,
        error_type: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log file parsing error.

        The traceback goes to a separate DEBUG record so that console output
        at the default level carries only the one-line error.
        """
        self._logger.error(
            "File scan failed",
            path=path,
            error=str(error),
            error_type=error_type or type(error).__name__,
        )
        if traceback:
            self._logger.debug("File scan traceback", path=path, traceback=traceback)
        self._stats.files_scanned += 1
        self._stats.error_count += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> ScanStats:
        """Get current scanning statistics."""
        return self._stats
