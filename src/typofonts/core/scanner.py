"""Parallel scanning of many font files.

This module reads a batch of font containers with one task per file using
ProcessPoolExecutor. Files share no state, so each task is an independent
call of the font reader.

Key components:
- scan_file: Top-level picklable function for parallel execution
- iter_font_files: Expand directories into candidate font files
- FontScanner: Orchestrates a batch scan and collects statistics
"""

import os
import time
import traceback
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from typofonts.config import DEFAULT_EXTENSIONS, TypofontsSettings
from typofonts.domain import TypographicFont
from typofonts.io import read_fonts
from typofonts.utils import ScanLogger, ScanStats, configure_logging


def scan_file(path: str) -> dict[str, Any]:
    """Read all fonts of a single file.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor.

    Args:
        path: Path to the font container

    Returns:
        Dictionary containing either:
        - Success: {"path": str, "fonts": [font dicts], "duration_ms": float}
        - Error: {"path": str, "error": str, "error_type": str,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        fonts = read_fonts(path)
        return {
            "path": path,
            "fonts": [font.to_dict() for font in fonts],
            "duration_ms": (time.time() - start_time) * 1000,
        }
    except Exception as e:
        return {
            "path": path,
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": (time.time() - start_time) * 1000,
        }


def _init_worker(log_file: Path | None, console_level: str, file_level: str) -> None:
    """Configure logging in a worker process.

    Workers started with spawn or forkserver do not inherit the parent's
    handlers; unconfigured structlog would print to stdout.
    """
    configure_logging(
        log_file=log_file,
        console_level=console_level,
        file_level=file_level,
    )


def iter_font_files(
    paths: Iterable[Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """Expand a mix of files and directories into font file candidates.

    Files are passed through untouched whatever their suffix, since fonts
    are detected by content. Directories are walked recursively in sorted
    order and only files with a matching suffix are collected.

    Args:
        paths: Files and directories
        extensions: Lower-case suffixes collected from directories
        follow_symlinks: Follow symbolic links to directories

    Yields:
        Candidate font file paths
    """
    suffixes = {ext.lower() for ext in extensions}

    for path in paths:
        if not path.is_dir():
            yield path
            continue

        for root, dirs, files in os.walk(path, followlinks=follow_symlinks):
            dirs.sort()
            for name in sorted(files):
                candidate = Path(root) / name
                if candidate.suffix.lower() in suffixes:
                    yield candidate


@dataclass
class FileScan:
    """Outcome of scanning one file.

    Attributes:
        path: Scanned file
        fonts: Fonts found, in container order
        error: Error message if the file could not be read
        error_type: Exception class name of the error
    """

    path: str
    fonts: list[TypographicFont] = field(default_factory=list)
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ScanReport:
    """Results of a batch scan, in input order."""

    files: list[FileScan]
    stats: ScanStats

    @property
    def fonts(self) -> list[TypographicFont]:
        """All fonts found, file by file."""
        return [font for scan in self.files for font in scan.fonts]


class FontScanner:
    """Orchestrates batch scanning of font files.

    Example:
        scanner = FontScanner(TypofontsSettings())
        report = scanner.scan([Path("Arial.ttf"), Path("Cambria.ttc")])
        for font in report.fonts:
            print(font)
    """

    def __init__(self, config: TypofontsSettings) -> None:
        """Initialize the scanner with configuration.

        Args:
            config: Typofonts settings containing scan and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )

    def collect(self, paths: Iterable[Path]) -> list[Path]:
        """Expand directories using the configured extensions."""
        return list(
            iter_font_files(
                paths,
                extensions=self.config.scan.extensions,
                follow_symlinks=self.config.scan.follow_symlinks,
            )
        )

    def scan(
        self,
        paths: Iterable[Path],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ScanReport:
        """Scan font files, in parallel when more than one worker is allowed.

        Args:
            paths: Font files (directories must be expanded with ``collect``)
            max_workers: Maximum worker processes (None = config, then auto);
                1 scans in the calling process
            progress_callback: Optional callback(completed, total, path, success)
                for progress updates

        Returns:
            ScanReport with one FileScan per input path, in input order

        Raises:
            KeyboardInterrupt: If scanning is cancelled by user
        """
        scan_logger = ScanLogger(self.logger)
        stats = scan_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.scan.max_workers

        tasks = [str(path) for path in paths]

        self.logger.info(
            "Starting scan",
            file_count=len(tasks),
            max_workers=max_workers,
        )

        if max_workers == 1:
            results = self._scan_serial(tasks, scan_logger, progress_callback)
        else:
            results = self._scan_parallel(
                tasks, max_workers, scan_logger, progress_callback
            )

        stats.end_time = time.time()

        self.logger.info(
            "Scan complete",
            files=stats.files_scanned,
            fonts=stats.fonts_found,
            empty=stats.empty_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return ScanReport(files=[results[path] for path in tasks], stats=stats)

    def _scan_serial(
        self,
        tasks: list[str],
        scan_logger: ScanLogger,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[str, FileScan]:
        results: dict[str, FileScan] = {}
        for completed, path in enumerate(tasks, start=1):
            scan_logger.log_file_start(path)
            results[path] = self._record_result(scan_file(path), scan_logger)
            if progress_callback is not None:
                progress_callback(completed, len(tasks), path, results[path].ok)
        return results

    def _scan_parallel(
        self,
        tasks: list[str],
        max_workers: int | None,
        scan_logger: ScanLogger,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[str, FileScan]:
        """Scan files using ProcessPoolExecutor.

        Args:
            tasks: File paths to scan
            max_workers: Maximum worker processes
            scan_logger: Logger collecting statistics
            progress_callback: Optional progress callback

        Returns:
            Dictionary mapping each path to its FileScan
        """
        results: dict[str, FileScan] = {}
        total = len(tasks)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], str] = {}

        logging_config = self.config.logging
        with ProcessPoolExecutor(
            max_workers=max_workers,
            initializer=_init_worker,
            initargs=(
                logging_config.log_file,
                logging_config.log_level,
                logging_config.file_log_level,
            ),
        ) as executor:
            for path in tasks:
                scan_logger.log_file_start(path)
                pending_futures[executor.submit(scan_file, path)] = path

            try:
                for future in as_completed(list(pending_futures)):
                    path = pending_futures.pop(future)

                    try:
                        result = self._record_result(future.result(), scan_logger)
                    except Exception as e:
                        # Executor-level error (worker died, result not picklable)
                        scan_logger.log_file_error(
                            path, e, traceback=traceback.format_exc()
                        )
                        result = FileScan(
                            path=path, error=str(e), error_type=type(e).__name__
                        )
                    results[path] = result

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, path, result.ok)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                scan_logger.stats.was_cancelled = True
                scan_logger.stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results

    def _record_result(self, result: dict[str, Any], scan_logger: ScanLogger) -> FileScan:
        """Convert a scan_file result into a FileScan and log it."""
        path = result["path"]
        duration_ms = result.get("duration_ms", 0.0)

        if "error" in result:
            scan_logger.log_file_error(
                path,
                result["error"],
                error_type=result.get("error_type"),
                traceback=result.get("traceback"),
            )
            return FileScan(
                path=path, error=result["error"], error_type=result.get("error_type")
            )

        fonts = [TypographicFont.from_dict(data) for data in result["fonts"]]
        if fonts:
            scan_logger.log_file_complete(path, len(fonts), duration_ms)
        else:
            scan_logger.log_file_empty(path, duration_ms)
        return FileScan(path=path, fonts=fonts)
