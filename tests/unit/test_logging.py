"""Tests for logging configuration and scan statistics."""

import json
import logging

import pytest

from typofonts.utils import ScanLogger, configure_logging


@pytest.fixture
def scan_logger() -> ScanLogger:
    return ScanLogger(configure_logging(quiet=True))


class TestScanLogger:
    """Tests for ScanLogger."""

    def test_error_record_has_no_traceback(self, scan_logger: ScanLogger, caplog):
        with caplog.at_level(logging.DEBUG):
            scan_logger.log_file_error(
                "broken.ttf",
                "Truncated font data",
                error_type="FontTruncatedError",
                traceback="Traceback (most recent call last):\n  ...",
            )

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        event = json.loads(errors[0].getMessage())
        assert event["path"] == "broken.ttf"
        assert event["error_type"] == "FontTruncatedError"
        assert "traceback" not in event

        details = [
            json.loads(r.getMessage())
            for r in caplog.records
            if r.levelno == logging.DEBUG and "File scan traceback" in r.getMessage()
        ]
        assert len(details) == 1
        assert details[0]["traceback"].startswith("Traceback")

    def test_error_without_traceback(self, scan_logger: ScanLogger, caplog):
        with caplog.at_level(logging.DEBUG):
            scan_logger.log_file_error("broken.ttf", ValueError("bad"))

        assert not any("File scan traceback" in r.getMessage() for r in caplog.records)
        assert scan_logger.stats.errors == [("broken.ttf", "bad")]

    def test_stats(self, scan_logger: ScanLogger):
        scan_logger.log_file_complete("a.ttc", 3, 2.0)
        scan_logger.log_file_empty("b.fon", 4.0)
        scan_logger.log_file_error("c.ttf", "boom")

        stats = scan_logger.stats
        assert stats.files_scanned == 3
        assert stats.fonts_found == 3
        assert stats.empty_count == 1
        assert stats.error_count == 1
        assert stats.avg_file_time_ms == 3.0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_repeat_calls_replace_handlers(self, tmp_path):
        configure_logging(log_file=tmp_path / "one.log")
        configure_logging(log_file=tmp_path / "two.log")

        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count("typofonts") == 2
