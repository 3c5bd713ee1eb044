"""Tests for batch scanning."""

from pathlib import Path

import pytest

import sfnt_builder
from sfnt_builder import collection, font_tables
from typofonts.config import LoggingConfig, ScanConfig, TypofontsSettings
from typofonts.core import FontScanner, iter_font_files, scan_file
from typofonts.domain import TypographicFont


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """Directory with a font, a collection, a non-font and a nested font."""
    (tmp_path / "b-Demo.ttf").write_bytes(sfnt_builder.font(family="Demo"))
    (tmp_path / "a-Pair.TTC").write_bytes(
        collection([font_tables("Pair", "Regular"), font_tables("Pair", "Bold", 700)])
    )
    (tmp_path / "readme.txt").write_text("not a font")
    (tmp_path / "legacy.otf").write_bytes(b"MZ" + bytes(100))
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "Inner.otf").write_bytes(sfnt_builder.font(family="Inner"))
    return tmp_path


@pytest.fixture
def scanner() -> FontScanner:
    return FontScanner(TypofontsSettings(logging=LoggingConfig(log_level="ERROR")))


class TestScanFile:
    """Tests for the picklable scan_file function."""

    def test_success(self, demo_font_path: Path):
        result = scan_file(str(demo_font_path))

        assert "error" not in result
        assert result["path"] == str(demo_font_path)
        assert len(result["fonts"]) == 1
        assert TypographicFont.from_dict(result["fonts"][0]).family == "Demo"
        assert result["duration_ms"] >= 0

    def test_missing_file(self, tmp_path: Path):
        result = scan_file(str(tmp_path / "missing.ttf"))

        assert result["error_type"] == "FontLoadError"
        assert "missing.ttf" in result["error"]
        assert "Traceback" in result["traceback"]

    def test_truncated_file(self, write_font):
        path = write_font(b"\x00\x01\x00\x00\x00\x05")
        result = scan_file(str(path))
        assert result["error_type"] == "FontTruncatedError"


class TestIterFontFiles:
    """Tests for directory expansion."""

    def test_walks_directories_in_sorted_order(self, font_dir: Path):
        files = list(iter_font_files([font_dir]))

        assert [f.relative_to(font_dir).as_posix() for f in files] == [
            "a-Pair.TTC",
            "b-Demo.ttf",
            "legacy.otf",
            "nested/Inner.otf",
        ]

    def test_explicit_files_kept(self, font_dir: Path):
        readme = font_dir / "readme.txt"
        assert list(iter_font_files([readme])) == [readme]

    def test_custom_extensions(self, font_dir: Path):
        files = list(iter_font_files([font_dir], extensions=[".otf"]))
        assert [f.name for f in files] == ["legacy.otf", "Inner.otf"]


class TestFontScanner:
    """Tests for FontScanner."""

    def test_collect_uses_config(self, font_dir: Path):
        settings = TypofontsSettings(scan=ScanConfig(extensions=("ttf",)))
        files = FontScanner(settings).collect([font_dir])
        assert [f.name for f in files] == ["b-Demo.ttf"]

    def test_serial_scan(self, scanner: FontScanner, font_dir: Path):
        files = scanner.collect([font_dir])
        progress: list[tuple[int, int, bool]] = []

        report = scanner.scan(
            files,
            max_workers=1,
            progress_callback=lambda done, total, _path, ok: progress.append((done, total, ok)),
        )

        assert [scan.path for scan in report.files] == [str(f) for f in files]
        assert [str(font) for font in report.fonts] == [
            "Pair Regular",
            "Pair Bold",
            "Demo Regular",
            "Inner Regular",
        ]
        assert report.stats.files_scanned == 4
        assert report.stats.fonts_found == 4
        assert report.stats.empty_count == 1
        assert report.stats.error_count == 0
        assert progress[-1] == (4, 4, True)
        assert report.stats.duration_seconds >= 0

    def test_parallel_scan_matches_serial(self, scanner: FontScanner, font_dir: Path):
        files = scanner.collect([font_dir])

        serial = scanner.scan(files, max_workers=1)
        parallel = scanner.scan(files, max_workers=2)

        assert [scan.path for scan in parallel.files] == [scan.path for scan in serial.files]
        assert parallel.fonts == serial.fonts

    def test_errors_do_not_stop_batch(self, scanner: FontScanner, font_dir: Path, tmp_path: Path):
        truncated = tmp_path / "truncated.ttf"
        truncated.write_bytes(b"\x00\x01\x00\x00")
        files = [truncated, font_dir / "b-Demo.ttf"]

        report = scanner.scan(files, max_workers=1)

        assert not report.files[0].ok
        assert report.files[0].error_type == "FontTruncatedError"
        assert report.files[1].ok
        assert [font.family for font in report.fonts] == ["Demo"]
        assert report.stats.error_count == 1
        assert report.stats.errors[0][0] == str(truncated)

    def test_max_workers_from_config(self, font_dir: Path):
        settings = TypofontsSettings(
            scan=ScanConfig(max_workers=1),
            logging=LoggingConfig(log_level="ERROR"),
        )
        report = FontScanner(settings).scan([font_dir / "b-Demo.ttf"])
        assert len(report.fonts) == 1

    def test_log_file_written(self, tmp_path: Path, demo_font_path: Path):
        log_file = tmp_path / "scan.log"
        settings = TypofontsSettings(
            logging=LoggingConfig(log_file=log_file, log_level="ERROR")
        )

        FontScanner(settings).scan([demo_font_path], max_workers=1)

        assert "Scan complete" in log_file.read_text(encoding="utf-8")
