"""End-to-end tests of the typofonts command line."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import sfnt_builder
from sfnt_builder import collection, font_tables
from typofonts import __version__
from typofonts.cli.app import app
from typofonts.cli.output import console


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    # Long tmp paths must not wrap inside asserted messages
    monkeypatch.setattr(console, "width", 240)
    return CliRunner()


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    fonts = tmp_path / "fonts"
    fonts.mkdir()
    (fonts / "Demo-Bold.otf").write_bytes(
        sfnt_builder.font(
            family="Demo",
            subfamily="Bold",
            weight=700,
            fs_selection=0x0020,
            version=sfnt_builder.CFF,
        )
    )
    (fonts / "Mono.ttc").write_bytes(
        collection(
            [
                font_tables("Mono", "Regular", panose=bytes([2, 11, 6, 9, 0, 0, 0, 0, 0, 0])),
                font_tables("Mono", "Italic", fs_selection=0x01),
            ]
        )
    )
    return fonts


class TestIdentify:
    """Tests for the identify command."""

    def test_table_output(self, runner: CliRunner, font_dir: Path):
        result = runner.invoke(app, [str(font_dir), "--workers", "1"])

        assert result.exit_code == 0, result.output
        assert "Demo Bold" in result.output
        assert "Mono Regular" in result.output
        assert "Mono Italic" in result.output
        assert "3 fonts" in result.output

    def test_verbose_shows_vendor(self, runner: CliRunner, demo_font_path: Path):
        result = runner.invoke(app, [str(demo_font_path), "-j", "1", "--verbose"])

        assert result.exit_code == 0, result.output
        assert "TEST" in result.output

    def test_json_output(self, runner: CliRunner, font_dir: Path):
        result = runner.invoke(app, [str(font_dir), "--json", "--workers", "1"])

        assert result.exit_code == 0, result.output
        fonts = json.loads(result.stdout)
        assert [f["display_name"] for f in fonts] == [
            "Demo Bold",
            "Mono Regular",
            "Mono Italic",
        ]
        demo = fonts[0]
        assert demo["weight"] == 700
        assert demo["weight_class"] == "BOLD"
        assert demo["styles"] == ["Bold"]
        assert fonts[1]["monospaced"] is True
        assert fonts[1]["proportion"] == "MONOSPACED"
        assert fonts[2]["styles"] == ["Italic"]

    def test_json_parallel(self, runner: CliRunner, font_dir: Path):
        result = runner.invoke(app, [str(font_dir), "--json", "--workers", "2"])

        assert result.exit_code == 0, result.output
        assert len(json.loads(result.stdout)) == 3

    def test_unusable_file_reported(self, runner: CliRunner, font_dir: Path):
        (font_dir / "broken.ttf").write_bytes(b"MZ" + bytes(64))

        result = runner.invoke(app, [str(font_dir), "-j", "1"])

        assert result.exit_code == 0, result.output
        assert "no usable OpenType font" in result.output

    def test_strict_fails_on_unusable_file(self, runner: CliRunner, font_dir: Path):
        broken = font_dir / "broken.ttf"
        broken.write_bytes(b"MZ" + bytes(64))

        result = runner.invoke(app, [str(font_dir), "-j", "1", "--strict", "--quiet"])

        assert result.exit_code == 1
        assert "Unusable font file" in result.output

    def test_read_error_exit_code(self, runner: CliRunner, write_font):
        path = write_font(b"\x00\x01\x00\x00\x00", name="truncated.ttf")

        result = runner.invoke(app, [str(path), "-j", "1"])

        assert result.exit_code == 1
        assert "truncated.ttf" in result.output
        assert "1 errors" in result.output
        assert "Traceback" not in result.output

    def test_missing_path(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, [str(tmp_path / "nope.ttf")])

        assert result.exit_code == 1
        assert "Input path not found" in result.output

    def test_empty_directory(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "Nothing to scan" in result.output

    def test_verbose_and_quiet_conflict(self, runner: CliRunner, demo_font_path: Path):
        result = runner.invoke(app, [str(demo_font_path), "-v", "-q"])

        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_log_file(self, runner: CliRunner, demo_font_path: Path, tmp_path: Path):
        log_file = tmp_path / "typofonts.log"

        result = runner.invoke(
            app, [str(demo_font_path), "-j", "1", "-q", "--log-file", str(log_file)]
        )

        assert result.exit_code == 0, result.output
        assert "File scanned" in log_file.read_text(encoding="utf-8")

    def test_version(self, runner: CliRunner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
