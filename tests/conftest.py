"""Shared fixtures for typofonts tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

import sfnt_builder


@pytest.fixture
def write_font(tmp_path: Path) -> Callable[..., Path]:
    """Write font bytes to a file under tmp_path and return its path."""

    def _write(data: bytes, name: str = "font.ttf") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def demo_font_path(write_font: Callable[..., Path]) -> Path:
    """A CFF-flavoured single font: Demo Bold, weight 700."""
    return write_font(
        sfnt_builder.font(
            family="Demo",
            subfamily="Bold",
            weight=700,
            fs_selection=0x0020,
            version=sfnt_builder.CFF,
        ),
        name="Demo-Bold.otf",
    )
