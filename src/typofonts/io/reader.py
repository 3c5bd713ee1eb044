"""Font reader for TTF/OTF/TTC containers.

This module provides the FontReader class, which detects collections,
walks the table directory of every contained sfnt stream and builds one
TypographicFont per stream that carries both a ``name`` and an ``OS/2``
table.

Fonts are detected by content, never by file extension.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import structlog

from typofonts.domain.font import TypographicFont
from typofonts.domain.names import FamilyNamesInfo
from typofonts.domain.os2 import OS2Info
from typofonts.domain.sfnt import (
    COLLECTION_TAG,
    SFNT_VERSIONS,
    ContainerHeader,
    SfntHeader,
    TableRecord,
)
from typofonts.exceptions import FontLoadError, TableBoundsError
from typofonts.io.cursor import ByteCursor
from typofonts.io.name_table import NAME_TAG, parse_name_table
from typofonts.io.os2_table import OS2_TAG, parse_os2_table

logger = structlog.get_logger(__name__)


@dataclass
class _TableScan:
    """Results collected while walking one table directory."""

    family_names: FamilyNamesInfo | None = None
    os2_info: OS2Info | None = None

    @property
    def complete(self) -> bool:
        return self.family_names is not None and self.os2_info is not None


def read_container_header(cursor: ByteCursor) -> ContainerHeader | None:
    """Read the collection header at offset 0.

    Args:
        cursor: Cursor over the font source

    Returns:
        The collection header, or None if the source is a bare sfnt stream

    Raises:
        FontTruncatedError: If the source is too short for the header
    """
    cursor.seek(0)
    if cursor.read_tag() != COLLECTION_TAG:
        return None

    version = cursor.read_u32()
    num_fonts = cursor.read_u32()
    offsets = tuple(cursor.read_u32() for _ in range(num_fonts))
    return ContainerHeader(version=version, offsets=offsets)


def read_sfnt_header(cursor: ByteCursor, stream_offset: int) -> SfntHeader | None:
    """Read the sfnt offset table.

    Args:
        cursor: Cursor over the font source
        stream_offset: Absolute offset of the sfnt stream

    Returns:
        The header, or None if the version tag is not TrueType or CFF
        (bitmap .fon files and other foreign data land here)
    """
    cursor.seek(stream_offset)
    version = cursor.read_u32()
    if version not in SFNT_VERSIONS:
        logger.debug(
            "Not an OpenType stream",
            stream_offset=stream_offset,
            version=f"0x{version:08X}",
        )
        return None

    return SfntHeader(
        version=version,
        num_tables=cursor.read_u16(),
        search_range=cursor.read_u16(),
        entry_selector=cursor.read_u16(),
        range_shift=cursor.read_u16(),
    )


def iter_table_records(cursor: ByteCursor, num_tables: int) -> Iterator[TableRecord]:
    """Yield table records from the current position.

    The cursor must be back on the record list each time the consumer
    resumes the iteration.
    """
    for _ in range(num_tables):
        yield TableRecord(
            tag=cursor.read_tag(),
            checksum=cursor.read_u32(),
            offset=cursor.read_u32(),
            length=cursor.read_u32(),
        )


def parse_font_stream(
    cursor: ByteCursor, stream_offset: int, file_name: str
) -> TypographicFont | None:
    """Parse one sfnt stream into a TypographicFont.

    The table directory is walked until both the ``name`` and ``OS/2``
    tables have been read. Each table is read in a bounded scope that puts
    the cursor back on the directory afterwards.

    Args:
        cursor: Cursor over the font source
        stream_offset: Absolute offset of the sfnt stream
        file_name: Path recorded on the resulting font

    Returns:
        The identified font, or None if the stream is not OpenType, lacks a
        required table or has a table too short for its fields

    Raises:
        FontTruncatedError: If the source ends inside the directory or a table
    """
    header = read_sfnt_header(cursor, stream_offset)
    if header is None:
        return None

    scan = _TableScan()
    try:
        for record in iter_table_records(cursor, header.num_tables):
            if record.tag == NAME_TAG:
                scan.family_names = parse_name_table(cursor, record.offset, record.length)
            elif record.tag == OS2_TAG:
                scan.os2_info = parse_os2_table(cursor, record.offset, record.length)

            if scan.complete:
                break
    except TableBoundsError as e:
        logger.debug(
            "Skipping font with malformed table",
            stream_offset=stream_offset,
            table=e.tag,
            error=str(e),
        )
        return None

    if scan.family_names is None or scan.os2_info is None:
        logger.debug(
            "Skipping font without name/OS2 tables",
            stream_offset=stream_offset,
            name_found=scan.family_names is not None,
            os2_found=scan.os2_info is not None,
        )
        return None

    return TypographicFont(
        family_names=scan.family_names,
        os2_info=scan.os2_info,
        file_name=file_name,
    )


def parse_container(cursor: ByteCursor, file_name: str) -> list[TypographicFont]:
    """Parse a TTF, OTF or TTC source.

    Args:
        cursor: Cursor over the font source
        file_name: Path recorded on the resulting fonts

    Returns:
        Fonts in offset-table order for collections, or at most one font for
        a bare sfnt stream

    Raises:
        FontTruncatedError: If the source ends before a required field
    """
    header = read_container_header(cursor)
    offsets = header.offsets if header is not None else (0,)

    fonts: list[TypographicFont] = []
    for stream_offset in offsets:
        font = parse_font_stream(cursor, stream_offset, file_name)
        if font is not None:
            fonts.append(font)

    logger.debug(
        "Container parsed",
        file=file_name,
        collection=header is not None,
        streams=len(offsets),
        fonts=len(fonts),
    )
    return fonts


class FontReader:
    """Reads the fonts contained in a TTF/OTF/TTC file.

    The file is opened by ``load`` and closed by ``close``; as a context
    manager the reader closes the file on every exit path.

    Example:
        with FontReader(Path("fonts.ttc")) as reader:
            for font in reader.read():
                print(font)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the font container
        """
        self._font_path = font_path
        self._stream: BinaryIO | None = None

    def load(self) -> None:
        """Open the font file.

        Raises:
            FontLoadError: If the file cannot be opened
        """
        try:
            self._stream = open(self._font_path, "rb")  # noqa: SIM115
        except OSError as e:
            raise FontLoadError(str(self._font_path), e.strerror or str(e)) from e

    def read(self) -> list[TypographicFont]:
        """Parse every font in the container.

        Returns:
            Identified fonts in container order

        Raises:
            RuntimeError: If the file has not been opened yet
            FontTruncatedError: If the file ends before a required field
        """
        if self._stream is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return parse_container(ByteCursor(self._stream), str(self._font_path))

    def close(self) -> None:
        """Close the font file."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def read_fonts(path: str | Path) -> list[TypographicFont]:
    """Read every font in a TTF, OTF or TTC file.

    Args:
        path: Path to the font container

    Returns:
        Identified fonts; empty when the file holds no usable OpenType font

    Raises:
        FontLoadError: If the file cannot be opened
        FontTruncatedError: If the file ends before a required field
    """
    with FontReader(Path(path)) as reader:
        return reader.read()
