"""Font I/O layer for typofonts.

This module reads font containers and converts their ``name`` and ``OS/2``
tables into domain models. Nothing here depends on a font library; the
binary layout is read directly.

Key responsibilities:
- Detect collections (.ttc) vs. bare sfnt streams (.ttf/.otf)
- Validate the sfnt version tag
- Walk the table directory and read the ``name`` and ``OS/2`` tables

Key classes:
- ByteCursor: Big-endian reader with bounded, position-restoring scopes
- FontReader: Open a font file and read its fonts
"""

from typofonts.io.cursor import ByteCursor
from typofonts.io.reader import FontReader, parse_container, read_fonts

__all__ = [
    "ByteCursor",
    "FontReader",
    "parse_container",
    "read_fonts",
]
