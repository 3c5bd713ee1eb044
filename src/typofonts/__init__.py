"""Typofonts - Identify OpenType fonts by family, style and weight.

Typofonts reads TrueType/OpenType font files (.ttf, .otf) and font
collections (.ttc) and extracts the metadata font pickers group and sort by:
typographic family and subfamily, weight class, style flags and the PANOSE
classification. Only the table directory, the ``name`` table and the ``OS/2``
table are read; outlines are never touched.

Example:
    >>> from typofonts import read_fonts
    >>> for font in read_fonts("Arial.ttc"):
    ...     print(font, font.weight)
"""

from typofonts.domain import TypographicFont
from typofonts.io import FontReader, read_fonts

__version__ = "0.1.0"

__all__ = ["FontReader", "TypographicFont", "__version__", "read_fonts"]
