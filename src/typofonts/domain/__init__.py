"""Domain models for typofonts.

This module contains the records produced by reading a font container. All
models are:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (batch scanning)
- Fully materialized: no model keeps a reference to the byte source

Key classes:
- NameRecord: One entry of the ``name`` table
- FamilyNamesInfo: Resolved family/subfamily names
- OS2Info: Weight, style flags, PANOSE, version and vendor
- Panose: PANOSE classification with the proportion class
- TypographicFont: One identified font face
- ContainerHeader, SfntHeader, TableRecord: Where tables live in a file
"""

from typofonts.domain.font import TypographicFont
from typofonts.domain.names import FamilyNamesInfo, NameId, NameRecord, PlatformId
from typofonts.domain.os2 import FontStyle, FontWeight, OS2Info
from typofonts.domain.panose import Panose, PanoseProportion
from typofonts.domain.sfnt import ContainerHeader, SfntHeader, TableRecord

__all__: list[str] = [
    # Enums
    "FontStyle",
    "FontWeight",
    "NameId",
    "PanoseProportion",
    "PlatformId",
    # Container structure
    "ContainerHeader",
    "SfntHeader",
    "TableRecord",
    # Core types
    "FamilyNamesInfo",
    "NameRecord",
    "OS2Info",
    "Panose",
    "TypographicFont",
]
