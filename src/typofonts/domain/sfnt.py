"""Container structure types.

These describe where things live in a font file; they carry no font
identity of their own.
"""

from dataclasses import dataclass

TRUETYPE_VERSION = 0x00010000
CFF_VERSION = 0x4F54544F  # "OTTO"
SFNT_VERSIONS: frozenset[int] = frozenset({TRUETYPE_VERSION, CFF_VERSION})

COLLECTION_TAG = "ttcf"


@dataclass(frozen=True, slots=True)
class ContainerHeader:
    """Header of a font collection (.ttc).

    Attributes:
        version: Collection header version, not validated
        offsets: Absolute offset of each contained sfnt stream, in file order
    """

    version: int
    offsets: tuple[int, ...]

    @property
    def num_fonts(self) -> int:
        return len(self.offsets)


@dataclass(frozen=True, slots=True)
class SfntHeader:
    """Offset table at the start of one sfnt stream.

    Attributes:
        version: sfnt version tag (TRUETYPE_VERSION or CFF_VERSION)
        num_tables: Number of table records that follow
        search_range: Binary search helper, unused
        entry_selector: Binary search helper, unused
        range_shift: Binary search helper, unused
    """

    version: int
    num_tables: int
    search_range: int
    entry_selector: int
    range_shift: int

    @property
    def is_cff(self) -> bool:
        """Check whether the stream carries CFF outlines ("OTTO")."""
        return self.version == CFF_VERSION


@dataclass(frozen=True, slots=True)
class TableRecord:
    """Location of one table in the table directory.

    Attributes:
        tag: Four-character table tag
        checksum: Table checksum, not verified
        offset: Absolute offset from the start of the file
        length: Table length in bytes
    """

    tag: str
    checksum: int
    offset: int
    length: int
