"""Name table types and family name resolution.

This module defines the records found in an sfnt ``name`` table and the
resolved naming identity of one font.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

# Windows LCID for U.S. English
LANGUAGE_EN_US = 1033


class PlatformId(IntEnum):
    """Platform identifier of a name record."""

    UNICODE = 0
    MACINTOSH = 1
    ISO = 2
    WINDOWS = 3
    CUSTOM = 4


class NameId(IntEnum):
    """Predefined name identifiers.

    Only the four family/subfamily ids are decoded by the name table parser;
    the rest are listed for completeness.
    """

    COPYRIGHT_NOTICE = 0
    FONT_FAMILY_NAME = 1
    FONT_SUBFAMILY_NAME = 2
    UNIQUE_FONT_IDENTIFIER = 3
    FULL_FONT_NAME = 4
    VERSION = 5
    POSTSCRIPT_NAME = 6
    TRADEMARK = 7
    MANUFACTURER_NAME = 8
    DESIGNER = 9
    DESCRIPTION = 10
    VENDOR_URL = 11
    DESIGNER_URL = 12
    LICENSE_DESCRIPTION = 13
    LICENSE_INFO_URL = 14
    TYPOGRAPHIC_FAMILY_NAME = 16
    TYPOGRAPHIC_SUBFAMILY_NAME = 17
    COMPATIBLE_FULL = 18
    SAMPLE_TEXT = 19
    POSTSCRIPT_CID = 20
    WWS_FAMILY_NAME = 21
    WWS_SUBFAMILY_NAME = 22
    LIGHT_BACKGROUND_PALETTE = 23
    DARK_BACKGROUND_PALETTE = 24


FAMILY_NAME_IDS: frozenset[int] = frozenset(
    {
        NameId.TYPOGRAPHIC_FAMILY_NAME,
        NameId.TYPOGRAPHIC_SUBFAMILY_NAME,
        NameId.FONT_FAMILY_NAME,
        NameId.FONT_SUBFAMILY_NAME,
    }
)


@dataclass(frozen=True, slots=True)
class NameRecord:
    """One platform-scoped string entry in the ``name`` table.

    Attributes:
        platform_id: Platform identifier (see PlatformId)
        encoding_id: Platform-specific encoding identifier
        language_id: Platform-specific language identifier
        name_id: Name identifier (see NameId)
        length: String length in bytes
        offset: String offset from the start of the storage area
    """

    platform_id: int
    encoding_id: int
    language_id: int
    name_id: int
    length: int
    offset: int

    def is_accepted(self) -> bool:
        """Check whether this record passes the platform/language policy.

        Unicode platform records are always accepted, Windows platform
        records only for U.S. English. Every other platform is rejected.

        Returns:
            True if the record may contribute a family name
        """
        if self.platform_id == PlatformId.UNICODE:
            return True
        if self.platform_id == PlatformId.WINDOWS:
            return self.language_id == LANGUAGE_EN_US
        return False

    def is_family_name(self) -> bool:
        """Check whether this record holds one of the family/subfamily names."""
        return self.name_id in FAMILY_NAME_IDS


@dataclass(frozen=True, slots=True)
class FamilyNamesInfo:
    """Resolved naming identity of one font.

    ``typographic_family`` and ``typographic_subfamily`` hold the grouping
    names. When the font has no typographic family record they already hold
    the font family/subfamily, so callers can group on them directly.

    Attributes:
        typographic_family: Effective family used for grouping
        typographic_subfamily: Effective subfamily within that family
        font_name: Font family name (name id 1)
        sub_family: Font subfamily name (name id 2)
    """

    typographic_family: str | None
    typographic_subfamily: str | None
    font_name: str | None
    sub_family: str | None

    @classmethod
    def resolve(
        cls,
        typographic_family: str | None,
        typographic_subfamily: str | None,
        font_family: str | None,
        font_subfamily: str | None,
    ) -> "FamilyNamesInfo":
        """Resolve captured name strings into a FamilyNamesInfo.

        Without a typographic family, the font family and subfamily are used
        for both the grouping and the secondary fields. Names that were not
        captured stay None.

        Args:
            typographic_family: Name id 16, if captured
            typographic_subfamily: Name id 17, if captured
            font_family: Name id 1, if captured
            font_subfamily: Name id 2, if captured

        Returns:
            Resolved names
        """
        if typographic_family is None:
            return cls(font_family, font_subfamily, font_family, font_subfamily)

        return cls(typographic_family, typographic_subfamily, font_family, font_subfamily)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the names
        """
        return {
            "typographic_family": self.typographic_family,
            "typographic_subfamily": self.typographic_subfamily,
            "font_name": self.font_name,
            "sub_family": self.sub_family,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FamilyNamesInfo":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of the names

        Returns:
            FamilyNamesInfo instance
        """
        return cls(
            typographic_family=data["typographic_family"],
            typographic_subfamily=data["typographic_subfamily"],
            font_name=data["font_name"],
            sub_family=data["sub_family"],
        )
