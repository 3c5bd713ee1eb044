"""The identified font face.

This module defines TypographicFont, the immutable record produced for every
font successfully read from a container file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from typofonts.domain.names import FamilyNamesInfo
from typofonts.domain.os2 import FontStyle, FontWeight, OS2Info
from typofonts.domain.panose import Panose


@dataclass(frozen=True, slots=True)
class TypographicFont:
    """One identified font face.

    Combines the resolved names, the OS/2 summary and the file the font was
    read from. All derived values are computed from those three fields, so
    two fonts read from identical bytes compare equal.

    Attributes:
        family_names: Resolved names from the ``name`` table
        os2_info: Summary of the ``OS/2`` table
        file_name: Location of the font container on disk
    """

    family_names: FamilyNamesInfo
    os2_info: OS2Info
    file_name: str

    @property
    def family(self) -> str | None:
        """Typographic family.

        "Arial" for "Arial Black" and "Arial Narrow", which lets them be
        grouped with the other Arial faces even though their font family
        names differ.
        """
        return self.family_names.typographic_family

    @property
    def sub_family(self) -> str | None:
        """Typographic subfamily ("Black", "Narrow", "Bold Italic", ...)."""
        return self.family_names.typographic_subfamily

    @property
    def name(self) -> str | None:
        """Formal font family name.

        Together with the style flags this is what identifies the font to the
        operating system's font APIs.
        """
        return self.family_names.font_name

    @property
    def weight(self) -> int:
        """Native weight class (``usWeightClass``)."""
        return self.os2_info.weight

    @property
    def weight_class(self) -> FontWeight:
        """Closest standard weight step."""
        return FontWeight.nearest(self.os2_info.weight)

    @property
    def style(self) -> FontStyle:
        """Raw ``fsSelection`` flags."""
        return FontStyle(self.os2_info.style)

    @property
    def bold(self) -> bool:
        return FontStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        return FontStyle.ITALIC in self.style

    @property
    def oblique(self) -> bool:
        return FontStyle.OBLIQUE in self.style

    @property
    def underlined(self) -> bool:
        return FontStyle.UNDERSCORE in self.style

    @property
    def negative(self) -> bool:
        return FontStyle.NEGATIVE in self.style

    @property
    def outlined(self) -> bool:
        return FontStyle.OUTLINED in self.style

    @property
    def strikeout(self) -> bool:
        return FontStyle.STRIKEOUT in self.style

    @property
    def regular(self) -> bool:
        """Characters are in the standard weight and style of the font."""
        return FontStyle.REGULAR in self.style

    @property
    def panose(self) -> Panose:
        return Panose(self.os2_info.panose)

    @property
    def vendor(self) -> str:
        return self.os2_info.vendor

    @property
    def os2_version(self) -> int:
        return self.os2_info.version

    def __str__(self) -> str:
        return " ".join(part for part in (self.family, self.sub_family) if part is not None)

    @classmethod
    def from_file(cls, path: str | Path) -> list["TypographicFont"]:
        """Read every font in a TTF, OTF or TTC container.

        Args:
            path: Path to the font container

        Returns:
            Fonts in container order (empty if none is usable)
        """
        from typofonts.io.reader import read_fonts

        return read_fonts(path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the font
        """
        return {
            "family_names": self.family_names.to_dict(),
            "os2": self.os2_info.to_dict(),
            "file_name": self.file_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypographicFont":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a font

        Returns:
            TypographicFont instance
        """
        return cls(
            family_names=FamilyNamesInfo.from_dict(data["family_names"]),
            os2_info=OS2Info.from_dict(data["os2"]),
            file_name=data["file_name"],
        )
