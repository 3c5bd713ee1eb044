"""OS/2 table types: weight classes, style flags and the parsed table summary."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any


class FontWeight(IntEnum):
    """Standard ``usWeightClass`` steps."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    NORMAL = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900

    @classmethod
    def nearest(cls, value: int) -> "FontWeight":
        """Map a raw weight class to the closest standard step.

        Values between two steps round half up (450 -> MEDIUM). Values
        outside 100-900 clamp to THIN or BLACK.

        Args:
            value: Raw ``usWeightClass`` value (1-1000)

        Returns:
            Closest standard weight
        """
        step = (value + 50) // 100 * 100
        return cls(min(max(step, cls.THIN), cls.BLACK))


class FontStyle(IntFlag):
    """Bits of the OS/2 ``fsSelection`` word.

    Bits are independent; Bold and Italic are commonly set together.
    """

    ITALIC = 1 << 0
    UNDERSCORE = 1 << 1
    NEGATIVE = 1 << 2
    OUTLINED = 1 << 3
    STRIKEOUT = 1 << 4
    BOLD = 1 << 5
    REGULAR = 1 << 6
    USE_TYPO_METRICS = 1 << 7
    WWS = 1 << 8
    OBLIQUE = 1 << 9


@dataclass(frozen=True, slots=True)
class OS2Info:
    """Style and weight identity read from the ``OS/2`` table.

    Attributes:
        weight: Raw ``usWeightClass``
        style: ``fsSelection`` flags
        panose: The 10 PANOSE classification bytes
        version: OS/2 table version
        vendor: Four-character vendor tag
    """

    weight: int
    style: FontStyle
    panose: bytes
    version: int
    vendor: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the OS/2 summary
        """
        return {
            "weight": self.weight,
            "style": int(self.style),
            "panose": list(self.panose),
            "version": self.version,
            "vendor": self.vendor,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OS2Info":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of the OS/2 summary

        Returns:
            OS2Info instance
        """
        return cls(
            weight=data["weight"],
            style=FontStyle(data["style"]),
            panose=bytes(data["panose"]),
            version=data["version"],
            vendor=data["vendor"],
        )
