"""PANOSE classification."""

from dataclasses import dataclass
from enum import IntEnum

PANOSE_LENGTH = 10
PROPORTION_INDEX = 3


class PanoseProportion(IntEnum):
    """PANOSE proportion classes (Latin text)."""

    ANY = 0
    NO_FIT = 1
    OLD_STYLE = 2
    MODERN = 3
    EVEN_WIDTH = 4
    EXPANDED = 5
    CONDENSED = 6
    VERY_EXPANDED = 7
    VERY_CONDENSED = 8
    MONOSPACED = 9


@dataclass(frozen=True, slots=True)
class Panose:
    """Ten-byte PANOSE classification.

    Only the proportion byte is interpreted; the other nine bytes are kept
    as-is and reachable by index.

    Attributes:
        data: The raw classification bytes
    """

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != PANOSE_LENGTH:
            raise ValueError(
                f"PANOSE needs {PANOSE_LENGTH} bytes, got {len(self.data)}"
            )

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    @property
    def proportion(self) -> PanoseProportion:
        """Proportion class from byte 3.

        Values outside the defined range are reported as ANY.
        """
        value = self.data[PROPORTION_INDEX]
        try:
            return PanoseProportion(value)
        except ValueError:
            return PanoseProportion.ANY

    @property
    def is_monospaced(self) -> bool:
        """Check whether the design is classified as monospaced."""
        return self.proportion == PanoseProportion.MONOSPACED
