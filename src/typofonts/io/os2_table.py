"""Parser for the sfnt ``OS/2`` table.

The fields needed for identification sit at fixed offsets that are the same
in every table version (0-5), so the table is read as one sequential layout:

    offset  size  field
    0       2     version
    2       2     xAvgCharWidth (unused)
    4       2     usWeightClass
    6       26    width class, type flags, sub/superscript, strikeout, family class
    32      10    panose
    42      16    ulUnicodeRange1-4
    58      4     achVendID
    62      2     fsSelection
"""

from typofonts.domain.os2 import FontStyle, OS2Info
from typofonts.io.cursor import ByteCursor, decode_ascii

OS2_TAG = "OS/2"

_METRICS_SKIP = 26
_UNICODE_RANGE_SKIP = 16
PANOSE_SIZE = 10


def parse_os2_table(cursor: ByteCursor, offset: int, length: int) -> OS2Info:
    """Parse the identification fields of the ``OS/2`` table.

    The cursor position is restored before returning.

    Args:
        cursor: Cursor over the font source
        offset: Absolute offset of the ``OS/2`` table
        length: Declared table length

    Returns:
        Weight, style flags, PANOSE bytes, version and vendor tag

    Raises:
        TableBoundsError: If the table is shorter than the fields read
        FontTruncatedError: If the source ends inside the table
    """
    with cursor.bounded(OS2_TAG, offset, length):
        version = cursor.read_u16()
        _avg_char_width = cursor.read_u16()
        weight = cursor.read_u16()
        cursor.skip(_METRICS_SKIP)
        panose = cursor.read_bytes(PANOSE_SIZE)
        cursor.skip(_UNICODE_RANGE_SKIP)
        vendor = decode_ascii(cursor.read_bytes(4))
        style = FontStyle(cursor.read_u16())

    return OS2Info(
        weight=weight,
        style=style,
        panose=panose,
        version=version,
        vendor=vendor,
    )
