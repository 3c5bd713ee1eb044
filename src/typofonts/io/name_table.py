"""Parser for the sfnt ``name`` table.

Only the family and subfamily strings are decoded. Records are filtered by
platform and language before any string bytes are read:

- Unicode platform: always accepted
- Windows platform: accepted for U.S. English (LCID 1033) only
- Any other platform: rejected

When several accepted records carry the same name id, the last one wins.
"""

import structlog

from typofonts.domain.names import FamilyNamesInfo, NameId, NameRecord
from typofonts.exceptions import TableBoundsError
from typofonts.io.cursor import ByteCursor

logger = structlog.get_logger(__name__)

NAME_TAG = "name"


def read_name_record(cursor: ByteCursor) -> NameRecord:
    """Read one 12-byte name record at the cursor position."""
    return NameRecord(
        platform_id=cursor.read_u16(),
        encoding_id=cursor.read_u16(),
        language_id=cursor.read_u16(),
        name_id=cursor.read_u16(),
        length=cursor.read_u16(),
        offset=cursor.read_u16(),
    )


def read_name_string(cursor: ByteCursor, storage_start: int, record: NameRecord) -> str | None:
    """Decode the UTF-16BE string of a record without moving the cursor.

    Args:
        cursor: Cursor positioned inside the record list
        storage_start: Absolute offset of the string storage area
        record: Record whose string to decode

    Returns:
        Decoded string, or None if the bytes lie outside the table or do not
        decode
    """
    with cursor.restoring():
        cursor.seek(storage_start + record.offset)
        try:
            raw = cursor.read_bytes(record.length)
            return raw.decode("utf-16-be")
        except (TableBoundsError, UnicodeDecodeError) as e:
            logger.debug(
                "Skipping unreadable name record",
                name_id=record.name_id,
                platform_id=record.platform_id,
                error=str(e),
            )
            return None


def parse_name_table(cursor: ByteCursor, offset: int, length: int) -> FamilyNamesInfo:
    """Parse the ``name`` table and resolve the family names.

    The cursor position is restored before returning.

    Args:
        cursor: Cursor over the font source
        offset: Absolute offset of the ``name`` table
        length: Declared table length

    Returns:
        Resolved names; fields stay None when no accepted record holds them

    Raises:
        TableBoundsError: If the record list runs past the table end
        FontTruncatedError: If the source ends inside the table
    """
    captured: dict[int, str] = {}

    with cursor.bounded(NAME_TAG, offset, length):
        _format = cursor.read_u16()
        count = cursor.read_u16()
        storage_start = offset + cursor.read_u16()

        for _ in range(count):
            record = read_name_record(cursor)
            if not record.is_accepted() or not record.is_family_name():
                continue

            text = read_name_string(cursor, storage_start, record)
            if text is not None:
                captured[record.name_id] = text

    return FamilyNamesInfo.resolve(
        typographic_family=captured.get(NameId.TYPOGRAPHIC_FAMILY_NAME),
        typographic_subfamily=captured.get(NameId.TYPOGRAPHIC_SUBFAMILY_NAME),
        font_family=captured.get(NameId.FONT_FAMILY_NAME),
        font_subfamily=captured.get(NameId.FONT_SUBFAMILY_NAME),
    )
