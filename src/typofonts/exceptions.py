"""Exception hierarchy for Typofonts."""


class TypofontsError(Exception):
    """Base exception for all Typofonts errors."""

    pass


class FontError(TypofontsError):
    """Errors related to reading font files."""

    pass


class FontLoadError(FontError):
    """Error opening or reading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontTruncatedError(FontError):
    """The font source ended before a field could be read."""

    def __init__(self, offset: int, requested: int, available: int) -> None:
        self.offset = offset
        self.requested = requested
        self.available = available
        super().__init__(
            f"Truncated font data at offset {offset}: "
            f"needed {requested} bytes, {available} available"
        )


class FontFormatError(FontError):
    """File contains no recognizable OpenType font."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class TableError(FontError):
    """Errors related to a single sfnt table."""

    pass


class TableBoundsError(TableError):
    """A read inside a table crossed the table's declared length."""

    def __init__(self, tag: str, offset: int, requested: int, limit: int) -> None:
        self.tag = tag
        self.offset = offset
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Read of {requested} bytes at offset {offset} exceeds "
            f"'{tag}' table end at {limit}"
        )
