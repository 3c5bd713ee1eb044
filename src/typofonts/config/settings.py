"""Configuration settings for Typofonts."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_EXTENSIONS = (".ttf", ".otf", ".ttc")


class ScanConfig(BaseModel):
    """Configuration for batch scanning of font files."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )
    extensions: tuple[str, ...] = Field(
        default=DEFAULT_EXTENSIONS,
        description="File suffixes collected when a directory is scanned",
    )
    follow_symlinks: bool = Field(
        default=False,
        description="Follow symbolic links while walking directories",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(
            (ext if ext.startswith(".") else f".{ext}").lower() for ext in value
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TypofontsSettings(BaseModel):
    """Main application settings."""

    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TypofontsSettings:
    """Get default application settings."""
    return TypofontsSettings()
