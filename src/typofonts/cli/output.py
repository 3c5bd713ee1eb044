"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from typing import Any

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from typofonts.core import FileScan
from typofonts.domain import TypographicFont
from typofonts.utils import ScanStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_STYLE_LABELS = (
    ("bold", "Bold"),
    ("italic", "Italic"),
    ("oblique", "Oblique"),
    ("underlined", "Underline"),
    ("strikeout", "Strikeout"),
    ("outlined", "Outline"),
    ("negative", "Negative"),
    ("regular", "Regular"),
)


def create_progress() -> Progress:
    """Create a rich progress bar for file scanning.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Typofonts[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def style_labels(font: TypographicFont) -> list[str]:
    """List the style flags set on a font, in display order."""
    return [label for attr, label in _STYLE_LABELS if getattr(font, attr)]


def font_summary(font: TypographicFont) -> dict[str, Any]:
    """Flatten a font into the fields shown by the CLI.

    Args:
        font: Font to describe

    Returns:
        JSON-serializable dictionary
    """
    return {
        "display_name": str(font),
        "family": font.family,
        "sub_family": font.sub_family,
        "name": font.name,
        "weight": font.weight,
        "weight_class": font.weight_class.name,
        "styles": style_labels(font),
        "proportion": font.panose.proportion.name,
        "monospaced": font.panose.is_monospaced,
        "vendor": font.vendor,
        "os2_version": font.os2_version,
        "file_name": font.file_name,
    }


def print_fonts_table(scans: list[FileScan], verbose: bool) -> None:
    """Print the fonts found as a table.

    Args:
        scans: Per-file scan outcomes
        verbose: Also show vendor, OS/2 version and file columns
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Font")
    table.add_column("Weight", justify="right")
    table.add_column("Style")
    table.add_column("Proportion")
    if verbose:
        table.add_column("Vendor")
        table.add_column("OS/2", justify="right")
        table.add_column("File", overflow="fold")

    for scan in scans:
        for font in scan.fonts:
            row = [
                Text(str(font)),
                f"{font.weight} {SYM_DOT} {font.weight_class.name.title()}",
                ", ".join(style_labels(font)) or "-",
                font.panose.proportion.name.replace("_", " ").title(),
            ]
            if verbose:
                row += [font.vendor, str(font.os2_version), Text(font.file_name)]
            table.add_row(*row)

    console.print(table)


def print_unusable_files(scans: list[FileScan]) -> None:
    """Print files that yielded no fonts or failed to load."""
    for scan in scans:
        line = Text(f"  {SYM_ERR} ", style="yellow")
        line.append(scan.path)
        if scan.error is not None:
            line.append(f" ({scan.error})", style="red")
        elif not scan.fonts:
            line.append(" (no usable OpenType font)")
        else:
            continue
        console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(stats: ScanStats) -> None:
    """Print completion message with summary.

    Args:
        stats: Statistics of the scan
    """
    time_str = _format_time(stats.duration_seconds)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.files_scanned} files {SYM_DOT} {stats.fonts_found} fonts {SYM_DOT} "
        f"{stats.empty_count} unusable {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )

    if stats.avg_file_time_ms is not None:
        console.print(f"  {stats.avg_file_time_ms:.1f}ms avg per file")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  Pending files were not scanned")
