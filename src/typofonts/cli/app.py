"""CLI application entry point for typofonts.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from typofonts import __version__
from typofonts.cli.output import (
    console,
    create_progress,
    font_summary,
    print_cancellation_notice,
    print_error,
    print_fonts_table,
    print_header,
    print_step,
    print_success,
    print_unusable_files,
)
from typofonts.config import LoggingConfig, ScanConfig, TypofontsSettings
from typofonts.core import FontScanner, ScanReport
from typofonts.exceptions import FontFormatError, TypofontsError

# Create the Typer app
app = typer.Typer(
    name="typofonts",
    help="Identify TrueType/OpenType fonts by family, style and weight.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Typofonts[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def identify(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="Font files (TTF/OTF/TTC) or directories to scan",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print fonts as JSON instead of a table",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail if any file holds no usable OpenType font",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """List the fonts contained in font files.

    Reads the name and OS/2 tables of every font in the given files and
    prints family, subfamily, weight, style flags and PANOSE proportion.
    Collections (.ttc) list one row per contained font.

    Example:
        typofonts /usr/share/fonts/truetype --verbose
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    missing = [path for path in paths if not path.exists()]
    if missing:
        print_error(
            f"Input path not found: {missing[0]}",
            details=f"The path '{missing[0]}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    interactive = not (quiet or as_json)

    if interactive:
        print_header(__version__)

    settings = TypofontsSettings(
        scan=ScanConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        scanner = FontScanner(settings)
        files = scanner.collect(paths)

        if not files:
            if interactive:
                console.print("\nNo font files found. Nothing to scan.")
            raise typer.Exit(code=0)

        if interactive:
            print_step(f"Scanning {len(files)} files")

        try:
            report = _run_scan(scanner, files, show_progress=interactive)
        except KeyboardInterrupt:
            if interactive:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if as_json:
            typer.echo(
                json.dumps([font_summary(font) for font in report.fonts], indent=2)
            )
        elif not quiet:
            print_fonts_table(report.files, verbose=verbose)
            print_unusable_files(report.files)
            print_success(report.stats)

        if report.stats.error_count > 0:
            raise typer.Exit(code=1)

        if strict:
            for scan in report.files:
                if not scan.fonts:
                    raise FontFormatError(scan.path, "no usable OpenType font")

    except FontFormatError as e:
        print_error(f"Unusable font file: {e.path}", details=e.details)
        raise typer.Exit(code=1)
    except TypofontsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _run_scan(scanner: FontScanner, files: list[Path], show_progress: bool) -> ScanReport:
    """Run the scan, with a progress bar when the console is interactive."""
    if not show_progress:
        return scanner.scan(files)

    with create_progress() as progress:
        task_id = progress.add_task(f"Scanning {len(files)} files", total=len(files))

        def update_progress(completed: int, *_: object) -> None:
            progress.update(task_id, completed=completed)

        return scanner.scan(files, progress_callback=update_progress)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
