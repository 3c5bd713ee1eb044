"""Batch processing for typofonts.

This module scans many font files at once. Each file is read by an
independent worker; the reader keeps no process-wide state, so workers
share nothing.

Key functions:
- scan_file: Read one file into serialized fonts (picklable)
- iter_font_files: Expand directories into candidate font files

Key classes:
- FontScanner: Runs a batch scan and collects statistics
- FileScan: Outcome for one file
- ScanReport: Outcomes for a batch, in input order
"""

from typofonts.core.scanner import (
    FileScan,
    FontScanner,
    ScanReport,
    iter_font_files,
    scan_file,
)

__all__ = [
    "FileScan",
    "FontScanner",
    "ScanReport",
    "iter_font_files",
    "scan_file",
]
