"""
Output helpers for registry commands.

This module handles stderr progress logging and CSV generation for
ingestion reports, with timestamp-based filenames.
"""

import csv
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from .models import REPORT_COLUMNS, IngestionReport


def log(scope: str, message: str) -> None:
    """Log a message with a scope prefix (usually a chain handle)."""
    print(f"[{scope}] {message}", file=sys.stderr)


def generate_timestamp() -> str:
    """
    Generate a timestamp string for filenames.

    Returns:
        Timestamp in YYYYMMDD_HHMMSS format
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def generate_filename(base_path: str, timestamp: Optional[str] = None) -> str:
    """
    Generate a timestamped filename for a report.

    Args:
        base_path: Base output path (e.g., "ingest_report.csv")
        timestamp: Optional timestamp to use (generates new one if not provided)

    Examples:
        generate_filename("ingest_report.csv", "20241214_153022")
        -> "ingest_report_20241214_153022.csv"
    """
    if timestamp is None:
        timestamp = generate_timestamp()

    path = Path(base_path)
    suffix = path.suffix or ".csv"
    return str(path.parent / f"{path.stem}_{timestamp}{suffix}")


def write_report_to_stream(reports: List[IngestionReport], stream: TextIO) -> None:
    """Write ingestion outcomes to a CSV stream, one row per address."""
    writer = csv.writer(stream)
    writer.writerow(REPORT_COLUMNS)

    for report in reports:
        for outcome in report.outcomes:
            writer.writerow(outcome.to_csv_row(report.chain))


def write_report(reports: List[IngestionReport], output_path: Optional[str] = None) -> Optional[str]:
    """
    Write ingestion reports to a CSV file or stdout.

    Args:
        reports: Reports to write
        output_path: Base output path. If None, writes to stdout.

    Returns:
        The written file path if output_path was provided, otherwise None
    """
    if output_path is None:
        write_report_to_stream(reports, sys.stdout)
        return None

    report_file = generate_filename(output_path)
    Path(report_file).parent.mkdir(parents=True, exist_ok=True)
    with open(report_file, "w", newline="", encoding="utf-8") as f:
        write_report_to_stream(reports, f)
    return report_file
