"""Serialization module: export zone tables to spreadsheet and report formats."""

from cardio_engine.serialization.spreadsheet import (
    report_filename,
    to_csv_bytes,
    to_html_report,
    zones_to_frame,
)

__all__ = ["report_filename", "to_csv_bytes", "to_html_report", "zones_to_frame"]
