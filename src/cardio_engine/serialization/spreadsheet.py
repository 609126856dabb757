"""Spreadsheet and printable report export for a zone table.

The report is a standalone HTML page. Spreadsheet applications open it when
it is served as ``application/vnd.ms-excel`` with an ``.xls`` name, and
browsers print it as-is.

All functions are pure (no I/O).
"""

from __future__ import annotations

import html
from datetime import date
from typing import Sequence

import pandas as pd

from cardio_engine.models.enums import Gender
from cardio_engine.models.zone import HeartRateZone

REPORT_TITLE = "CardioZone - Personal Report"
REPORT_MIME = "application/vnd.ms-excel"
CSV_MIME = "text/csv"

_COLUMNS = ["Zone", "BPM", "% Max", "Recommended duration", "Goal", "Description"]

_GENDER_LABELS = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
}

_REPORT_CSS = """
body { font-family: Arial, sans-serif; }
table { border-collapse: collapse; width: 100%; }
th { background-color: #f0f9ff; border: 1px solid #000; padding: 10px; }
td { padding: 8px; border: 1px solid #ccc; }
.title { font-size: 18px; font-weight: bold; text-align: center; margin-bottom: 20px; }
.footer { font-size: 12px; color: #888; }
"""


def zones_to_frame(zones: Sequence[HeartRateZone]) -> pd.DataFrame:
    """Tabulate zones in display order, one row per zone."""
    rows = [
        {
            "Zone": z.name,
            "BPM": f"{z.min_bpm} - {z.max_bpm}",
            "% Max": z.range_label,
            "Recommended duration": z.duration,
            "Goal": z.goal,
            "Description": z.description,
        }
        for z in zones
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


def to_csv_bytes(zones: Sequence[HeartRateZone]) -> bytes:
    """UTF-8 CSV of :func:`zones_to_frame`, without the index column."""
    return zones_to_frame(zones).to_csv(index=False).encode("utf-8")


def _zone_cell_css(zones: Sequence[HeartRateZone]) -> str:
    """Paint each row's first cell in its zone colors."""
    rules = []
    for i, z in enumerate(zones, start=1):
        rules.append(
            f"table.zones tbody tr:nth-child({i}) td:first-child "
            f"{{ background-color: {z.color}; color: {z.text_color}; font-weight: bold; }}"
        )
    return "\n".join(rules)


def to_html_report(
    zones: Sequence[HeartRateZone],
    age: int,
    gender: Gender | str,
    max_hr: int,
) -> str:
    """Render a printable HTML report of the zone table."""
    gender_label = _GENDER_LABELS.get(Gender(gender), str(gender))
    table = zones_to_frame(zones).to_html(index=False, classes="zones", border=0)
    return (
        "<html>\n<head>\n<meta charset=\"UTF-8\">\n"
        f"<title>{html.escape(REPORT_TITLE)}</title>\n"
        f"<style>{_REPORT_CSS}\n{_zone_cell_css(zones)}\n</style>\n"
        "</head>\n<body>\n"
        f"<div class=\"title\">{html.escape(REPORT_TITLE)}</div>\n"
        f"<div><strong>User:</strong> {gender_label}, {age} years | "
        f"<strong>Max HR:</strong> {max_hr} BPM</div>\n<br/>\n"
        f"{table}\n<br/>\n"
        "<div class=\"footer\">Generated by CardioZone</div>\n"
        "</body>\n</html>\n"
    )


def report_filename(day: date | None = None) -> str:
    """Download name for the report, e.g. ``CardioZone_Report_2025-03-10.xls``."""
    day = day or date.today()
    return f"CardioZone_Report_{day.isoformat()}.xls"
