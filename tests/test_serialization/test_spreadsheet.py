"""Tests for zone-table export."""

import io
from datetime import date

import pandas as pd
import pytest

from cardio_engine.math.zones import calculate_zones
from cardio_engine.serialization import (
    report_filename,
    to_csv_bytes,
    to_html_report,
    zones_to_frame,
)


@pytest.fixture
def male_30_zones():
    _, zones = calculate_zones(30, "M")
    return zones


class TestZonesToFrame:
    def test_one_row_per_zone(self, male_30_zones) -> None:
        frame = zones_to_frame(male_30_zones)
        assert list(frame.columns) == [
            "Zone",
            "BPM",
            "% Max",
            "Recommended duration",
            "Goal",
            "Description",
        ]
        assert len(frame) == 4

    def test_aerobic_row(self, male_30_zones) -> None:
        row = zones_to_frame(male_30_zones).iloc[2]
        assert row["Zone"] == "Aerobic (Target)"
        assert row["BPM"] == "114 - 152"
        assert row["% Max"] == "60-80%"
        assert row["Recommended duration"] == "20-40 min"

    def test_empty_table(self) -> None:
        assert zones_to_frame([]).empty


class TestCsv:
    def test_csv_header_and_rows(self, male_30_zones) -> None:
        data = to_csv_bytes(male_30_zones)
        assert data.decode("utf-8").splitlines()[0].startswith("Zone,BPM,% Max")
        frame = pd.read_csv(io.BytesIO(data))
        assert frame["BPM"].tolist() == ["76 - 95", "95 - 114", "114 - 152", "152 - 171"]


class TestHtmlReport:
    def test_header_and_footer(self, male_30_zones) -> None:
        report = to_html_report(male_30_zones, 30, "M", 190)
        assert "CardioZone - Personal Report" in report
        assert "Male, 30 years" in report
        assert "190 BPM" in report
        assert "Generated by CardioZone" in report

    def test_zone_colors_applied(self, male_30_zones) -> None:
        report = to_html_report(male_30_zones, 30, "M", 190)
        for zone in male_30_zones:
            assert zone.color in report
        assert "nth-child(3)" in report

    def test_female_label(self) -> None:
        max_hr, zones = calculate_zones(35, "F")
        assert "Female, 35 years" in to_html_report(zones, 35, "F", max_hr)


def test_report_filename() -> None:
    assert report_filename(date(2025, 3, 10)) == "CardioZone_Report_2025-03-10.xls"
