# tests/test_formatting.py

from datetime import datetime, timezone, timedelta

import pandas as pd

from processing.formatting import FRAME_COLUMNS, rows_to_frame, row_label, summarize, to_iso8601
from processing.gap_analyzer import compute, toggle_active
from report.schemas import StationRecord


T0 = datetime(2012, 10, 20, 5, 0, 0, tzinfo=timezone.utc)


def make_records() -> list[StationRecord]:
    return [
        StationRecord(id="id15", name="STATION_A", los=T0),
        StationRecord(id="id16", name="STATION_B", aos=T0 + timedelta(minutes=90), los=T0 + timedelta(minutes=120)),
        StationRecord(id="id17", name="STATION_C", aos=T0 + timedelta(minutes=100), los=T0 + timedelta(minutes=200)),
        StationRecord(id="id18", name="STATION_D", aos=T0 + timedelta(minutes=230)),
    ]


def test_to_iso8601():
    assert to_iso8601(datetime(2012, 10, 20, 5, 4, 2, 265000, tzinfo=timezone.utc)) == "2012-10-20T05:04:02"
    assert to_iso8601(None) == "-"


def test_rows_to_frame():
    rows = compute(make_records())

    df = rows_to_frame(rows)

    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 4
    assert df.iloc[0]["aos"] == "-"
    assert pd.isna(df.iloc[0]["minutes"])
    assert df.iloc[1]["difference"] == "AOS[1] - LOS[0]"
    assert df.iloc[1]["minutes"] == 90.0
    assert df.iloc[2]["status"] == "OVERLAP"
    assert df.iloc[3]["id"] == "id18"


def test_rows_to_frame_empty():
    df = rows_to_frame([])
    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_summarize():
    summary = summarize(compute(make_records()))

    assert summary.stations == 4
    assert summary.active == 4
    assert summary.holes == 2
    assert summary.overlaps == 1
    assert summary.largest_hole_minutes == 90.0
    assert summary.largest_hole_label == "AOS[1] - LOS[0]"


def test_summarize_after_toggle():
    records = make_records()
    toggle_active(records, "id16")

    summary = summarize(compute(records))

    assert summary.active == 3
    assert summary.overlaps == 0
    assert summary.largest_hole_minutes == 100.0


def test_summarize_empty():
    summary = summarize([])
    assert summary.holes == 0
    assert summary.largest_hole_minutes is None


def test_row_label():
    rows = compute(make_records())
    assert row_label(rows[2]) == "2. STATION_C"
