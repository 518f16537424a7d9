# tests/test_schemas.py

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from report.schemas import StationRecord, DisplayRow, GapStatus


AOS = datetime(2012, 10, 20, 5, 34, 12, tzinfo=timezone.utc)


def test_valid_record():
    record = StationRecord(id="id15", name="STATION_A", aos=AOS)
    assert record.active is True
    assert record.los is None


def test_record_without_timing_rejected():
    with pytest.raises(ValidationError):
        StationRecord(id="id15", name="STATION_A")


def test_name_with_whitespace_rejected():
    with pytest.raises(ValidationError):
        StationRecord(id="id15", name="STATION A", aos=AOS)


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        StationRecord(id="id15", name="STATION_A", aos=AOS, elevation=0.0)


def test_active_is_mutable_and_validated():
    record = StationRecord(id="id15", name="STATION_A", aos=AOS)
    record.active = False
    assert record.active is False

    with pytest.raises(ValidationError):
        record.active = "sometimes"


def test_display_row_keeps_record_identity():
    record = StationRecord(id="id15", name="STATION_A", aos=AOS)
    row = DisplayRow(index=0, record=record)

    assert row.record is record
    assert not row.has_gap
    assert not row.is_hole


def test_display_row_is_frozen():
    row = DisplayRow(index=0, record=StationRecord(id="id15", name="A", aos=AOS))
    with pytest.raises(ValidationError):
        row.gap_minutes = 1.0


@pytest.mark.parametrize(
    "minutes, expected",
    [(12.5, GapStatus.HOLE), (0.0, GapStatus.CONTIGUOUS), (-0.01, GapStatus.OVERLAP)],
)
def test_gap_status_from_minutes(minutes, expected):
    assert GapStatus.from_minutes(minutes) == expected


def test_naive_timestamps_rejected():
    with pytest.raises(ValidationError):
        StationRecord(id="id0", name="A", los="2012-10-20T05:00:00")

    with pytest.raises(ValidationError):
        StationRecord(id="id1", name="B", aos=datetime(2012, 10, 20, 6))


def test_aware_timestamps_converted_to_utc():
    record = StationRecord(id="id0", name="A", aos="2012-10-20T07:00:00+02:00")

    assert record.aos == AOS.replace(hour=5, minute=0, second=0)
    assert record.aos.tzinfo == timezone.utc
