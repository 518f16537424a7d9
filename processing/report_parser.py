# processing/report_parser.py

import logging
from datetime import datetime, timezone
from typing import Optional

from report.schemas import StationRecord, ReportValidationError


logger = logging.getLogger("amulet.parser")

DEFAULT_HEADER_LINES = 15  # configurable
PLACEHOLDER = "-"

# Token positions in a station line (whitespace split)
#   NAME  T  AOS_DATE AOS_TIME ELEV AZIM  LOS_DATE LOS_TIME ELEV AZIM  MAX ...
NAME_COL = 0
AOS_DATE_COL, AOS_TIME_COL = 2, 3
LOS_DATE_COL, LOS_TIME_COL = 6, 7


def _token(cols: list[str], idx: int) -> Optional[str]:
    if idx < len(cols) and cols[idx] != PLACEHOLDER:
        return cols[idx]
    return None


def parse_timestamp(date_str: Optional[str], time_str: Optional[str]) -> Optional[datetime]:
    """
    Combine a DD/MM/YYYY date and a HH:MM:SS[.fff] time into a UTC datetime.

    Fractional seconds are truncated. Returns None when either part is
    missing or does not describe a valid instant.
    """
    if not date_str or not time_str or PLACEHOLDER in (date_str, time_str):
        return None

    try:
        day, month, year = (int(p) for p in date_str.split("/"))
        hour, minute, seconds = time_str.split(":")
        return datetime(
            year, month, day,
            int(hour), int(minute), int(float(seconds)),
            tzinfo=timezone.utc,
        )
    except (ValueError, OverflowError):
        return None


def parse(text: Optional[str], header_lines: int = DEFAULT_HEADER_LINES) -> list[StationRecord]:
    """
    Parse an AOS/LOS pass report into station records.

    The first `header_lines` lines are boilerplate and always skipped.
    Lines that carry neither a usable AOS nor a usable LOS are dropped;
    a bad field never aborts the parse, it is just treated as absent.
    """
    if header_lines < 0:
        raise ReportValidationError(f"header_lines must be >= 0, got {header_lines}")

    stations: list[StationRecord] = []
    if not text:
        return stations

    lines = [line.rstrip("\r") for line in text.split("\n")]

    for i in range(header_lines, len(lines)):
        cols = lines[i].split()
        if not cols:
            continue

        aos_date = _token(cols, AOS_DATE_COL)
        los_date = _token(cols, LOS_DATE_COL)

        aos = parse_timestamp(aos_date, _token(cols, AOS_TIME_COL))
        los = parse_timestamp(los_date, _token(cols, LOS_TIME_COL))

        if aos_date and aos is None:
            logger.debug(f"line {i}: unreadable AOS in {lines[i]!r}")
        if los_date and los is None:
            logger.debug(f"line {i}: unreadable LOS in {lines[i]!r}")

        if aos is None and los is None:
            logger.debug(f"line {i}: no timing, skipped")
            continue

        stations.append(
            StationRecord(
                id=f"id{i}",
                name=cols[NAME_COL],
                aos=aos,
                los=los,
            )
        )

    logger.info(f"Parsed {len(stations)} station records")
    return stations
