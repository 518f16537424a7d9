# processing/gap_analyzer.py

import logging
from typing import Optional, Sequence

from report.schemas import StationRecord, DisplayRow, GapStatus


logger = logging.getLogger("amulet.gaps")

MINUTES_DECIMALS = 2
HOURS_DECIMALS = 3
# hours are minutes / 24 (not 60), see DESIGN.md
HOURS_DIVISOR = 24


def find_predecessor(records: Sequence[StationRecord], index: int) -> Optional[int]:
    """
    Return the position of the nearest earlier active station with a LOS.

    Inactive stations are invisible to the scan. Active stations without a
    LOS are passed over, the scan goes on to earlier ones.
    """
    station = records[index]
    if not station.active or station.aos is None:
        return None

    for j in range(index - 1, -1, -1):
        previous = records[j]
        if previous.active and previous.los is not None:
            return j

    return None


def compute(records: Sequence[StationRecord]) -> list[DisplayRow]:
    """
    Annotate every record with the AOS - LOS gap to its active predecessor.
    Output has the same length and order as the input.
    """
    rows: list[DisplayRow] = []

    for i, station in enumerate(records):
        j = find_predecessor(records, i)

        if j is None:
            rows.append(DisplayRow(index=i, record=station))
            continue

        delta = station.aos - records[j].los
        minutes = round(delta.total_seconds() / 60, MINUTES_DECIMALS)
        hours = round(minutes / HOURS_DIVISOR, HOURS_DECIMALS)

        rows.append(
            DisplayRow(
                index=i,
                record=station,
                predecessor_index=j,
                gap_label=f"AOS[{i}] - LOS[{j}]",
                gap_minutes=minutes,
                gap_hours=hours,
                status=GapStatus.from_minutes(minutes),
            )
        )

    holes = sum(1 for r in rows if r.is_hole)
    logger.debug(f"Computed gaps for {len(rows)} stations, {holes} visibility holes")
    return rows


def toggle_active(records: Sequence[StationRecord], record_id: str) -> bool:
    """
    Flip the `active` flag of the record with `record_id`.
    Returns False (and changes nothing) when the id is unknown.
    """
    for station in records:
        if station.id == record_id:
            station.active = not station.active
            logger.info(
                f"{station.name} ({record_id}) "
                f"{'activated' if station.active else 'deactivated'}"
            )
            return True

    logger.warning(f"toggle_active: no station with id {record_id!r}")
    return False
