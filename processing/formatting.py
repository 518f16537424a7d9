# processing/formatting.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import pandas as pd

from report.schemas import DisplayRow, GapStatus


ABSENT = "-"

FRAME_COLUMNS = [
    "#", "station", "aos", "los", "difference",
    "minutes", "hours", "status", "active", "id",
]


@dataclass(frozen=True)
class GapSummary:
    stations: int
    active: int
    holes: int
    overlaps: int
    largest_hole_minutes: Optional[float]
    largest_hole_label: Optional[str]


def to_iso8601(value: Optional[datetime]) -> str:
    """
    Format a timestamp as YYYY-MM-DDTHH:MM:SS, or "-" when absent.
    """
    if value is None:
        return ABSENT
    return value.strftime("%Y-%m-%dT%H:%M:%S")


def row_label(row: DisplayRow) -> str:
    return f"{row.index}. {row.record.name}"


def rows_to_frame(rows: Sequence[DisplayRow]) -> pd.DataFrame:
    """
    Flatten display rows into a table, one line per station.
    """
    data = [
        {
            "#": row.index,
            "station": row.record.name,
            "aos": to_iso8601(row.record.aos),
            "los": to_iso8601(row.record.los),
            "difference": row.gap_label,
            "minutes": row.gap_minutes,
            "hours": row.gap_hours,
            "status": row.status.value if row.status else None,
            "active": row.record.active,
            "id": row.record.id,
        }
        for row in rows
    ]
    return pd.DataFrame(data, columns=FRAME_COLUMNS)


def summarize(rows: Sequence[DisplayRow]) -> GapSummary:
    holes = [r for r in rows if r.status == GapStatus.HOLE]
    largest = max(holes, key=lambda r: r.gap_minutes, default=None)

    return GapSummary(
        stations=len(rows),
        active=sum(1 for r in rows if r.record.active),
        holes=len(holes),
        overlaps=sum(1 for r in rows if r.status == GapStatus.OVERLAP),
        largest_hole_minutes=largest.gap_minutes if largest else None,
        largest_hole_label=largest.gap_label if largest else None,
    )
