# report/schemas.py
# Pydantic models for the AOS/LOS pass report and the computed gap rows

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field, ConfigDict, field_validator, model_validator


# ---------- Errors ----------

class ReportValidationError(ValueError):
    """Raised when a report cannot be accepted for parsing."""


# ---------- Station record ----------

class StationRecord(BaseModel):
    """
    One antenna line of the pass report.
    Only `active` is expected to change after parsing.
    """
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: str = Field(..., min_length=1, examples=["id15"])
    name: str = Field(..., min_length=1, pattern=r"^\S+$", examples=["STATION_A"])

    # UTC
    aos: Optional[AwareDatetime] = Field(default=None, description="Acquisition Of Signal")
    los: Optional[AwareDatetime] = Field(default=None, description="Limit Of Signal")

    active: bool = True

    @field_validator("aos", "los")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return value.astimezone(timezone.utc) if value is not None else None

    @model_validator(mode="after")
    def has_timing(self) -> "StationRecord":
        if self.aos is None and self.los is None:
            raise ValueError("station record needs at least one of aos/los")
        return self


# ---------- Gap rows ----------

class GapStatus(str, Enum):
    HOLE = "HOLE"
    CONTIGUOUS = "CONTIGUOUS"
    OVERLAP = "OVERLAP"

    @classmethod
    def from_minutes(cls, minutes: float) -> "GapStatus":
        if minutes > 0:
            return cls.HOLE
        if minutes < 0:
            return cls.OVERLAP
        return cls.CONTIGUOUS


class DisplayRow(BaseModel):
    """
    A station record annotated with the gap to its nearest active predecessor.
    Gap fields are None when no gap could be computed.
    """
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    record: StationRecord

    predecessor_index: Optional[int] = Field(default=None, ge=0)
    gap_label: Optional[str] = None
    gap_minutes: Optional[float] = None
    gap_hours: Optional[float] = None
    status: Optional[GapStatus] = None

    @property
    def has_gap(self) -> bool:
        return self.gap_minutes is not None

    @property
    def is_hole(self) -> bool:
        return self.status == GapStatus.HOLE
