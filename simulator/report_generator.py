# simulator/report_generator.py

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timezone, timedelta
from typing import Optional

from processing.report_parser import DEFAULT_HEADER_LINES, PLACEHOLDER


FAULTS = ("MISSING_AOS", "MISSING_LOS", "MALFORMED_DATE", "OVERLAP")


@dataclass(frozen=True)
class SimulatedPass:
    name: str
    aos: Optional[datetime]
    los: Optional[datetime]


def _fmt_date(t: Optional[datetime]) -> str:
    return t.strftime("%d/%m/%Y") if t else PLACEHOLDER


def _fmt_time(t: Optional[datetime]) -> str:
    return f"{t:%H:%M:%S}.{t.microsecond // 1000:03d}" if t else PLACEHOLDER


def _fmt_angle(value: Optional[float]) -> str:
    return f"{value:.3f}" if value is not None else PLACEHOLDER


def format_event(t: Optional[datetime], elev: Optional[float], azim: Optional[float]) -> str:
    return (
        f"{_fmt_date(t):>10} {_fmt_time(t):>12} "
        f"{_fmt_angle(elev if t else None):>7} {_fmt_angle(azim if t else None):>7}"
    )


def format_station_line(
    name: str,
    aos: Optional[datetime],
    los: Optional[datetime],
    max_el: Optional[datetime] = None,
) -> str:
    """
    Render one antenna line in the fixed report layout:
    NAME T AOS(date time elev azim) LOS(...) MAX(...)
    """
    return (
        f"{name:<15} ~  "
        f"{format_event(aos, 0.0, 219.736)}  "
        f"{format_event(los, -0.0, 155.043)}  "
        f"{format_event(max_el, 42.5, 75.690)}"
    )


def format_header(satellite: str, created_on: datetime) -> list[str]:
    header = [
        f"Created on : {created_on:%a %b %d %H:%M:%S} GMT {created_on:%Y}",
        "",
        "CNES  TOULOUSE FRANCE - ORBIT COMPUTATION CENTER",
        "------------------------------------------------",
        "Mail : xxx@xxx",
        "Tel  : xx.xx.xx.xx.xx  Fax  : xx.xx.xx.xx.xx",
        "",
        "",
        "",
        f"SATELLITE: {satellite}      INTERNATIONAL NUMBER: XXXXX",
        "REFERENCE ORBITAL PARAMETERS: XXXXX (traj)",
        "",
        "ANTENNA         T  AOS                        ELEV    AZIM  "
        "LOS                        ELEV    AZIM  MAX                        ELEV    AZIM",
        "(UT time)          DD/MM/YYYY HH:MN:SS.SSS     deg     deg  "
        "DD/MM/YYYY HH:MN:SS.SSS     deg     deg  DD/MM/YYYY HH:MN:SS.SSS     deg     deg",
        "",
    ]
    return header


class PassReportSimulator:
    """
    Ground-station pass report simulator (AOS/LOS tables).

    Usage:
        sim = PassReportSimulator()
        text = sim.generate_report(stations=8)
    """

    def __init__(
        self,
        satellite: str = "DEMO-01",
        start: datetime = datetime(2012, 10, 20, tzinfo=timezone.utc),
        seed: Optional[int] = 42,
    ):
        self.satellite = satellite
        self.start = start

        if seed is not None:
            random.seed(seed)

    # ---------- Nominal generators ----------

    def _gap(self) -> timedelta:
        # mostly holes, occasionally a small overlap
        return timedelta(minutes=random.gauss(mu=20.0, sigma=15.0))

    def _duration(self) -> timedelta:
        return timedelta(minutes=random.uniform(8.0, 240.0))

    def _millis(self) -> timedelta:
        return timedelta(milliseconds=random.randint(0, 999))

    def generate_passes(self, stations: int = 8, fault: Optional[str] = None) -> list[SimulatedPass]:
        if fault is not None and fault not in FAULTS:
            raise ValueError(f"unknown fault {fault!r}, expected one of {FAULTS}")

        passes: list[SimulatedPass] = []
        cursor = self.start

        for n in range(stations):
            aos = cursor + self._gap() + self._millis()
            los = aos + self._duration()
            passes.append(SimulatedPass(name=f"STATION_{chr(ord('A') + n % 26)}", aos=aos, los=los))
            cursor = los

        if not passes or fault is None:
            return passes

        # --- Fault injection ---
        first = passes[0]
        if fault == "MISSING_AOS":
            passes[0] = SimulatedPass(first.name, None, first.los)

        elif fault == "MISSING_LOS":
            passes[0] = SimulatedPass(first.name, first.aos, None)

        elif fault == "OVERLAP" and len(passes) > 1:
            second = passes[1]
            # second antenna acquires 30 minutes before the first one loses
            aos = first.los - timedelta(minutes=30)
            passes[1] = SimulatedPass(second.name, aos, max(second.los, aos + timedelta(minutes=1)))

        return passes

    def generate_report(self, stations: int = 8, fault: Optional[str] = None) -> str:
        passes = self.generate_passes(stations=stations, fault=fault)

        lines = format_header(self.satellite, self.start)
        for p in passes:
            mid = p.aos + (p.los - p.aos) / 2 if p.aos and p.los else None
            lines.append(format_station_line(p.name, p.aos, p.los, mid))

        if fault == "MALFORMED_DATE" and passes:
            # garble the AOS date of the first station line
            first = DEFAULT_HEADER_LINES
            lines[first] = lines[first].replace(_fmt_date(passes[0].aos), "2O/1O/2O12", 1)

        return "\n".join(lines) + "\n"
