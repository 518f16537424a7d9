# monitoring/dashboard.py

import logging
import os

import pandas as pd
import plotly.express as px
import streamlit as st

from processing.formatting import rows_to_frame, row_label, summarize
from processing.gap_analyzer import compute, toggle_active
from processing.report_parser import DEFAULT_HEADER_LINES, parse
from report.schemas import ReportValidationError
from report.upload import check_upload


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger("amulet.dashboard")

MAX_HEADER_LINES = 200


def header_lines_setting(raw: str | None) -> tuple[int, str | None]:
    """
    Read the header line count from the environment, clamped to 0..MAX.
    Returns the value and a warning when the raw setting was not usable.
    """
    if raw is None:
        return DEFAULT_HEADER_LINES, None

    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_HEADER_LINES, f"AMULET_HEADER_LINES={raw!r} is not an integer, using {DEFAULT_HEADER_LINES}"

    clamped = max(0, min(value, MAX_HEADER_LINES))
    if clamped != value:
        return clamped, f"AMULET_HEADER_LINES={value} out of range 0..{MAX_HEADER_LINES}, using {clamped}"
    return value, None


HEADER_LINES, HEADER_WARNING = header_lines_setting(os.getenv("AMULET_HEADER_LINES"))

st.set_page_config(page_title="AMULet - AOS minus LOS", layout="wide")
st.title("🛰️ AMULet - AOS minus LOS")
st.caption("Visibility holes between acquisition stations")


# ----------------------------
# Sidebar controls
# ----------------------------
with st.sidebar:
    st.subheader("Report")
    if HEADER_WARNING:
        logger.warning(HEADER_WARNING)
        st.warning(HEADER_WARNING)
    header_lines = st.number_input(
        "Header lines", min_value=0, max_value=MAX_HEADER_LINES, value=HEADER_LINES, step=1
    )
    uploaded = st.file_uploader(
        "Drop an AOS/LOS station file", type=None, accept_multiple_files=True
    )


# ----------------------------
# Helpers
# ----------------------------
def load_report(files, skip: int) -> None:
    """
    Parse a freshly dropped file and replace the session's stations.
    """
    report = check_upload(files)
    key = (report.digest, skip)

    if st.session_state.get("report_key") == key:
        return

    st.session_state["records"] = parse(report.text, header_lines=skip)
    st.session_state["report_name"] = report.name
    st.session_state["report_key"] = key
    logger.info(f"Loaded {report.name}: {len(st.session_state['records'])} stations")


def highlight(row: pd.Series) -> list[str]:
    if not row["active"]:
        return ["color: #999999; text-decoration: line-through"] * len(row)
    if row["status"] == "HOLE":
        return ["background-color: #ffe08a"] * len(row)
    return [""] * len(row)


# ----------------------------
# Load
# ----------------------------
if uploaded:
    try:
        load_report(uploaded, int(header_lines))
    except ReportValidationError as exc:
        st.error(f"Error : {exc}")

records = st.session_state.get("records")
if records is None:
    st.info("Drop a text file to compute AOS - LOS differences.")
    st.stop()

st.subheader(f"Result for {st.session_state.get('report_name', 'report')}")


# ----------------------------
# Station activation
# ----------------------------
rows = compute(records)
labels = {row_label(row): row.record.id for row in rows}
excluded = st.multiselect(
    "Excluded stations",
    options=list(labels),
    default=[row_label(row) for row in rows if not row.record.active],
)
excluded_ids = {labels[label] for label in excluded}

for station in records:
    if station.active == (station.id in excluded_ids):
        toggle_active(records, station.id)

rows = compute(records)
frame = rows_to_frame(rows)
summary = summarize(rows)


# ----------------------------
# KPIs
# ----------------------------
cols = st.columns(4)
with cols[0]:
    st.metric("Stations", summary.stations)
with cols[1]:
    st.metric("Active", summary.active)
with cols[2]:
    st.metric("Visibility holes", summary.holes)
with cols[3]:
    st.metric(
        "Largest hole (min)",
        summary.largest_hole_minutes if summary.largest_hole_minutes is not None else "-",
        help=summary.largest_hole_label,
    )

if summary.overlaps:
    st.warning(f"{summary.overlaps} station(s) acquire before the previous one loses signal")


# ----------------------------
# Table
# ----------------------------
st.dataframe(
    frame.style.apply(highlight, axis=1),
    hide_index=True,
    use_container_width=True,
)


# ----------------------------
# Timeline
# ----------------------------
windows = pd.DataFrame(
    [
        {
            "station": row_label(row),
            "aos": row.record.aos,
            "los": row.record.los,
            "active": "active" if row.record.active else "excluded",
        }
        for row in rows
        if row.record.aos is not None and row.record.los is not None
    ]
)

if not windows.empty:
    fig = px.timeline(
        windows,
        x_start="aos",
        x_end="los",
        y="station",
        color="active",
        title="AOS → LOS windows (UTC)",
    )
    fig.update_yaxes(autorange="reversed")
    st.plotly_chart(fig, use_container_width=True)
