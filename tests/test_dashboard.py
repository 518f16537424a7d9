# tests/test_dashboard.py

from pathlib import Path

from streamlit.testing.v1 import AppTest

from processing.report_parser import parse
from simulator.report_generator import PassReportSimulator


DASHBOARD = str(Path(__file__).resolve().parent.parent / "monitoring" / "dashboard.py")


def test_dashboard_waits_for_file():
    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    at.run()

    assert not at.exception
    assert "Drop a text file" in at.info[0].value


def test_dashboard_renders_loaded_report():
    records = parse(PassReportSimulator(seed=2).generate_report(stations=5))

    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    at.session_state["records"] = records
    at.session_state["report_name"] = "passes.txt"
    at.run()

    assert not at.exception
    assert len(at.dataframe) == 1
    assert at.metric[0].value == "5"


def test_dashboard_clamps_header_lines_setting(monkeypatch):
    monkeypatch.setenv("AMULET_HEADER_LINES", "500")

    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    at.run()

    assert not at.exception
    assert at.sidebar.number_input[0].value == 200
    assert "out of range" in at.sidebar.warning[0].value


def test_dashboard_ignores_non_integer_header_lines(monkeypatch):
    monkeypatch.setenv("AMULET_HEADER_LINES", "fifteen")

    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    at.run()

    assert not at.exception
    assert at.sidebar.number_input[0].value == 15
