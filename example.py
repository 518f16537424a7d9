from processing.formatting import rows_to_frame
from processing.gap_analyzer import compute, toggle_active
from processing.report_parser import parse
from simulator.report_generator import PassReportSimulator

sim = PassReportSimulator()

records = parse(sim.generate_report(stations=6, fault="MISSING_AOS"))
print(rows_to_frame(compute(records)).to_string(index=False))

toggle_active(records, records[2].id)
print(rows_to_frame(compute(records)).to_string(index=False))
