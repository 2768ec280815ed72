"""
simulate_model.py — simulate one Modelica model through OMC and list its signals

Example:
    python scripts/examples/simulate_model.py Modelica.Electrical.Analog.Examples.ChuaCircuit \
        --work-dir ./work --stop-time 100
"""

import argparse

from remote_om import ExperimentConfig, SimulationConfig, simulate_model
from remote_om.log_utils import setup_logging


def parse_args():
    ap = argparse.ArgumentParser(description="Simulate a Modelica model with OpenModelica")
    ap.add_argument("model", help="Model to simulate, in dot notation")
    ap.add_argument("--sys-libs", default="Modelica", help="System libraries separated by ':'")
    ap.add_argument("--sys-vers", default="", help="Library versions separated by ':'")
    ap.add_argument("--work-files", default="", help="Files in --work-dir to load, separated by ':'")
    ap.add_argument("--files", default="", help="Additional files (absolute paths), separated by ':'")
    ap.add_argument("--work-dir", default="/work")
    ap.add_argument("--sim-dir", default="/tmp/OpenModelica")
    ap.add_argument("--start-time", type=float, default=0.0)
    ap.add_argument("--stop-time", type=float, default=0.0)
    ap.add_argument("--tolerance", type=float, default=1e-6)
    ap.add_argument("--intervals", type=int, default=500)
    ap.add_argument("--log-level", default="INFO")
    return ap.parse_args()


def main():
    args = parse_args()
    setup_logging(args.log_level)

    cfg = SimulationConfig(
        sys_libs=args.sys_libs,
        sys_vers=args.sys_vers,
        work_files=args.work_files,
        files=args.files,
        work_dir=args.work_dir,
        sim_dir=args.sim_dir,
        experiment=ExperimentConfig(
            start_time=args.start_time,
            stop_time=args.stop_time,
            tolerance=args.tolerance,
            number_of_intervals=args.intervals,
        ),
    )
    outcome = simulate_model(args.model, cfg)

    names = outcome.result.names()
    print(f"{outcome.result_file}: {len(names)} variables")
    for name in sorted(names)[:20]:
        print("  ", name)
    if not outcome.succeeded:
        print("failed steps:", ", ".join(s.command for s in outcome.failed_steps))


if __name__ == "__main__":
    main()
