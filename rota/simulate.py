# rota/simulate.py
"""
Station rota runner
- reads [stations] / [timeslots] / [individuals] sections from a text file
- shuffles the individuals, places them at random with a retry cap
- prints the schedule and writes it to a text file
- optional: several seeded trials with summary metrics, CSV/JSON export, chart
"""
import argparse, json
from typing import List, Optional
import pandas as pd

from rota.assign import make_rng, run_once
from rota.model import AssignmentResult, ConfigurationError
from utils.io import ensure_dir, format_schedule, load_params, read_input, write_schedule
from utils.metrics import fill_rate, occupancy_by_station, summarize_trials


def run_trials(stations, timeslots, individuals, params) -> List[AssignmentResult]:
    results = []
    for s in range(params.trials):
        seed = None if params.seed is None else params.seed + s
        results.append(run_once(stations, timeslots, individuals, params, rng=make_rng(seed)))
    return results


def save_outputs(out_dir: str, results: List[AssignmentResult], summary: dict, plot: bool = False):
    ensure_dir(out_dir)
    first = results[0]
    first.grid.to_frame().to_csv(f"{out_dir}/schedule.csv", index=False)
    pd.DataFrame({"individual": first.unassigned}).to_csv(f"{out_dir}/unassigned.csv", index=False)
    pd.DataFrame({
        "trial": list(range(len(results))),
        "fill_rate": [fill_rate(r.grid.snapshot()) for r in results],
        "unassigned": [len(r.unassigned) for r in results],
        "attempts_max": [max(r.attempts, default=0) for r in results],
    }).to_csv(f"{out_dir}/trials.csv", index=False)
    with open(f"{out_dir}/summary.json", "w", encoding="utf-8") as f:
        json.dump(summary, f, ensure_ascii=False, indent=2)

    if plot:
        from utils.plotting import bar_dict
        bar_dict(occupancy_by_station(first.grid.snapshot()), "Placements per station",
                 "station", "individuals", path=f"{out_dir}/occupancy.png")


# ---------- CLI ----------

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Randomly place individuals into station/timeslot slots")
    ap.add_argument("--params", default="", help="JSON file with Params overrides")
    ap.add_argument("--input", dest="input_path", default=None)
    ap.add_argument("--output", dest="output_path", default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--max-retries", dest="max_retries", type=int, default=None)
    ap.add_argument("--no-shuffle", action="store_true")
    ap.add_argument("--trials", type=int, default=None)
    ap.add_argument("--out", dest="output_dir", default=None,
                    help="directory for CSV/JSON results")
    ap.add_argument("--plot", action="store_true", default=None,
                    help="save a placements-per-station chart into --out")
    args = ap.parse_args(argv)

    try:
        params = load_params(
            args.params,
            input_path=args.input_path, output_path=args.output_path, seed=args.seed,
            max_retries=args.max_retries, trials=args.trials,
            output_dir=args.output_dir, plot=args.plot,
            shuffle=False if args.no_shuffle else None,
        )
    except ConfigurationError as e:
        ap.error(str(e))

    data = read_input(params.input_path)
    stations, timeslots, individuals = data["stations"], data["timeslots"], data["individuals"]
    if not stations or not timeslots:
        ap.error(f"{params.input_path}: need at least one station and one timeslot")
    print(f"[OK] Loaded {len(stations)} stations, {len(timeslots)} timeslots, "
          f"{len(individuals)} individuals <- {params.input_path}")

    results = run_trials(stations, timeslots, individuals, params)
    first = results[0]

    report = format_schedule(first.grid.snapshot(), first.unassigned)
    print(report, end="")
    write_schedule(params.output_path, report)
    print(f"[OK] Wrote schedule -> {params.output_path}")
    if first.unassigned:
        print(f"[WARN] {len(first.unassigned)} individuals could not be placed")

    summary = summarize_trials(results)
    print(f"[DONE] runs={summary['trials']}  "
          f"mean fill={summary['fill_rate_mean']:.4f}  "
          f"complete={summary['complete_share']:.4f}")

    if params.output_dir:
        save_outputs(params.output_dir, results, summary, plot=params.plot)
        print(f"[SAVE] results -> {params.output_dir}")
    elif params.plot:
        print("[WARN] --plot needs --out, skipping chart")

    return results


if __name__ == "__main__":
    main()
