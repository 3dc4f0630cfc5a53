"""CLI to compute signal readings and export the distance curve.

Usage:
    python -m wifisim.cli --distance 6 --steps
    python -m wifisim.cli --curve --csv out/curve.csv --plot out/curve.png
"""

import argparse
import logging
import math
from pathlib import Path

from . import (
    DEFAULT_PARAMS,
    calculation_steps,
    compute_curve,
    compute_reading,
    load_params_from_text_file,
    plot_signal_curve,
    print_table,
    readings_to_table,
    save_curve_csv,
    signal_quality,
    summary_rows,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wi-Fi signal strength versus distance (free-space model)")
    parser.add_argument("--distance", type=float, default=6.0, help="router-device distance in meters")
    parser.add_argument("--max-distance", type=int, default=None, help="last sampled meter of the curve")
    parser.add_argument("--params", type=Path, default=None, help="text file with model constant overrides")
    parser.add_argument("--steps", action="store_true", help="print the step-by-step calculation")
    parser.add_argument("--curve", action="store_true", help="print the signal-vs-distance table")
    parser.add_argument("--csv", type=Path, default=None, help="save the curve as CSV")
    parser.add_argument("--plot", type=Path, default=None, help="save the curve chart as PNG")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if not math.isfinite(args.distance):
        parser.error("--distance must be a finite number")

    params = DEFAULT_PARAMS
    if args.params is not None:
        try:
            params = load_params_from_text_file(str(args.params))
        except ValueError as exc:
            parser.error(f"invalid parameters in {args.params}: {exc}")

    reading = compute_reading(args.distance, params)
    band = signal_quality(reading.strength_percent)
    for label, value in summary_rows(reading):
        print(f"{label}: {value}")
    print(f"Quality: {band.label}")

    if args.steps:
        print()
        for step in calculation_steps(reading, params):
            print(step.as_text())

    if args.curve or args.csv is not None or args.plot is not None:
        readings = compute_curve(args.max_distance, params)
        if args.curve:
            print()
            print_table(readings_to_table(readings))
        if args.csv is not None:
            out = save_curve_csv(readings, args.csv)
            print(f"Saved {len(readings)} rows to {out}")
        if args.plot is not None and readings:
            out = plot_signal_curve(readings, args.plot, highlight_distance_m=args.distance)
            print(f"Saved chart to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
