"""
Batch fitting script for linear models.

Usage:
    python linfit_batch.py "data/*.csv" --x-column carat --y-column price \
        --grid=-5:20,1:3 --resolution 25 --initial 0,0

Notes:
- Columns may be given by index or by header name.
- Optional cropping with --x-min/--x-max before fitting.
- Every file gets a least squares fit and a minimizer run; --grid adds a
  ranked grid search over (a0, a1) for two-parameter models.
- Outputs: for each file, writes <base>_results.txt and <base>_data.txt alongside the input file.
"""

import argparse
import glob
import logging
import os
import sys

from linfit.data_import import load_data_file
from linfit.data_preprocessing import crop_range
from linfit.dataset import Dataset
from linfit.fitting import ModelFitter, get_minimizer
from linfit.models import list_models
from linfit.utils.logger import log_error, log_info, setup_logger


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Batch linear model fitting")
    p.add_argument("pattern", help="Glob pattern for data files, e.g. 'data/*.csv'")

    # Data
    p.add_argument("--x-column", default="0", help="X column index or header name")
    p.add_argument("--y-column", default="1", help="Y column index or header name")
    p.add_argument("--x-min", type=float, default=None, help="Crop data min X")
    p.add_argument("--x-max", type=float, default=None, help="Crop data max X")

    # Model
    p.add_argument("--model", default="linear", choices=list_models(), help="Model family")
    p.add_argument("--minimizer", default="lmfit", choices=["lmfit", "scipy"], help="Minimizer backend")
    p.add_argument("--method", default=None, help="Minimizer method (e.g. nelder, powell for lmfit; Nelder-Mead, BFGS for scipy)")
    p.add_argument("--max-nfev", type=int, default=None, help="Max function evals for the lmfit minimizer")
    p.add_argument("--initial", type=str, default=None, help="Comma-separated initial parameters (default: zeros)")

    # Grid search
    p.add_argument("--grid", type=str, default=None, help="Grid ranges a0min:a0max,a1min:a1max (two-parameter models only)")
    p.add_argument("--resolution", type=int, default=25, help="Grid samples per axis")
    p.add_argument("--top", type=int, default=None, help="Keep only the best N grid candidates")

    # Logging
    p.add_argument("--log-dir", default=None, help="Log directory (default: $LINFIT_LOG_DIR or logs)")
    p.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level")

    return p.parse_args(argv)


def parse_list(arg, n):
    if arg is None:
        return None
    parts = [float(x) for x in arg.split(",")]
    if len(parts) != n:
        raise ValueError(f"Expected {n} values, got {len(parts)}")
    return parts


def parse_ranges(arg):
    ranges = []
    for pair in arg.split(","):
        lo_str, hi_str = pair.split(":")
        ranges.append((float(lo_str), float(hi_str)))
    if len(ranges) != 2:
        raise ValueError(f"Expected two ranges a0min:a0max,a1min:a1max, got {arg!r}")
    return ranges


def build_minimizer(args):
    kws = {}
    if args.method is not None:
        kws["method"] = args.method
    if args.minimizer == "lmfit" and args.max_nfev is not None:
        kws["max_nfev"] = args.max_nfev
    return get_minimizer(args.minimizer, **kws)


def export_results(base_path, fitter):
    results_file = f"{base_path}_results.txt"
    data_file = f"{base_path}_data.txt"

    with open(results_file, "w") as f:
        f.write(fitter.get_fit_report())
        f.write("\n\nStatistics:\n")
        for k, v in fitter.get_statistics().items():
            f.write(f"{k}: {v}\n")

    table = fitter.evaluate(fitter.best_params())
    with open(data_file, "w") as f:
        f.write("X\tY_Exp\tY_Fit\tResidual\n")
        for x, y, y_fit, res in zip(table["x"], table["y"], table["prediction"], table["residual"]):
            f.write(f"{x:.6e}\t{y:.6e}\t{y_fit:.6e}\t{res:.6e}\n")

    return results_file, data_file


def fit_file(fname, args):
    dataset = load_data_file(fname, x_column=args.x_column, y_column=args.y_column)
    if args.x_min is not None or args.x_max is not None:
        x, y = crop_range(dataset.x, dataset.y, x_min=args.x_min, x_max=args.x_max)
        dataset = Dataset(x, y, name=dataset.name)

    fitter = ModelFitter(dataset, model=args.model, minimizer=build_minimizer(args))
    fitter.ordinary_least_squares()
    if args.grid:
        a0_range, a1_range = parse_ranges(args.grid)
        fitter.grid_search(a0_range, a1_range, resolution=args.resolution, top=args.top)
    fitter.minimize(parse_list(args.initial, fitter.model.n_params))
    return fitter


def main(argv=None):
    args = parse_args(argv)
    level = getattr(logging, args.log_level) if args.log_level else None
    setup_logger(log_dir=args.log_dir, log_level=level)

    files = sorted(glob.glob(args.pattern))
    if not files:
        print(f"No files matched pattern: {args.pattern}")
        return 1

    failures = 0
    for fname in files:
        try:
            fitter = fit_file(fname, args)
            base, _ = os.path.splitext(fname)
            export_results(base, fitter)
            log_info(f"Processed {fname}")
            print(f"Processed {fname}")
        except Exception as e:
            failures += 1
            log_error(f"Error processing {fname}", e)
            print(f"Error processing {fname}: {e}", file=sys.stderr)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
