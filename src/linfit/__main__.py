from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from linfit.constants import PLOT_OUT_DIR
from linfit.jobs.linear_fit_analysis import run_linear_fit_analysis
from linfit.lib.logger import set_level
from linfit.plotting.gnuplot import PlotSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linfit",
        description=(
            "Fit a straight line to the built-in 11-point dataset by least squares "
            "and plot the data with the fitted line in gnuplot"
        ),
    )
    parser.add_argument(
        "--gnuplot-cmd",
        help="Command that starts gnuplot. Default: GNUPLOT_CMD or 'gnuplot -persist'",
        default=None,
    )
    parser.add_argument(
        "--terminal",
        help="gnuplot terminal. Default: GNUPLOT_TERM or 'wx'",
        default=None,
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Print the fit only, do not start gnuplot",
    )
    parser.add_argument(
        "--png-dir",
        type=Path,
        help="Also save linear_fit.png into this directory. Default: PLOT_OUT_DIR",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        help="DEBUG, INFO, WARNING... Default: LOG_LEVEL or INFO",
        default=None,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        set_level(args.log_level)

    settings = PlotSettings.from_env(command=args.gnuplot_cmd, terminal=args.terminal)
    run_linear_fit_analysis(
        settings=settings,
        plot=not args.no_plot,
        png_dir=args.png_dir or PLOT_OUT_DIR,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
