from __future__ import annotations

from pathlib import Path
from typing import Optional

from linfit.analytics.dataset import load_sample_set
from linfit.analytics.linear_fit import (
    FitResult,
    fit_linear,
    plot_linear_fit_png,
    print_fit_report,
)
from linfit.plotting.gnuplot import PlotSettings, stream_plot


def run_linear_fit_analysis(
    settings: Optional[PlotSettings] = None,
    plot: bool = True,
    png_dir: Optional[Path] = None,
) -> FitResult:
    samples = load_sample_set()
    fit = fit_linear(samples.x, samples.y)

    print_fit_report(fit)

    if png_dir is not None:
        plot_path = plot_linear_fit_png(samples, fit, output_dir=png_dir)
        print(f"Saved linear fit plot to: {plot_path}")

    if plot:
        stream_plot(samples, fit, settings or PlotSettings.from_env())

    return fit


def main() -> None:
    run_linear_fit_analysis()


if __name__ == "__main__":
    main()
