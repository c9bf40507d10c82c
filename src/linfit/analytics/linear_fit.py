from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import statsmodels.api as sm

from linfit.analytics.dataset import SampleSet
from linfit.constants import (
    DATA_SERIES_TITLE,
    FIT_SERIES_TITLE,
    PLOT_TITLE,
    X_LABEL,
    Y_LABEL,
)
from linfit.lib.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FitResult:
    """Straight-line OLS fit ``y = c0 + c1 * x``.

    ``cov00``, ``cov01`` and ``cov11`` are the entries of the parameter
    covariance matrix, scaled by the residual variance ``sumsq / (n - 2)``.
    """

    c0: float
    c1: float
    cov00: float
    cov01: float
    cov11: float
    sumsq: float

    def covariance_matrix(self) -> np.ndarray:
        return np.array(
            [
                [self.cov00, self.cov01],
                [self.cov01, self.cov11],
            ],
            dtype=float,
        )


def fit_linear(x: np.ndarray, y: np.ndarray) -> FitResult:
    design = pd.DataFrame(
        {
            "const": 1.0,
            "x": np.asarray(x, dtype=float),
        }
    )
    target = pd.Series(np.asarray(y, dtype=float), name="y")

    model = sm.OLS(target, design).fit()
    cov = model.cov_params()

    result = FitResult(
        c0=float(model.params["const"]),
        c1=float(model.params["x"]),
        cov00=float(cov.loc["const", "const"]),
        cov01=float(cov.loc["const", "x"]),
        cov11=float(cov.loc["x", "x"]),
        sumsq=float(model.ssr),
    )
    logger.debug("OLS fit over %d points: %s", len(target), result)
    return result


def fitted_values(x: np.ndarray, fit: FitResult) -> np.ndarray:
    return fit.c0 + fit.c1 * np.asarray(x, dtype=float)


def format_fit_report(fit: FitResult) -> List[str]:
    return [
        f"best fit: Y = {fit.c0:g} + {fit.c1:g} X",
        "covariance matrix:",
        f"[ {fit.cov00:g}, {fit.cov01:g}",
        f"  {fit.cov01:g}, {fit.cov11:g}]",
        f"sumsq = {fit.sumsq:g}",
        "",
    ]


def print_fit_report(fit: FitResult) -> None:
    for line in format_fit_report(fit):
        print(line)


def plot_linear_fit_png(
    samples: SampleSet,
    fit: FitResult,
    output_dir: Optional[Path] = None,
) -> Path:
    if output_dir is None:
        output_dir = Path(__file__).resolve().parent / "data"
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / "linear_fit.png"

    order = np.argsort(samples.x)
    x_sorted = samples.x[order]
    y_hat = fitted_values(x_sorted, fit)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.scatter(samples.x, samples.y, label=DATA_SERIES_TITLE)
    ax.plot(x_sorted, y_hat, label=FIT_SERIES_TITLE, color="tab:orange")
    ax.set_title(PLOT_TITLE)
    ax.set_xlabel(X_LABEL)
    ax.set_ylabel(Y_LABEL)
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)

    logger.info("Saved linear fit plot to %s", output_path)
    return output_path
