"""
Pytest configuration for linfit tests.
"""

import os
import sys
from pathlib import Path
from typing import List, Tuple

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from linfit.analytics.dataset import SampleSet, load_sample_set
from linfit.analytics.linear_fit import FitResult, fit_linear


# Stands in for gnuplot: copies everything written to its stdin into a file.
_CAPTURE_SCRIPT = (
    "import pathlib, sys; "
    "pathlib.Path(sys.argv[1]).write_text(sys.stdin.read())"
)


@pytest.fixture
def samples() -> SampleSet:
    return load_sample_set()


@pytest.fixture
def fit(samples: SampleSet) -> FitResult:
    return fit_linear(samples.x, samples.y)


@pytest.fixture
def capture_command(tmp_path: Path) -> Tuple[List[str], Path]:
    """Command that records its input, and the file it records into."""
    out = tmp_path / "gnuplot_input.txt"
    return [sys.executable, "-c", _CAPTURE_SCRIPT, str(out)], out


@pytest.fixture
def missing_command() -> List[str]:
    return ["linfit-no-such-gnuplot-binary"]
