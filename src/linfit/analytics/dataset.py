from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from linfit.constants import SAMPLE_X, SAMPLE_Y


@dataclass(frozen=True)
class SampleSet:
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if self.x.shape != self.y.shape:
            raise ValueError(
                f"x and y must have the same length, got {self.x.size} and {self.y.size}"
            )
        self.x.setflags(write=False)
        self.y.setflags(write=False)

    @property
    def n(self) -> int:
        return int(self.x.size)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x, "y": self.y})


def make_sample_set(x: Sequence[float], y: Sequence[float]) -> SampleSet:
    return SampleSet(
        x=np.array(x, dtype=np.float64),
        y=np.array(y, dtype=np.float64),
    )


def load_sample_set() -> SampleSet:
    return make_sample_set(SAMPLE_X, SAMPLE_Y)
