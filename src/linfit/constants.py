from __future__ import annotations

import os
from pathlib import Path
from typing import Final, Optional, Tuple

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path.cwd() / ".env")

SAMPLE_X: Final[Tuple[float, ...]] = (
    10.0, 8.0, 13.0, 9.0, 11.0, 14.0, 6.0, 4.0, 12.0, 7.0, 5.0,
)
SAMPLE_Y: Final[Tuple[float, ...]] = (
    8.04, 6.95, 7.68, 8.81, 8.33, 9.96, 7.24, 4.26, 10.84, 4.82, 5.68,
)

GNUPLOT_CMD: Final[str] = os.getenv("GNUPLOT_CMD", "gnuplot -persist")
GNUPLOT_TERM: Final[str] = os.getenv("GNUPLOT_TERM", "wx")

_out_dir = os.getenv("PLOT_OUT_DIR", "")
PLOT_OUT_DIR: Final[Optional[Path]] = Path(_out_dir) if _out_dir else None

PLOT_TITLE: Final[str] = "<X,Y> and Linear fit"
X_LABEL: Final[str] = "X"
Y_LABEL: Final[str] = "Y"
DATA_SERIES_TITLE: Final[str] = "<x,y>"
FIT_SERIES_TITLE: Final[str] = "Line"
FIT_LINE_STYLE: Final[int] = 12

SENTINEL: Final[str] = "e"
EXIT_COMMAND: Final[str] = "exit"
