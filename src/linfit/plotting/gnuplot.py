from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import IO, List, Optional, Sequence

from linfit.analytics.dataset import SampleSet
from linfit.analytics.linear_fit import FitResult, fitted_values
from linfit.constants import (
    DATA_SERIES_TITLE,
    EXIT_COMMAND,
    FIT_LINE_STYLE,
    FIT_SERIES_TITLE,
    GNUPLOT_CMD,
    GNUPLOT_TERM,
    PLOT_TITLE,
    SENTINEL,
    X_LABEL,
    Y_LABEL,
)
from linfit.errors import GnuplotUnavailableError
from linfit.lib.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlotSettings:
    command: Sequence[str]
    terminal: str = GNUPLOT_TERM
    title: str = PLOT_TITLE

    @classmethod
    def from_env(
        cls,
        command: Optional[str] = None,
        terminal: Optional[str] = None,
    ) -> "PlotSettings":
        return cls(
            command=tuple(shlex.split(command or GNUPLOT_CMD)),
            terminal=terminal or GNUPLOT_TERM,
        )


def _data_line(x: float, y: float) -> str:
    return f"{x:f} {y:f}"


def build_plot_script(
    samples: SampleSet,
    fit: FitResult,
    terminal: str = GNUPLOT_TERM,
    title: str = PLOT_TITLE,
) -> List[str]:
    """Lines sent to gnuplot before the final flush.

    Both series are inline (``'-'``) data blocks, each closed by a sentinel
    line.
    """
    lines = [
        f"set term {terminal}",
        f"set xlabel '{X_LABEL}'",
        f"set ylabel '{Y_LABEL}'",
        f"set title '{title}'",
        (
            f"plot '-' title '{DATA_SERIES_TITLE}',"
            f"'-' title '{FIT_SERIES_TITLE}' with line ls {FIT_LINE_STYLE}"
        ),
    ]

    for x, y in zip(samples.x, samples.y):
        lines.append(_data_line(x, y))
    lines.append(SENTINEL)

    for x, y_hat in zip(samples.x, fitted_values(samples.x, fit)):
        lines.append(_data_line(x, y_hat))
    lines.append(SENTINEL)

    return lines


class GnuplotPipe:
    """Write-only text channel to a gnuplot child process.

    Closing the channel waits for the child to exit.
    """

    def __init__(self, command: Sequence[str]):
        self.command = list(command)
        self._proc: Optional[subprocess.Popen] = None

    @property
    def stdin(self) -> IO[str]:
        if self._proc is None or self._proc.stdin is None:
            raise RuntimeError("gnuplot pipe is not open")
        return self._proc.stdin

    def open(self) -> "GnuplotPipe":
        try:
            self._proc = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise GnuplotUnavailableError(self.command, e) from e
        logger.info("Launched %s (pid=%s)", " ".join(self.command), self._proc.pid)
        return self

    def send(self, line: str) -> None:
        self.stdin.write(line + "\n")

    def flush(self) -> None:
        self.stdin.flush()

    def close(self) -> Optional[int]:
        if self._proc is None:
            return None
        proc, self._proc = self._proc, None
        if proc.stdin is not None:
            try:
                proc.stdin.close()
            except BrokenPipeError:
                logger.debug("gnuplot closed its input before us")
        return proc.wait()

    def __enter__(self) -> "GnuplotPipe":
        if self._proc is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def stream_plot(
    samples: SampleSet,
    fit: FitResult,
    settings: PlotSettings,
) -> bool:
    script = build_plot_script(samples, fit, terminal=settings.terminal, title=settings.title)

    try:
        pipe = GnuplotPipe(settings.command).open()
    except GnuplotUnavailableError as e:
        logger.warning("Skipping plot: %s", e)
        return False

    with pipe:
        for line in script:
            pipe.send(line)
        pipe.flush()
        pipe.send(EXIT_COMMAND)

    logger.debug("Streamed %d lines to gnuplot", len(script) + 1)
    return True
