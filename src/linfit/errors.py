from __future__ import annotations

from typing import Sequence


class LinfitError(Exception):
    pass


class GnuplotUnavailableError(LinfitError):
    """The plotting program could not be launched."""

    def __init__(self, command: Sequence[str], cause: OSError):
        self.command = list(command)
        self.cause = cause
        super().__init__(f"cannot launch {' '.join(self.command)!r}: {cause}")
