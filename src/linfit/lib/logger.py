from __future__ import annotations

import logging
import os

_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_PREFIX = "linfit"

root = logging.getLogger()
if not root.handlers:
    logging.basicConfig(level=_LEVEL, format=_FMT)


def get_logger(name: str) -> logging.Logger:
    lg = logging.getLogger(name)
    if name == _PREFIX or name.startswith(_PREFIX + "."):
        # children inherit from the package logger so set_level reaches them
        logging.getLogger(_PREFIX).setLevel(_LEVEL)
    else:
        lg.setLevel(_LEVEL)
    return lg


def set_level(level: str | int) -> None:
    """Change the level of every ``linfit.*`` logger at once."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(_PREFIX).setLevel(level)
