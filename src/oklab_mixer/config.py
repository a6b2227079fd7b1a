# config.py – settings shared by the CLI and the Flask app

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "OKLAB_MIXER_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s: %(message)s"

# 510 midpoints → at most 512 colors per request
MAX_MIDPOINTS = 510


def default_log_level() -> str:
    return (os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    lvl = default_log_level() if level is None else level
    if isinstance(lvl, str):
        lvl = logging.getLevelName(lvl.upper())
        if not isinstance(lvl, int):
            lvl = logging.WARNING
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
