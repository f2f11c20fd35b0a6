# === FILE: robots_validate/logger.py ===
"""Logging for **robots_validate**.

Every module logs through the single :data:`logger`::

    from robots_validate.logger import logger
    logger.info("%s confirmed as %s", ip, name)

Records go to stderr, leaving stdout to the CLI's JSON, and optionally to a
rotating file. :func:`init_logging` swaps the handlers in place, so the
imported ``logger`` object stays valid after the CLI reconfigures it.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "RobotsValidate"
_LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _build_handlers(log_file: str | Path | None, fmt: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_LOG_FILE_MAX_BYTES,
                backupCount=_LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def init_logging(
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)configure the project logger, closing the handlers it replaces.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → stderr only.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()
    for handler in _build_handlers(log_file, log_format):
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging"]
