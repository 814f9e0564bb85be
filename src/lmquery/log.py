# src/lmquery/log.py
from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "lmquery"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Return the ``lmquery`` logger wired for this run.

    Console output goes to stderr so stdout carries only the model's answer.
    Diagnostic lines are logged at DEBUG and only reach the console when
    ``verbose`` is set; the log file, if any, records everything.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(logging.DEBUG)
        logger.addHandler(fh)

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
