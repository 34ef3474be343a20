# tagpages/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "tagpages", level: int = logging.INFO) -> logging.Logger:
    """
    Return a named logger for the build step.
    If the host build has not configured logging, we add a basicConfig once.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
