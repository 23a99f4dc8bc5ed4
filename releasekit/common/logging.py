# releasekit/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "releasekit", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger. If nothing configured the root logger yet,
    install a basicConfig once so CLI-style runs still print something.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(level)
    return logger
