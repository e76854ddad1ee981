"""Logging setup."""

import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    logger = logging.getLogger("lifelanguages")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("[%(asctime)s %(levelname)s] %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
