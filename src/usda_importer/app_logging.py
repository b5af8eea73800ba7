"""Logging configuration helpers."""

import logging
import sys

LOGGER_NAME = "usda_importer"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send importer logs to stderr through a single handler.

    Repeated calls only adjust the level; verbose enables the per-record
    debug lines written by the mapper.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
