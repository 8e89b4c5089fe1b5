"""
Log Module - Logger Setup
=========================

Named loggers shared by the tracer, loader and pipeline.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
PACKAGE_LOGGER = "slicer_lib"


def _configure_package_logger():
    """Attach the stream handler to the package logger once."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger
    logger.setLevel(os.environ.get("SLICER_LOG_LEVEL", "INFO").upper())
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name=PACKAGE_LOGGER):
    """
    Return a named logger below the ``slicer_lib`` package logger.

    Only the package logger carries a handler; module loggers propagate to it
    and on to the root logger. The level is read from the ``SLICER_LOG_LEVEL``
    environment variable (default ``INFO``) when the package logger is first
    configured.
    """
    _configure_package_logger()
    return logging.getLogger(name)
