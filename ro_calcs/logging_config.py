"""
Logging setup for the calculator.

Everything goes to stderr so Streamlit's own output stays readable.
"""

import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level=None):
    """
    Attach a single stderr handler to the ``ro_calcs`` logger.

    Args:
        level: Logging level name or number. Defaults to the RO_LOG_LEVEL
               environment variable, then INFO.

    Returns:
        logging.Logger: The package logger
    """
    if level is None:
        level = os.environ.get('RO_LOG_LEVEL', 'INFO')
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger('ro_calcs')
    # Streamlit reruns the script on every interaction
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
