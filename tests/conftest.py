import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """configure_logging() stops propagation, which hides records from caplog."""
    yield
    logger = logging.getLogger('ro_calcs')
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
