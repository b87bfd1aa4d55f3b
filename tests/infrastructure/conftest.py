import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams that CliRunner closes after each call."""
    yield
    logger = logging.getLogger("cinema_tickets")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
