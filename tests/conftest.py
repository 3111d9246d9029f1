import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("http_bridge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
