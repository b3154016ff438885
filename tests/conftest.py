import logging

import pytest


@pytest.fixture(autouse=True)
def reset_penplot_logger():
    """main() installs handlers on the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("penplot")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
