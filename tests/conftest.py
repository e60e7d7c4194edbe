import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() rebinds handlers to the current stderr; undo it between tests."""
    yield
    package_logger = logging.getLogger("wdsession")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
