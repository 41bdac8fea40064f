import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def project_logger():
    logger = logging.getLogger("pava")

    def reset():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    reset()
    yield logger
    reset()
