import pytest
from loguru import logger

from tshabot.logging_setup import setup_logging


def _reset_logging():
    logger.remove()
    logger.configure(patcher=lambda record: None)


@pytest.fixture
def reset_logging():
    """Drop whatever sinks a test (or main()) installed."""
    yield
    _reset_logging()


@pytest.fixture
def captured_logs():
    """JSON log lines written while the test runs."""
    lines = []
    setup_logging("DEBUG", sink=lines.append)
    yield lines
    _reset_logging()
