"""Pytest configuration and fixtures."""

import logging

import pytest

# Plain asserts inside the sample extension modules get pytest's detailed output
pytest.register_assert_rewrite("tests.extensions")


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach asserting_that handlers after each test so loggers can be set up again."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("asserting_that")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


@pytest.fixture
def debug_log(tmp_path):
    return tmp_path / "logs" / "debug.log"
