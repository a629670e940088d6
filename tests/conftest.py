"""
Shared pytest fixtures for keyedsets tests.
"""

import logging

import pytest


def _reset_logger(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_keyedsets_logging():
    """Start and finish every test with the library's silent default.

    Handlers added by a test are closed and the level goes back to NOTSET so
    logging configuration never leaks between tests.
    """
    logger = logging.getLogger("keyedsets")
    _reset_logger(logger)
    yield
    _reset_logger(logger)
