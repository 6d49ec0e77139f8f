import logging
from pathlib import Path

import pytest

from puzsolve.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_puzsolve_logging():
    """CLI runs install handlers bound to captured streams; drop them between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_board(tmp_path):
    """Write board text into ``tmp_path`` and return the file path."""

    def write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write
