"""Global pytest fixtures for clibkit."""

import logging

import pytest

from clibkit import config
from clibkit.logging import LOGGER_NAME, LabelStreamHandler


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep clibkit's own environment variables out of every test."""
    for name in (
        config.DEBUG_ENV_VAR,
        config.LOG_PATH_ENV_VAR,
        config.FLIGHT_RECORDER_CAPACITY_ENV_VAR,
        config.LOGGER_LEVELS_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_label_logger():
    """Remove label handlers installed by a test so they don't leak."""
    yield
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        if isinstance(handler, LabelStreamHandler):
            log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
    log.propagate = True
