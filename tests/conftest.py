import logging

import pytest

from wirebox import create_container
from wirebox.constants import LOGGER

log_capture: list[str] = []


class ListLogHandler(logging.Handler):
    def emit(self, record):
        log_capture.append(self.format(record))


class RecordingLogger:
    """Logging collaborator exposing the duck-typed warn/error channels."""

    def __init__(self):
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def warn(self, message):
        self.warnings.append(message)

    def error(self, message):
        self.errors.append(message)


@pytest.fixture(autouse=True)
def reset_logging_capture():
    log_capture.clear()
    handler = ListLogHandler(level=logging.WARNING)
    LOGGER.addHandler(handler)
    yield
    LOGGER.removeHandler(handler)


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def container(recorder):
    return create_container(logger=recorder)


@pytest.fixture
def package_log():
    return log_capture
