"""
Shared fixtures for tests.
"""
import logging

import pytest

from core.config import reset_settings


class RecordingLog:
    """In-memory event sink with the same interface as TransactionLog."""

    def __init__(self):
        self.events = []

    def log_operational(self, level, message):
        self.events.append(("operational", level, message))

    def log_transaction(self, level, message):
        self.events.append(("transaction", level, message))

    def messages(self, channel=None, level=None):
        return [
            message for ch, lvl, message in self.events
            if (channel is None or ch == channel) and (level is None or lvl == level)
        ]

    @property
    def warnings(self):
        return self.messages(level=logging.WARNING)


@pytest.fixture
def recording_log():
    return RecordingLog()


@pytest.fixture
def write_file(tmp_path):
    """Write lines to a file under tmp_path and return its path as a string."""
    def _write(name, *lines):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for var in ("LOG_LEVEL", "INPUT_FILES", "DELIMITER", "DATE_FORMAT",
                "INPUT_ENCODING", "TEXT_LOG_PATH", "CSV_LOG_PATH", "APP_NAME"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
