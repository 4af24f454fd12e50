"""Root test configuration: isolate settings env vars and loguru state per test"""

import os

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Drop any HUNKDIFF_* variables from the caller's environment."""
    for name in list(os.environ):
        if name.startswith("HUNKDIFF_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo sinks the CLI installs so later tests do not log to a closed stream."""
    yield
    logger.remove()
    logger.disable("hunkdiff")
