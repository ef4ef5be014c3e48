import logging
from logging.handlers import RotatingFileHandler

import pytest

from memstore.config import reset_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep env vars and a stray .env file from leaking into Settings."""
    for name in ("CACHE_CAPACITY", "THREAD_SAFE_TIME_MAP", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"MEMSTORE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def root_logger():
    """Remove handlers added by setup_logging and restore the root level."""
    root = logging.getLogger()
    saved_level = root.level
    yield root
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler or isinstance(handler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
