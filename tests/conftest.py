import json

import pytest

from pie_items.infra import logger as logger_mod
from pie_items.infra.registry import ItemTypeRegistry, reset_registry


@pytest.fixture(autouse=True)
def isolated_logger(monkeypatch, tmp_path):
    """Each test gets its own logger session writing under tmp_path."""
    monkeypatch.setenv(logger_mod.ENV_LOG_DIR, str(tmp_path / "logs"))
    monkeypatch.delenv(logger_mod.ENV_LOG_LEVEL, raising=False)
    logger_mod.shutdown_logger()
    yield
    logger_mod.shutdown_logger()


@pytest.fixture(autouse=True)
def fresh_shared_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def registry() -> ItemTypeRegistry:
    return ItemTypeRegistry()


@pytest.fixture
def log_entries():
    """Return a reader for the current session's NDJSON entries."""

    def _read():
        path = logger_mod.get_session().log_path
        if path is None or not path.exists():
            return []
        lines = path.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line]

    return _read
