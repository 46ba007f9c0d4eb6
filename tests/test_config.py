# tests/test_config.py
import importlib
import logging

import pytest

from palevel_api.app.core import config
from palevel_api.app.core.config import Settings
from palevel_api.app.core.logging_config import setup_logging

ENV_VARS = ("PROJECT_NAME", "API_VERSION", "DEBUG", "LOG_LEVEL", "LOG_FILE", "HOST", "PORT", "CORS_ORIGINS")


@pytest.fixture
def clean_config(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(clean_config):
    s = clean_config.Settings()
    assert s.project_name == "PaLevel API"
    assert s.api_version == "1.0.0"
    assert s.debug is False
    assert s.log_level == "INFO"
    assert s.log_file == ""
    assert s.host == "0.0.0.0"
    assert s.port == 5000
    assert s.cors_origins == "*"
    assert s.cors_origin_list == ["*"]


def test_port_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    try:
        assert importlib.reload(config).Settings().port == 8080
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_cors_origin_list_splits_and_strips():
    s = Settings(cors_origins="http://localhost:3000, https://palevel.example ,")
    assert s.cors_origin_list == ["http://localhost:3000", "https://palevel.example"]


def test_setup_logging_does_not_add_handlers_twice():
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    added = [h for h in root.handlers if h not in before]
    try:
        assert len(added) <= 1
    finally:
        for handler in added:
            root.removeHandler(handler)
