"""Tests for settings and logging setup."""

import logging

import structlog

from pipe_measure.config import Settings
from pipe_measure.logging_config import configure_logging


def test_defaults():
    s = Settings(_env_file=None)
    assert s.port == 4000
    assert s.seed_pipes == 0
    assert s.default_color == "#607D8B"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PIPES_PORT", "8080")
    monkeypatch.setenv("PIPES_SEED_PIPES", "500")
    monkeypatch.setenv("PIPES_CORS_ORIGINS", '["http://localhost:5173"]')
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.seed_pipes == 500
    assert s.cors_origins == ["http://localhost:5173"]


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("warning", json_logs=True)
        assert root.level == logging.WARNING
        structlog.get_logger("pipe_measure.test").info("not_emitted")
    finally:
        structlog.reset_defaults()
        root.setLevel(previous)
