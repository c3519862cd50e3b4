import pytest
import structlog

from store.utils.logging import get_log_level
from store.utils.logging import _renderer as renderer


@pytest.fixture()
def environment(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    def _set(name):
        monkeypatch.setenv("PROTEAN_ENV", name)

    return _set


@pytest.mark.parametrize("env,level", [("production", "INFO"), ("development", "DEBUG"), ("test", "WARNING")])
def test_level_follows_environment(environment, env, level):
    environment(env)

    assert get_log_level() == level


def test_log_level_variable_wins(environment, monkeypatch):
    environment("production")
    monkeypatch.setenv("LOG_LEVEL", "error")

    assert get_log_level() == "ERROR"


def test_production_renders_json(environment):
    environment("production")

    assert isinstance(renderer(), structlog.processors.JSONRenderer)


def test_development_renders_console_lines(environment):
    environment("development")

    assert isinstance(renderer(), structlog.dev.ConsoleRenderer)
