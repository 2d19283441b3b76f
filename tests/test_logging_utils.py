"""Tests for :mod:`themesmith.utils.logging`."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from themesmith.services.settings import Settings
from themesmith.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_logger(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("THEMESMITH_LOG_DIR", raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _flush() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_log_file_defaults_to_store_directory(tmp_path: Path) -> None:
    settings = Settings(store_path=tmp_path / "store" / "themes.json")

    path = logging_utils.configure_logging(settings)

    assert path == tmp_path / "store" / "logs" / "themesmith.log"
    assert path.parent.is_dir()


def test_debug_settings_log_debug_records(tmp_path: Path) -> None:
    settings = Settings(store_path=tmp_path / "themes.json", debug_logging=True)

    path = logging_utils.configure_logging(settings, log_dir=tmp_path / "logs")
    logging.getLogger("themesmith.test").debug("hello")
    _flush()

    assert logging.getLogger().level == logging.DEBUG
    assert path == tmp_path / "logs" / "themesmith.log"
    assert "hello" in path.read_text(encoding="utf-8")
    assert any(
        type(handler) is logging.StreamHandler for handler in logging.getLogger().handlers
    )


def test_default_settings_only_log_warnings_to_file(tmp_path: Path) -> None:
    settings = Settings(store_path=tmp_path / "themes.json")

    path = logging_utils.configure_logging(settings)
    logging.getLogger("themesmith.test").info("quiet")
    logging.getLogger("themesmith.test").warning("loud")
    _flush()

    text = path.read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "loud" in text
    assert [type(handler) for handler in logging.getLogger().handlers] == [
        logging.handlers.RotatingFileHandler
    ]


def test_environment_overrides_store_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THEMESMITH_LOG_DIR", str(tmp_path / "env-logs"))
    settings = Settings(store_path=tmp_path / "themes.json")

    assert logging_utils.resolve_log_path(settings) == tmp_path / "env-logs" / "themesmith.log"
    assert (
        logging_utils.resolve_log_path(settings, tmp_path / "explicit")
        == tmp_path / "explicit" / "themesmith.log"
    )
