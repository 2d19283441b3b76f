"""Tests for the ``themesmith`` command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from themesmith.cli import main
from themesmith.services.settings import JsonFileStore
from themesmith.theme import BUILTIN_THEMES, ThemeRegistry
from tests.helpers import make_theme


@pytest.fixture
def store_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("THEMESMITH_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("THEMESMITH_SETTINGS_PATH", raising=False)
    monkeypatch.delenv("THEMESMITH_DEFAULT_TINT", raising=False)
    monkeypatch.delenv("THEMESMITH_DEBUG_LOGGING", raising=False)
    return tmp_path / "store.json"


def _run(store_path: Path, *args: str) -> int:
    return main(["--settings-path", str(store_path), *args])


def test_list_prints_builtins_then_user_themes(store_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    ThemeRegistry(JsonFileStore(store_path)).add_theme(make_theme("Mine"))

    assert _run(store_path, "list") == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(BUILTIN_THEMES) + 1
    assert lines[0].startswith("Default\t")
    assert lines[-1] == "Mine\tlight\tuser 0"


def test_create_then_show(store_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(
        store_path,
        "create",
        "Ember",
        "--appearance",
        "dark",
        "--background",
        "#101010",
        "--tint",
        "#ff6600",
        "--color",
        "keyword=#ff0000",
    )
    assert code == 0
    assert "created user theme 0: Ember" in capsys.readouterr().out

    assert _run(store_path, "show") == 0
    output = capsys.readouterr().out.splitlines()
    assert "name\tEmber" in output
    assert "appearance\tdark" in output
    assert "tint\t#ff6600" in output
    assert "keyword\t#ff0000" in output
    assert "background\t#101010" in output


def test_use_and_show_builtin(store_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(store_path, "use", "solarized dark") == 0
    capsys.readouterr()

    assert _run(store_path, "show") == 0
    assert "background\t#002b36" in capsys.readouterr().out


def test_export_import_remove(store_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "midnight.theme"
    assert _run(store_path, "export", "Midnight", str(target)) == 0
    assert target.exists()

    assert _run(store_path, "import", str(target)) == 0
    assert ThemeRegistry(JsonFileStore(store_path)).load_user_themes()[0].name == ""

    assert _run(store_path, "remove", "0") == 0
    assert ThemeRegistry(JsonFileStore(store_path)).load_user_themes() == []
    capsys.readouterr()


def test_errors_are_reported(store_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(store_path, "remove", "3") == 1
    assert "out of range" in capsys.readouterr().err

    assert _run(store_path, "show", "Nope") == 1
    assert "Unknown theme" in capsys.readouterr().err

    assert _run(store_path, "create", "Bad", "--color", "keyword") == 1
    assert "KIND=HEX" in capsys.readouterr().err


def test_font_size(store_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(store_path, "font-size") == 0
    assert capsys.readouterr().out.strip() == "15"

    assert _run(store_path, "font-size", "20") == 0
    capsys.readouterr()
    assert _run(store_path, "font-size") == 0
    assert capsys.readouterr().out.strip() == "20"

    assert _run(store_path, "font-size", "0") == 1
