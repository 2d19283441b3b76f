"""Tests for the optional PySide6 palette adapter."""

from __future__ import annotations

from typing import Any

import pytest

from themesmith.theme import BUILTIN_THEMES, Color
from themesmith.theme.qt import apply_to_application, to_qcolor


def test_apply_without_running_application_returns_theme() -> None:
    theme = BUILTIN_THEMES[0].value
    assert apply_to_application(theme) is theme


def test_to_qcolor_preserves_channels() -> None:
    pytest.importorskip("PySide6.QtGui")

    qcolor = to_qcolor(Color(0.25, 0.5, 0.75, 1.0))

    assert qcolor.redF() == pytest.approx(0.25, abs=1e-3)
    assert qcolor.greenF() == pytest.approx(0.5, abs=1e-3)
    assert qcolor.blueF() == pytest.approx(0.75, abs=1e-3)


def test_apply_sets_palette_on_given_app() -> None:
    pytest.importorskip("PySide6.QtWidgets")

    class _FakeApp:
        def __init__(self) -> None:
            self.palette: Any = None
            self.style: str | None = None

        def setPalette(self, palette: Any) -> None:
            self.palette = palette

        def setStyle(self, style: str) -> None:
            self.style = style

    app = _FakeApp()
    theme = dict(BUILTIN_THEMES)["Solarized Dark"]

    assert apply_to_application(theme, app=app) is theme

    from PySide6.QtGui import QPalette

    window = app.palette.color(QPalette.ColorRole.Window)
    assert window.name() == "#002b36"
    assert app.style == "Fusion"
