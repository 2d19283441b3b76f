"""Optional PySide6 integration for the UI collaborator."""

from __future__ import annotations

import logging
from typing import Any, cast

from .color import Color
from .models import Theme, TokenKind

LOGGER = logging.getLogger(__name__)


def to_qcolor(color: Color) -> Any:
    from PySide6.QtGui import QColor  # type: ignore

    return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)


def apply_to_application(
    theme: Theme,
    *,
    app: Any | None = None,
    default_tint: Color | None = None,
) -> Theme:
    """Push ``theme`` into the application palette when a Qt application is running."""

    try:  # pragma: no cover - Qt optional in CI
        from PySide6.QtGui import QPalette  # type: ignore
        from PySide6.QtWidgets import QApplication  # type: ignore
    except ImportError:  # pragma: no cover - headless fallback
        LOGGER.debug("PySide6 is not installed; skipping palette update")
        return theme

    palette_cls = cast(Any, QPalette)
    qt_app: Any = app if app is not None else QApplication.instance()
    if qt_app is None:
        return theme

    palette = palette_cls()
    background = theme.background_color
    plain = theme.color(TokenKind.PLAIN)
    tint = theme.resolved_tint(default_tint)
    roles = cast(Any, palette_cls.ColorRole)
    for role, color in (
        (roles.Window, background),
        (roles.WindowText, plain),
        (roles.Base, background),
        (roles.AlternateBase, background),
        (roles.Text, plain),
        (roles.Button, background),
        (roles.ButtonText, plain),
        (roles.PlaceholderText, theme.color(TokenKind.PLACEHOLDER)),
        (roles.Highlight, tint),
        (roles.HighlightedText, background),
        (roles.Link, tint),
    ):
        palette.setColor(role, to_qcolor(color))

    setter = getattr(qt_app, "setPalette", None)
    if callable(setter):
        setter(palette)
    style_setter = getattr(qt_app, "setStyle", None)
    if callable(style_setter):
        style_setter("Fusion")
    return theme


__all__ = ["apply_to_application", "to_qcolor"]
