"""Shared test helpers."""

from __future__ import annotations

from typing import Any

from themesmith.theme import TOKEN_ORDER, AppearanceMode, Color, Theme, ThemeOrigin


def make_theme(name: str | None = "Custom", **overrides: Any) -> Theme:
    """Build a user theme with distinct token colors.

    Example:
        from tests.helpers import make_theme
        theme = make_theme("Ocean", appearance=AppearanceMode.DARK)
    """

    values: dict[str, Any] = dict(
        name=name,
        appearance=AppearanceMode.LIGHT,
        tint_color=Color.from_hex("#336699"),
        token_colors={kind: Color.from_rgba(10 * index, 20, 30) for index, kind in enumerate(TOKEN_ORDER)},
        background_color=Color.from_hex("#fafafa"),
        origin=ThemeOrigin.USER_EDITED,
    )
    values.update(overrides)
    return Theme(**values)
