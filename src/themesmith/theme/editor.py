"""Editing state the UI drives while the user builds a custom theme."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from .color import Color, normalize_color
from .models import SYSTEM_BLUE, TOKEN_ORDER, AppearanceMode, Theme, ThemeOrigin, TokenKind
from .registry import ThemeRegistry

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ThemeEditorSession:
    """Mutable working copies of every theme attribute.

    ``index`` is the position of the edited user theme, or ``None`` while
    creating a new one. After :meth:`commit` it tracks the theme's new
    position, which is always the end of the user list.
    """

    registry: ThemeRegistry
    background: Color
    token_colors: Dict[TokenKind, Color]
    tint: Color = SYSTEM_BLUE
    name: str = ""
    appearance: AppearanceMode = AppearanceMode.UNSPECIFIED
    index: int | None = None
    committed: bool = field(default=False, init=False)

    @classmethod
    def from_theme(
        cls,
        registry: ThemeRegistry,
        theme: Theme,
        *,
        index: int | None = None,
    ) -> "ThemeEditorSession":
        return cls(
            registry=registry,
            name=theme.name or "",
            appearance=theme.appearance,
            tint=theme.tint_color or registry.default_tint or SYSTEM_BLUE,
            background=theme.background_color,
            token_colors={kind: theme.token_colors[kind] for kind in TOKEN_ORDER},
            index=index,
        )

    @classmethod
    def edit_user_theme(cls, registry: ThemeRegistry, index: int) -> "ThemeEditorSession":
        return cls.from_theme(registry, registry.user_theme_at(index), index=index)

    @classmethod
    def new_theme(cls, registry: ThemeRegistry) -> "ThemeEditorSession":
        """Start a new theme seeded from the active one."""

        return cls.from_theme(registry, registry.active_theme())

    def set_color(self, kind: TokenKind | str, color: Color | str) -> None:
        self.token_colors[TokenKind(kind)] = normalize_color(color)

    def build_theme(self) -> Theme:
        return Theme(
            name=self.name,
            appearance=self.appearance,
            tint_color=self.tint,
            background_color=self.background,
            token_colors=dict(self.token_colors),
            origin=ThemeOrigin.USER_EDITED,
        )

    def commit(self) -> Theme:
        """Persist the built theme and make it the active theme."""

        theme = self.build_theme()
        if self.index is None:
            self.index = self.registry.add_theme(theme)
            LOGGER.debug("Created user theme %r at index %d", theme.display_name, self.index)
        else:
            previous = self.index
            self.index = self.registry.replace_theme_at(previous, theme)
            LOGGER.debug("Replaced user theme %d; now at index %d", previous, self.index)
        self.committed = True
        self.registry.choose(theme)
        return theme


__all__ = ["ThemeEditorSession"]
