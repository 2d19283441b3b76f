"""Data structures describing editor and console themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .color import Color, normalize_color


class AppearanceMode(str, Enum):
    """Light/dark display mode; values double as the wire tokens."""

    LIGHT = "light"
    DARK = "dark"
    UNSPECIFIED = "default"

    @classmethod
    def from_token(cls, token: str) -> "AppearanceMode":
        if token == cls.DARK.value:
            return cls.DARK
        if token == cls.LIGHT.value:
            return cls.LIGHT
        return cls.UNSPECIFIED


class TokenKind(str, Enum):
    """Syntax classification a color is assigned to."""

    COMMENT = "comment"
    PLACEHOLDER = "placeholder"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    NUMBER = "number"
    PLAIN = "plain"
    STRING = "string"


# Positional order of token colors in persisted records. Never reorder.
TOKEN_ORDER: Tuple[TokenKind, ...] = (
    TokenKind.COMMENT,
    TokenKind.PLACEHOLDER,
    TokenKind.IDENTIFIER,
    TokenKind.KEYWORD,
    TokenKind.NUMBER,
    TokenKind.PLAIN,
    TokenKind.STRING,
)


class KeyboardAppearance(str, Enum):
    DEFAULT = "default"
    LIGHT = "light"
    DARK = "dark"


class BarStyle(str, Enum):
    DEFAULT = "default"
    BLACK = "black"


class ThemeOrigin(str, Enum):
    """How a :class:`Theme` value came to exist."""

    BUILT_IN = "built-in"
    DECODED = "decoded"
    USER_EDITED = "user-edited"


# Fallback used when neither the theme nor the process configures a tint.
SYSTEM_GREEN = Color.from_rgba(52, 199, 89)
# The editor seeds new tints with this when the edited theme has none.
SYSTEM_BLUE = Color.from_rgba(0, 122, 255)


def chrome_for(appearance: AppearanceMode) -> Tuple[KeyboardAppearance, BarStyle]:
    """Return the keyboard appearance and bar style derived from ``appearance``."""

    if appearance is AppearanceMode.DARK:
        return KeyboardAppearance.DARK, BarStyle.BLACK
    if appearance is AppearanceMode.LIGHT:
        return KeyboardAppearance.LIGHT, BarStyle.DEFAULT
    return KeyboardAppearance.DEFAULT, BarStyle.DEFAULT


def _normalize_token_colors(colors: Mapping[Any, Any]) -> Mapping[TokenKind, Color]:
    normalized: Dict[TokenKind, Color] = {}
    for key, value in colors.items():
        normalized[TokenKind(key)] = normalize_color(value)
    missing = [kind.value for kind in TOKEN_ORDER if kind not in normalized]
    if missing:
        raise ValueError(f"Theme is missing token colors: {', '.join(missing)}")
    return MappingProxyType({kind: normalized[kind] for kind in TOKEN_ORDER})


@dataclass(frozen=True, slots=True)
class Theme:
    """Immutable bundle of colors and style flags.

    ``origin`` tags the construction path (built-in constant, decoded record or
    editor session); every variant exposes the same accessors.
    """

    token_colors: Mapping[TokenKind, Color]
    background_color: Color
    appearance: AppearanceMode = AppearanceMode.UNSPECIFIED
    tint_color: Color | None = None
    name: str | None = None
    origin: ThemeOrigin = ThemeOrigin.BUILT_IN

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_colors", _normalize_token_colors(self.token_colors))
        object.__setattr__(self, "background_color", normalize_color(self.background_color))
        object.__setattr__(self, "appearance", AppearanceMode(self.appearance))
        if self.tint_color is not None:
            object.__setattr__(self, "tint_color", normalize_color(self.tint_color))

    def __hash__(self) -> int:
        colors = tuple(self.token_colors[kind] for kind in TOKEN_ORDER)
        return hash((colors, self.background_color, self.appearance, self.tint_color, self.name, self.origin))

    @property
    def keyboard_appearance(self) -> KeyboardAppearance:
        return chrome_for(self.appearance)[0]

    @property
    def bar_style(self) -> BarStyle:
        return chrome_for(self.appearance)[1]

    @property
    def display_name(self) -> str:
        return self.name or ""

    def color(self, kind: TokenKind | str) -> Color:
        return self.token_colors[TokenKind(kind)]

    def resolved_tint(self, default: Color | None = None) -> Color:
        """Return the tint, falling back to ``default`` and then to system green."""

        return self.tint_color or default or SYSTEM_GREEN


__all__ = [
    "AppearanceMode",
    "BarStyle",
    "KeyboardAppearance",
    "SYSTEM_BLUE",
    "SYSTEM_GREEN",
    "TOKEN_ORDER",
    "Theme",
    "ThemeOrigin",
    "TokenKind",
    "chrome_for",
]
