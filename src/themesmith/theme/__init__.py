"""Theme module consolidating color codecs, serialization and registry helpers."""

from .color import BLACK, WHITE, Color, color_from_text, color_to_text, decode_color, encode_color, normalize_color
from .models import (
    SYSTEM_BLUE,
    SYSTEM_GREEN,
    TOKEN_ORDER,
    AppearanceMode,
    BarStyle,
    KeyboardAppearance,
    Theme,
    ThemeOrigin,
    TokenKind,
    chrome_for,
)
from .serializer import decode_theme, encode_theme
from .builtins import BUILTIN_THEMES, ThemeEntry, builtin_names, default_theme
from .registry import ThemeError, ThemeFormatError, ThemeIndexError, ThemeRegistry
from .editor import ThemeEditorSession
from .qt import apply_to_application

__all__ = [
    "AppearanceMode",
    "BLACK",
    "BUILTIN_THEMES",
    "BarStyle",
    "Color",
    "KeyboardAppearance",
    "SYSTEM_BLUE",
    "SYSTEM_GREEN",
    "TOKEN_ORDER",
    "Theme",
    "ThemeEditorSession",
    "ThemeEntry",
    "ThemeError",
    "ThemeFormatError",
    "ThemeIndexError",
    "ThemeOrigin",
    "ThemeRegistry",
    "TokenKind",
    "WHITE",
    "apply_to_application",
    "builtin_names",
    "chrome_for",
    "color_from_text",
    "color_to_text",
    "decode_color",
    "decode_theme",
    "default_theme",
    "encode_color",
    "encode_theme",
    "normalize_color",
]
