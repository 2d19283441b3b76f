"""Built-in themes shipped with the editor."""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple

from .models import AppearanceMode, Theme, ThemeOrigin


class ThemeEntry(NamedTuple):
    """A named registry row. Names are not unique."""

    name: str
    value: Theme


# background, plain, comment, placeholder, identifier, keyword, number, string
_PALETTES: List[Tuple[str, AppearanceMode, Dict[str, str]]] = [
    (
        "Default",
        AppearanceMode.UNSPECIFIED,
        {
            "background": "#ffffff",
            "plain": "#000000",
            "comment": "#5d6c79",
            "placeholder": "#8e8e93",
            "identifier": "#3f6e74",
            "keyword": "#9b2393",
            "number": "#1c00cf",
            "string": "#c41a16",
        },
    ),
    (
        "Xcode Light",
        AppearanceMode.LIGHT,
        {
            "background": "#ffffff",
            "plain": "#262626",
            "comment": "#5d6c79",
            "placeholder": "#a3a3a3",
            "identifier": "#326d74",
            "keyword": "#9b2393",
            "number": "#1c00cf",
            "string": "#c41a16",
        },
    ),
    (
        "Xcode Dark",
        AppearanceMode.DARK,
        {
            "background": "#1f1f24",
            "plain": "#ffffff",
            "comment": "#6c7986",
            "placeholder": "#8e8e93",
            "identifier": "#67b7a4",
            "keyword": "#fc5fa3",
            "number": "#d0bf69",
            "string": "#fc6a5d",
        },
    ),
    (
        "Basic",
        AppearanceMode.LIGHT,
        {
            "background": "#ffffff",
            "plain": "#000000",
            "comment": "#008f00",
            "placeholder": "#919191",
            "identifier": "#000000",
            "keyword": "#0433ff",
            "number": "#0433ff",
            "string": "#ff2600",
        },
    ),
    (
        "Dusk",
        AppearanceMode.DARK,
        {
            "background": "#1e2028",
            "plain": "#ffffff",
            "comment": "#41b645",
            "placeholder": "#6c6c6c",
            "identifier": "#83c057",
            "keyword": "#b21889",
            "number": "#786dc4",
            "string": "#db2c38",
        },
    ),
    (
        "LowKey",
        AppearanceMode.LIGHT,
        {
            "background": "#ffffff",
            "plain": "#000000",
            "comment": "#526b4b",
            "placeholder": "#9a9a9a",
            "identifier": "#1e4b6b",
            "keyword": "#262c6a",
            "number": "#3f3ab6",
            "string": "#702c51",
        },
    ),
    (
        "Midnight",
        AppearanceMode.DARK,
        {
            "background": "#000000",
            "plain": "#ffffff",
            "comment": "#41cc45",
            "placeholder": "#6b6b6b",
            "identifier": "#00a0be",
            "keyword": "#d31895",
            "number": "#786dff",
            "string": "#ff2c38",
        },
    ),
    (
        "Sunset",
        AppearanceMode.LIGHT,
        {
            "background": "#fffcec",
            "plain": "#000000",
            "comment": "#c3741c",
            "placeholder": "#a0a0a0",
            "identifier": "#476a97",
            "keyword": "#294277",
            "number": "#294277",
            "string": "#df0700",
        },
    ),
    (
        "WWDC16",
        AppearanceMode.DARK,
        {
            "background": "#292a30",
            "plain": "#ffffff",
            "comment": "#8a99a6",
            "placeholder": "#7f8c98",
            "identifier": "#4eb0cc",
            "keyword": "#c2349b",
            "number": "#8b84cf",
            "string": "#d3232e",
        },
    ),
    (
        "Cool Glow",
        AppearanceMode.DARK,
        {
            "background": "#060722",
            "plain": "#e0e0e0",
            "comment": "#aeaeae",
            "placeholder": "#7a7a9a",
            "identifier": "#60ffdf",
            "keyword": "#2bf1dc",
            "number": "#f8f8f8",
            "string": "#8df9f6",
        },
    ),
    (
        "Solarized Light",
        AppearanceMode.LIGHT,
        {
            "background": "#fdf6e3",
            "plain": "#657b83",
            "comment": "#93a1a1",
            "placeholder": "#839496",
            "identifier": "#268bd2",
            "keyword": "#859900",
            "number": "#d33682",
            "string": "#2aa198",
        },
    ),
    (
        "Solarized Dark",
        AppearanceMode.DARK,
        {
            "background": "#002b36",
            "plain": "#839496",
            "comment": "#586e75",
            "placeholder": "#657b83",
            "identifier": "#268bd2",
            "keyword": "#859900",
            "number": "#d33682",
            "string": "#2aa198",
        },
    ),
]


def _build(appearance: AppearanceMode, palette: Dict[str, str]) -> Theme:
    colors = dict(palette)
    background = colors.pop("background")
    return Theme(
        token_colors=colors,
        background_color=background,
        appearance=appearance,
        origin=ThemeOrigin.BUILT_IN,
    )


BUILTIN_THEMES: Tuple[ThemeEntry, ...] = tuple(
    ThemeEntry(name, _build(appearance, palette)) for name, appearance, palette in _PALETTES
)


def builtin_names() -> List[str]:
    return [entry.name for entry in BUILTIN_THEMES]


def default_theme() -> Theme:
    return BUILTIN_THEMES[0].value


__all__ = ["BUILTIN_THEMES", "ThemeEntry", "builtin_names", "default_theme"]
