"""Newline-delimited text encoding for persisted themes.

A record is eleven ``\\n``-terminated lines::

    <name>
    <"dark" | "light" | "default">
    <base64 tint>
    <base64 comment> ... <base64 string>   (seven lines, TOKEN_ORDER)
    <base64 background>

Colors are ``base64(encode_color(color))``. Decoding never raises: invalid UTF-8
or a short record yields ``None`` and malformed colors decode as opaque black.
"""

from __future__ import annotations

import logging

from .color import Color, color_from_text, color_to_text
from .models import TOKEN_ORDER, AppearanceMode, Theme, ThemeOrigin

LOGGER = logging.getLogger(__name__)

MIN_FIELD_COUNT = 11
_NAME_INDEX = 0
_MODE_INDEX = 1
_TINT_INDEX = 2
_FIRST_TOKEN_INDEX = 3
_BACKGROUND_INDEX = _FIRST_TOKEN_INDEX + len(TOKEN_ORDER)


def _clean_name(name: str | None) -> str:
    if not name:
        return ""
    cleaned = name.replace("\n", " ")
    if cleaned != name:
        LOGGER.debug("Replaced newlines in theme name %r", name)
    return cleaned


def encode_theme(theme: Theme, *, default_tint: Color | None = None) -> bytes:
    """Serialize ``theme`` into its persisted byte form."""

    lines = [
        _clean_name(theme.name),
        theme.appearance.value,
        color_to_text(theme.resolved_tint(default_tint)),
    ]
    lines.extend(color_to_text(theme.token_colors[kind]) for kind in TOKEN_ORDER)
    lines.append(color_to_text(theme.background_color))
    return "".join(f"{line}\n" for line in lines).encode("utf-8")


def decode_theme(data: bytes) -> Theme | None:
    """Parse bytes produced by :func:`encode_theme`, or ``None`` when unusable."""

    try:
        text = bytes(data).decode("utf-8")
    except (UnicodeDecodeError, TypeError) as exc:
        LOGGER.debug("Theme record is not valid UTF-8: %s", exc)
        return None

    fields = text.split("\n")
    if len(fields) < MIN_FIELD_COUNT:
        LOGGER.debug("Theme record has %d fields, expected at least %d", len(fields), MIN_FIELD_COUNT)
        return None

    token_colors = {
        kind: color_from_text(fields[_FIRST_TOKEN_INDEX + offset])
        for offset, kind in enumerate(TOKEN_ORDER)
    }
    return Theme(
        name=fields[_NAME_INDEX],
        appearance=AppearanceMode.from_token(fields[_MODE_INDEX]),
        tint_color=color_from_text(fields[_TINT_INDEX]),
        token_colors=token_colors,
        background_color=color_from_text(fields[_BACKGROUND_INDEX]),
        origin=ThemeOrigin.DECODED,
    )


__all__ = ["MIN_FIELD_COUNT", "decode_theme", "encode_theme"]
