"""Unit tests for color values and the color codec."""

from __future__ import annotations

import base64
import struct

import pytest

from themesmith.theme.color import (
    BLACK,
    COLOR_BYTE_LENGTH,
    Color,
    color_from_text,
    color_to_text,
    decode_color,
    encode_color,
    normalize_color,
)


def test_encode_color_is_fixed_length_and_exact() -> None:
    color = Color(0.1, 0.2, 0.3, 0.4)

    data = encode_color(color)

    assert len(data) == COLOR_BYTE_LENGTH == 32
    assert decode_color(data) == color


def test_decode_color_falls_back_to_black() -> None:
    assert decode_color(b"") == BLACK
    assert decode_color(None) == BLACK
    assert decode_color(b"\x00" * 31) == BLACK
    assert decode_color(struct.pack("<4d", float("nan"), 0.0, 0.0, 1.0)) == BLACK


def test_decode_color_clamps_out_of_range_channels() -> None:
    color = decode_color(struct.pack("<4d", 2.5, -1.0, 0.5, 1.0))
    assert color == Color(1.0, 0.0, 0.5, 1.0)


def test_color_text_round_trip() -> None:
    color = Color.from_hex("#3366cc")
    text = color_to_text(color)

    assert base64.b64decode(text) == encode_color(color)
    assert color_from_text(text) == color


@pytest.mark.parametrize("text", ["", "not base64!!", "QUJD", "éééé"])
def test_color_from_text_rejects_malformed_fields(text: str) -> None:
    assert color_from_text(text) == BLACK


def test_hex_parsing_and_formatting() -> None:
    assert Color.from_hex("#abc").to_rgba() == (170, 187, 204, 255)
    assert Color.from_hex("abc").to_hex() == "#aabbcc"
    assert Color.from_hex("#11223344").to_hex() == "#11223344"
    assert Color.from_hex("#112233").to_hex(include_alpha=True) == "#112233ff"


@pytest.mark.parametrize("value", ["", "#", "#12", "#zzzzzz", "#1234567"])
def test_hex_parsing_rejects_invalid_strings(value: str) -> None:
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_normalize_color_accepts_sequences() -> None:
    assert normalize_color((10, 20, 30)).to_rgba() == (10, 20, 30, 255)
    assert normalize_color([300, -5, 0, 128]).to_rgba() == (255, 0, 0, 128)
    color = Color(0.5, 0.5, 0.5)
    assert normalize_color(color) is color


def test_normalize_color_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        normalize_color((1, 2))
    with pytest.raises(TypeError):
        normalize_color(42)


def test_color_is_immutable() -> None:
    color = Color(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color.red = 0.5  # type: ignore[misc]
