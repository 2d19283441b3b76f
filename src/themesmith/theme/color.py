"""Color values and the binary/base64 codec used by persisted themes."""

from __future__ import annotations

import base64
import binascii
import logging
import math
import struct
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

LOGGER = logging.getLogger(__name__)

RGBATuple = Tuple[int, int, int, int]

# red, green, blue, alpha as little-endian doubles
_COLOR_STRUCT = struct.Struct("<4d")
COLOR_BYTE_LENGTH = _COLOR_STRUCT.size


def _clamp_unit(value: Any) -> float:
    channel = float(value)
    if channel < 0.0:
        return 0.0
    if channel > 1.0:
        return 1.0
    return channel


def _clamp_channel(value: Any) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with float channels in the ``[0, 1]`` range."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, _clamp_unit(getattr(self, name)))

    @classmethod
    def from_rgba(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        return cls(
            _clamp_channel(red) / 255.0,
            _clamp_channel(green) / 255.0,
            _clamp_channel(blue) / 255.0,
            _clamp_channel(alpha) / 255.0,
        )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` strings."""

        text = value.strip()
        if text.startswith("#"):
            text = text[1:]
        if not text:
            raise ValueError("Color strings cannot be empty")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) not in (6, 8):
            raise ValueError(f"Unsupported color format: {value!r}")
        try:
            components = [int(text[i : i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError as exc:
            raise ValueError(f"Unsupported color format: {value!r}") from exc
        return cls.from_rgba(*components)

    def to_rgba(self) -> RGBATuple:
        return (
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
            round(self.alpha * 255),
        )

    def to_hex(self, *, include_alpha: bool | None = None) -> str:
        """Return ``#rrggbb``, appending alpha when it is not opaque (or when asked)."""

        components = self.to_rgba()
        if include_alpha is None:
            include_alpha = components[3] != 255
        if not include_alpha:
            components = components[:3]  # type: ignore[assignment]
        return "#" + "".join(f"{component:02x}" for component in components)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)


def normalize_color(value: Any) -> Color:
    """Convert ``value`` into a :class:`Color`, accepting hex strings or 0-255 sequences."""

    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    if isinstance(value, Sequence):
        items = list(value)
        if len(items) not in (3, 4):
            raise ValueError(f"RGB(A) sequences must contain 3 or 4 values, received {value!r}")
        return Color.from_rgba(*items)
    raise TypeError(f"Cannot convert {type(value)!r} to a color")


def encode_color(color: Color) -> bytes:
    return _COLOR_STRUCT.pack(color.red, color.green, color.blue, color.alpha)


def decode_color(data: bytes | None) -> Color:
    """Decode the output of :func:`encode_color`, returning opaque black for bad input."""

    if not data or len(data) != COLOR_BYTE_LENGTH:
        LOGGER.debug("Color payload has unexpected size %s; using black", len(data or b""))
        return BLACK
    channels = _COLOR_STRUCT.unpack(bytes(data))
    if not all(math.isfinite(channel) for channel in channels):
        LOGGER.debug("Color payload contains non-finite channels; using black")
        return BLACK
    return Color(*channels)


def color_to_text(color: Color) -> str:
    return base64.b64encode(encode_color(color)).decode("ascii")


def color_from_text(text: str) -> Color:
    try:
        data = base64.b64decode(text.strip().encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError):
        LOGGER.debug("Color field %r is not valid base64; using black", text[:32])
        return BLACK
    return decode_color(data)


__all__ = [
    "BLACK",
    "COLOR_BYTE_LENGTH",
    "Color",
    "RGBATuple",
    "WHITE",
    "color_from_text",
    "color_to_text",
    "decode_color",
    "encode_color",
    "normalize_color",
]
