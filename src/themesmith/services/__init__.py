"""Service layer helpers (storage, configuration)."""

from .settings import (
    DEFAULT_FONT_SIZE,
    FONT_SIZE_KEY,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    Settings,
    font_size,
    load_settings,
    set_font_size,
)

__all__ = [
    "DEFAULT_FONT_SIZE",
    "FONT_SIZE_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "Settings",
    "font_size",
    "load_settings",
    "set_font_size",
]
