"""Key-value persistence and process configuration."""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Protocol, runtime_checkable

from ..events import EventBus, FontSizeChanged
from ..theme.color import Color

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

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".themesmith"
_DEFAULT_STORE_PATH = _SETTINGS_DIR / "store.json"
_BYTES_MARKER = "__bytes__"
_ENV_OVERRIDES: Mapping[str, str] = {
    "THEMESMITH_SETTINGS_PATH": "store_path",
    "THEMESMITH_DEFAULT_TINT": "default_tint",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "THEMESMITH_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}

FONT_SIZE_KEY = "fontSize"
DEFAULT_FONT_SIZE = 15


@runtime_checkable
class KeyValueStore(Protocol):
    """Storage collaborator holding the persisted theme slots and the font size."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class MemoryStore:
    """Dict-backed store, used for tests and ephemeral sessions."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileStore:
    """Store persisted as one JSON object on disk.

    ``bytes`` values (including those nested in lists) are wrapped as
    ``{"__bytes__": "<base64>"}``. Every ``set`` rewrites the whole file through
    a temporary file and an atomic rename.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path).expanduser() if path else _DEFAULT_STORE_PATH
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        payload = self._read_payload()
        if key not in payload:
            return default
        return _unwrap(payload[key])

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            payload = self._read_payload()
            payload[key] = _wrap(value)
            body = json.dumps(payload, indent=2, sort_keys=True)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(".tmp")
            tmp_path.write_text(body, encoding="utf-8")
            tmp_path.replace(self._path)
        LOGGER.debug("Stored key %r in %s", key, self._path)

    def _read_payload(self) -> MutableMapping[str, Any]:
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            LOGGER.warning("Store file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Store file %s does not contain a JSON object", self._path)
            return {}
        return payload


def _wrap(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {_BYTES_MARKER: base64.b64encode(bytes(value)).decode("ascii")}
    if isinstance(value, (list, tuple)):
        return [_wrap(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): _wrap(item) for key, item in value.items()}
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    if isinstance(value, dict):
        if set(value) == {_BYTES_MARKER}:
            raw = value[_BYTES_MARKER]
            try:
                return base64.b64decode(str(raw).encode("ascii"), validate=True)
            except (binascii.Error, UnicodeEncodeError, ValueError):
                LOGGER.warning("Dropping undecodable bytes value from store")
                return None
        return {key: _unwrap(item) for key, item in value.items()}
    return value


def font_size(store: KeyValueStore) -> int:
    """Return the editor font size, defaulting to 15 when unset or corrupt."""

    value = store.get(FONT_SIZE_KEY)
    if value is None:
        return DEFAULT_FONT_SIZE
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        LOGGER.warning("Ignoring invalid persisted font size %r", value)
        return DEFAULT_FONT_SIZE
    return value


def set_font_size(store: KeyValueStore, size: int, *, bus: EventBus | None = None) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"Font size must be an integer, received {size!r}")
    if size <= 0:
        raise ValueError(f"Font size must be positive, received {size}")
    store.set(FONT_SIZE_KEY, size)
    if bus is not None:
        bus.publish(FontSizeChanged(size=size))
    return size


@dataclass(slots=True)
class Settings:
    """Process configuration for the theme library and its CLI."""

    store_path: Path = _DEFAULT_STORE_PATH
    default_tint: str | None = None
    debug_logging: bool = False

    def tint_color(self) -> Color | None:
        if not self.default_tint:
            return None
        try:
            return Color.from_hex(self.default_tint)
        except ValueError as exc:
            LOGGER.warning("Ignoring invalid default tint %r: %s", self.default_tint, exc)
            return None

    def open_store(self) -> JsonFileStore:
        return JsonFileStore(self.store_path)


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build :class:`Settings` from defaults, then environment, then explicit overrides."""

    env = os.environ if environ is None else environ
    settings = Settings()

    env_values: Dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value is not None:
            env_values[field_name] = value
    for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value is not None:
            env_values[field_name] = value.strip().lower() in _TRUE_VALUES
    if env_values:
        settings = _apply_overrides(settings, env_values, source="environment")
    if overrides:
        settings = _apply_overrides(settings, overrides, source="CLI")
    return settings


def _apply_overrides(settings: Settings, overrides: Mapping[str, Any], *, source: str) -> Settings:
    allowed = {field.name for field in fields(Settings)}
    filtered: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in allowed or value is None:
            continue
        filtered[key] = value
    if "store_path" in filtered:
        filtered["store_path"] = Path(filtered["store_path"]).expanduser()
    if filtered:
        LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
        settings = replace(settings, **filtered)
    return settings
