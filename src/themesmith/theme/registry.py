"""Theme registry: built-in catalog plus persisted user themes."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Sequence

from ..events import EventBus, ThemeChanged
from .builtins import BUILTIN_THEMES, ThemeEntry
from .color import Color
from .models import Theme
from .serializer import decode_theme, encode_theme

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from ..services.settings import KeyValueStore

LOGGER = logging.getLogger(__name__)

THEMES_KEY = "themes"
ACTIVE_THEME_KEY = "theme"


class ThemeError(Exception):
    """Base class for theme registry errors."""


class ThemeIndexError(ThemeError, IndexError):
    """Raised when a user theme index does not exist."""

    def __init__(self, index: int, count: int) -> None:
        if count:
            message = f"User theme index {index} out of range (0..{count - 1})"
        else:
            message = f"User theme index {index} out of range (no user themes)"
        super().__init__(message)
        self.index = index
        self.count = count


class ThemeFormatError(ThemeError, ValueError):
    """Raised when an imported theme file cannot be decoded."""


class ThemeRegistry:
    """Ordered catalog of built-in and user themes backed by a key-value store.

    User themes live in a single ``"themes"`` slot holding a list of encoded
    records; every mutation rewrites the whole slot. Read-modify-write pairs run
    under a lock so one registry never loses its own updates, but separate
    processes sharing a store are not coordinated.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        builtins: Iterable[ThemeEntry] | None = None,
        bus: EventBus | None = None,
        default_tint: Color | None = None,
    ) -> None:
        self._store = store
        self._builtins: tuple[ThemeEntry, ...] = tuple(BUILTIN_THEMES if builtins is None else builtins)
        if not self._builtins:
            raise ValueError("ThemeRegistry requires at least one built-in theme")
        self._bus = bus
        self._default_tint = default_tint
        self._lock = threading.RLock()

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def default_tint(self) -> Color | None:
        return self._default_tint

    @property
    def builtins(self) -> List[ThemeEntry]:
        return list(self._builtins)

    def list_all(self) -> List[ThemeEntry]:
        """Return built-ins followed by user themes. A new list on every call."""

        entries = list(self._builtins)
        entries.extend(ThemeEntry(theme.display_name, theme) for theme in self.load_user_themes())
        return entries

    def names(self) -> List[str]:
        return [entry.name for entry in self.list_all()]

    def find(self, name: str) -> Theme | None:
        """Return the first theme whose name matches ``name``, ignoring case and surrounding whitespace."""

        key = name.strip().casefold()
        for entry in self.list_all():
            if entry.name.strip().casefold() == key:
                return entry.value
        return None

    # ------------------------------------------------------------------
    # User themes
    # ------------------------------------------------------------------

    def load_user_themes(self) -> List[Theme]:
        """Decode the persisted user themes, silently skipping unusable records."""

        blobs = self._store.get(THEMES_KEY)
        if blobs is None:
            return []
        if not isinstance(blobs, (list, tuple)):
            LOGGER.warning("Ignoring persisted themes slot of type %s", type(blobs).__name__)
            return []

        themes: List[Theme] = []
        for position, blob in enumerate(blobs):
            if not isinstance(blob, (bytes, bytearray, memoryview)):
                LOGGER.warning("Dropping user theme #%d: stored value is not bytes", position)
                continue
            theme = decode_theme(bytes(blob))
            if theme is None:
                LOGGER.warning("Dropping user theme #%d: record could not be decoded", position)
                continue
            themes.append(theme)
        return themes

    def user_theme_at(self, index: int) -> Theme:
        themes = self.load_user_themes()
        self._check_index(index, len(themes))
        return themes[index]

    def save_user_themes(self, themes: Sequence[Theme]) -> None:
        """Replace the whole persisted list with ``themes``."""

        blobs = [encode_theme(theme, default_tint=self._default_tint) for theme in themes]
        with self._lock:
            self._store.set(THEMES_KEY, blobs)
        LOGGER.debug("Saved %d user theme(s)", len(blobs))

    def add_theme(self, theme: Theme) -> int:
        """Append ``theme`` to the user list and return its index."""

        with self._lock:
            themes = self.load_user_themes()
            themes.append(theme)
            self.save_user_themes(themes)
            return len(themes) - 1

    def replace_theme_at(self, index: int, theme: Theme) -> int:
        """Remove the user theme at ``index`` and append ``theme`` at the end.

        Replacement moves the theme to the last position; the new index is
        returned. Raises :class:`ThemeIndexError` without touching storage when
        ``index`` is out of range.
        """

        with self._lock:
            themes = self.load_user_themes()
            self._check_index(index, len(themes))
            del themes[index]
            themes.append(theme)
            self.save_user_themes(themes)
            return len(themes) - 1

    def remove_theme_at(self, index: int) -> Theme:
        """Remove and return the user theme at ``index``."""

        with self._lock:
            themes = self.load_user_themes()
            self._check_index(index, len(themes))
            removed = themes.pop(index)
            self.save_user_themes(themes)
            return removed

    @staticmethod
    def _check_index(index: int, count: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
            LOGGER.warning("Rejected user theme index %r (have %d)", index, count)
            raise ThemeIndexError(index, count)

    # ------------------------------------------------------------------
    # Active theme
    # ------------------------------------------------------------------

    def active_theme(self) -> Theme:
        """Return the chosen theme, or the first built-in when none is usable."""

        blob = self._store.get(ACTIVE_THEME_KEY)
        if isinstance(blob, (bytes, bytearray, memoryview)):
            theme = decode_theme(bytes(blob))
            if theme is not None:
                return theme
            LOGGER.warning("Active theme record could not be decoded; using default")
        return self._builtins[0].value

    def choose(self, theme: Theme) -> Theme:
        """Persist ``theme`` as the active theme and publish :class:`ThemeChanged`."""

        self._store.set(ACTIVE_THEME_KEY, encode_theme(theme, default_tint=self._default_tint))
        LOGGER.info("Theme changed to %r", theme.display_name or theme.origin.value)
        if self._bus is not None:
            self._bus.publish(ThemeChanged())
        return theme

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def export_theme(self, theme: Theme, destination: str | Path) -> Path:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encode_theme(theme, default_tint=self._default_tint))
        return path

    def import_theme(self, source: str | Path, *, activate: bool = False) -> Theme:
        path = Path(source)
        theme = decode_theme(path.read_bytes())
        if theme is None:
            raise ThemeFormatError(f"{path} does not contain a theme record")
        self.add_theme(theme)
        if activate:
            self.choose(theme)
        return theme


__all__ = [
    "ACTIVE_THEME_KEY",
    "THEMES_KEY",
    "ThemeError",
    "ThemeFormatError",
    "ThemeIndexError",
    "ThemeRegistry",
]
