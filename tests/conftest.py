"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from themesmith.events import EventBus
from themesmith.services.settings import MemoryStore
from themesmith.theme import TOKEN_ORDER, WHITE, AppearanceMode, Color, Theme, ThemeOrigin, ThemeRegistry


@pytest.fixture
def dusk_theme() -> Theme:
    return Theme(
        name="Dusk",
        appearance=AppearanceMode.DARK,
        tint_color=Color(0.2, 0.2, 0.8, 1.0),
        token_colors={kind: WHITE for kind in TOKEN_ORDER},
        background_color=Color(0.0, 0.0, 0.0, 1.0),
        origin=ThemeOrigin.USER_EDITED,
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def registry(store: MemoryStore, bus: EventBus) -> ThemeRegistry:
    return ThemeRegistry(store, bus=bus)
