"""Shared fixtures: a small bookmark library near Mount Hood."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from waymark.core.config import WaymarkConfig
from waymark.core.location import FixedLocationProvider
from waymark.model import Bookmark, BookmarkCollection, IconRef, Position
from waymark.screens.bookmarks import ScreenContext
from waymark.screens.navigation import ScreenStack
from waymark.store import MemoryBookmarkStore


HERE = Position(45.5, -121.8)


def trail_bookmarks() -> List[Bookmark]:
    return [
        Bookmark(
            id="ramona",
            collection_id="trails",
            name="Ramona Falls",
            position=Position(45.505, -121.8),  # ~556 m north of HERE
            address="Ramona Falls Trail",
            feature="Waterfall",
            icon=IconRef(name="Waterfall", color="rgba(0,255,255,1)"),
        ),
        Bookmark(
            id="mcneil",
            collection_id="trails",
            name="McNeil Point",
            position=Position(45.51, -121.8),  # ~1.1 km
        ),
        Bookmark(
            id="paradise",
            collection_id="trails",
            name="Paradise Park",
            position=Position(45.7, -121.8),  # ~22 km
            address="Timberline Trail",
            feature="Meadow",
        ),
    ]


def make_store() -> MemoryBookmarkStore:
    store = MemoryBookmarkStore()
    store.add_collection(BookmarkCollection("empty", name="Empty", description="Nothing here"), [])
    store.add_collection(
        BookmarkCollection("trails", name="Trails", description="Day hikes"),
        trail_bookmarks(),
    )
    store.add_collection(
        BookmarkCollection("hidden", name="Hidden", description="", visible=False),
        [Bookmark(id="h1", collection_id="hidden", name="Secret Spring", position=Position(45.4, -121.7))],
    )
    store.add_collection(
        BookmarkCollection("water", name="Water", description=""),
        [Bookmark(id="w1", collection_id="water", name="Lost Lake", position=Position(45.49, -121.82))],
    )
    return store


@pytest.fixture
def here() -> Position:
    return HERE


@pytest.fixture
def store() -> MemoryBookmarkStore:
    return make_store()


@pytest.fixture
def location() -> FixedLocationProvider:
    return FixedLocationProvider(HERE)


@pytest.fixture
def stack() -> ScreenStack:
    return ScreenStack()


@pytest.fixture
def context(store, location, stack) -> ScreenContext:
    return ScreenContext(
        store=store,
        navigation=stack,
        location=location,
        map_surface=store.map_surface,
        config=WaymarkConfig(),
    )


LIBRARY_YAML = """\
version: 1
collections:
  - id: trails
    name: Trails
    description: Day hikes
    bookmarks:
      - id: ramona
        name: Ramona Falls
        address: Ramona Falls Trail
        feature: Waterfall
        lat: 45.505
        lon: -121.8
        icon: {name: Waterfall, color: "#00FFFF"}
      - name: McNeil Point
        lat: 45.51
        lon: -121.8
  - name: Water
    bookmarks:
      - name: Lost Lake
        lat: 45.49
        lon: -121.82
        icon: Lake
  - id: empty
    name: Empty
"""


@pytest.fixture
def library_file(tmp_path: Path) -> Path:
    path = tmp_path / "library.yaml"
    path.write_text(LIBRARY_YAML, encoding="utf-8")
    return path
