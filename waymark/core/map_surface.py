"""The map surface that bookmark selections recenter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import logging

from waymark.model import Bookmark, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapFocus:
    bookmark_id: str
    collection_id: str
    name: str
    lat: float
    lon: float


class MapSurface:
    """
    Records which bookmark the map is centered on and notifies listeners.

    Rendering of the actual map happens elsewhere; listeners (the TUI map
    panel, tests) observe focus changes.
    """

    def __init__(self) -> None:
        self._focus: Optional[MapFocus] = None
        self._center: Optional[Position] = None
        self._zoom = 14
        self._listeners: List[Callable[[MapFocus], None]] = []

    @property
    def focus(self) -> Optional[MapFocus]:
        return self._focus

    @property
    def center(self) -> Optional[Position]:
        return self._center

    @property
    def zoom(self) -> int:
        return self._zoom

    def add_listener(self, listener: Callable[[MapFocus], None]) -> None:
        self._listeners.append(listener)

    def center_on(self, bookmark: Bookmark) -> MapFocus:
        focus = MapFocus(
            bookmark_id=bookmark.id,
            collection_id=bookmark.collection_id,
            name=bookmark.name,
            lat=bookmark.lat,
            lon=bookmark.lon,
        )
        self._focus = focus
        self._center = bookmark.position
        logger.debug("Map centered on %s (%.5f, %.5f)", focus.name, focus.lat, focus.lon)
        for listener in list(self._listeners):
            listener(focus)
        return focus

    def recenter(self, position: Position) -> None:
        self._center = position

    def zoom_in(self) -> int:
        self._zoom = min(20, self._zoom + 1)
        return self._zoom

    def zoom_out(self) -> int:
        self._zoom = max(1, self._zoom - 1)
        return self._zoom
