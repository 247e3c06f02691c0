"""
Canonical in-memory data model for Waymark.

Collections and bookmarks are owned by a bookmark store; the browsing screens
only ever read them. Record fields are normalized on the way in so a single
malformed record (a missing name, a null address) renders as blank text
instead of breaking a whole list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Position:
    """A WGS84 coordinate in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class IconRef:
    """
    Reference to a bookmark icon.

    - name: symbol name (e.g. "Summit", "Water Source")
    - color: RGBA string, e.g. "rgba(8,122,255,1)"
    """

    name: str = "Location"
    color: str = "rgba(8,122,255,1)"


@dataclass(frozen=True)
class BookmarkCollection:
    id: str
    name: str = ""
    description: str = ""
    visible: bool = True
    bookmark_count: int = 0
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _text(self.id))
        object.__setattr__(self, "name", _text(self.name))
        object.__setattr__(self, "description", _text(self.description))
        object.__setattr__(self, "visible", bool(self.visible))
        object.__setattr__(self, "bookmark_count", max(0, int(self.bookmark_count or 0)))


@dataclass(frozen=True)
class Bookmark:
    id: str
    collection_id: str
    name: str = ""
    position: Position = field(default_factory=lambda: Position(0.0, 0.0))
    address: str = ""
    feature: str = ""
    icon: IconRef = field(default_factory=IconRef)
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _text(self.id))
        object.__setattr__(self, "collection_id", _text(self.collection_id))
        object.__setattr__(self, "name", _text(self.name))
        object.__setattr__(self, "address", _text(self.address))
        object.__setattr__(self, "feature", _text(self.feature))

    @property
    def lat(self) -> float:
        return self.position.lat

    @property
    def lon(self) -> float:
        return self.position.lon


def parse_position(value: Optional[str]) -> Optional[Position]:
    """
    Parse "LAT,LON" into a Position.

    Returns None for empty input; raises ValueError for malformed input or
    coordinates outside the valid range.
    """
    if value is None or not str(value).strip():
        return None
    parts = [p.strip() for p in str(value).split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected LAT,LON but got {value!r}")
    try:
        lat, lon = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Expected numeric LAT,LON but got {value!r}")
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
        raise ValueError(f"Coordinates out of range: {value!r}")
    return Position(lat, lon)
