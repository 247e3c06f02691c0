"""Location providers: where "here" is when distances are computed."""

from __future__ import annotations

from typing import Optional, Protocol

from waymark.model import Position


class LocationProvider(Protocol):
    def current_location(self) -> Optional[Position]:
        ...


class FixedLocationProvider:
    """
    Location provider backed by a settable position.

    `None` means the location is unknown. `update()` models a new fix arriving
    during the session; readers always see the latest value.
    """

    def __init__(self, position: Optional[Position] = None) -> None:
        self._position = position

    def current_location(self) -> Optional[Position]:
        return self._position

    def update(self, position: Optional[Position]) -> None:
        self._position = position
