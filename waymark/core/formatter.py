"""
Row text for a single bookmark.

A bookmark row has a title (the bookmark name) and up to two secondary lines:

1. the address, when the bookmark has one
2. the distance from the current location, styled as a distance span,
   followed by " • <feature>" when the bookmark has a feature label

Without a current location neither the distance nor the feature label is
shown, even if the bookmark has a feature label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from rich.text import Text

from waymark.core.config import DEFAULT_DISTANCE_STYLE
from waymark.core.distance import distance_between
from waymark.model import Bookmark, Position


FEATURE_SEPARATOR = " • "

SecondaryLine = Union[str, Text]


@dataclass(frozen=True)
class RowText:
    primary: str
    secondary: Tuple[SecondaryLine, ...] = ()

    def plain_lines(self) -> Tuple[str, ...]:
        return tuple(line.plain if isinstance(line, Text) else line for line in self.secondary)


class RowFormatter:
    """Builds `RowText` for bookmarks."""

    def __init__(self, *, units: str = "metric", distance_style: str = DEFAULT_DISTANCE_STYLE) -> None:
        self.units = units
        self.distance_style = distance_style

    def distance_line(self, bookmark: Bookmark, here: Position) -> Text:
        distance = distance_between(here, bookmark.position, units=self.units)
        line = Text()
        line.append(distance.text, style=self.distance_style)
        if bookmark.feature:
            line.append(FEATURE_SEPARATOR)
            line.append(bookmark.feature)
        return line

    def describe(self, bookmark: Bookmark, here: Optional[Position]) -> RowText:
        secondary = []
        if bookmark.address:
            secondary.append(bookmark.address)
        # TODO: confirm with product whether the feature label should show without a location fix.
        if here is not None:
            secondary.append(self.distance_line(bookmark, here))
        return RowText(primary=bookmark.name, secondary=tuple(secondary))

    def has_distance_span(self, line: SecondaryLine) -> bool:
        """True if `line` carries a span in the distance style."""
        if not isinstance(line, Text):
            return False
        return any(str(span.style) == self.distance_style for span in line.spans)


__all__ = ["FEATURE_SEPARATOR", "RowText", "RowFormatter"]
