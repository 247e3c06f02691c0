"""
Template toolkit used by the browsing screens.

Screens describe what to show with these small value types; a concrete
surface (the Textual app, the console renderer) decides how to draw them.
Rows carry both a click action *value* (what the click means, comparable in
tests) and the bound callable that performs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple, Union

from rich.text import Text

from waymark.core.formatter import SecondaryLine


class ActionKind(str, Enum):
    BACK = "back"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    RECENTER = "recenter"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    title: str = ""


@dataclass(frozen=True)
class DrillIntoCollection:
    collection_id: str


@dataclass(frozen=True)
class FocusBookmark:
    collection_id: str
    bookmark_id: str


ClickAction = Union[DrillIntoCollection, FocusBookmark]


@dataclass(frozen=True)
class Row:
    title: str
    texts: Tuple[SecondaryLine, ...] = ()
    image: Optional[Text] = None
    browsable: bool = False
    action: Optional[ClickAction] = None
    on_click: Optional[Callable[[], None]] = field(default=None, compare=False, repr=False)

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()

    def plain_texts(self) -> Tuple[str, ...]:
        return tuple(t.plain if isinstance(t, Text) else t for t in self.texts)


@dataclass(frozen=True)
class Header:
    title: str
    start_action: Optional[Action] = None


@dataclass(frozen=True)
class ItemList:
    rows: Tuple[Row, ...] = ()
    no_items_message: str = ""

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]


@dataclass(frozen=True)
class MapTemplate:
    """A list shown over the map, with map controls."""

    header: Header
    item_list: ItemList
    map_actions: Tuple[Action, ...] = ()


__all__ = [
    "ActionKind",
    "Action",
    "DrillIntoCollection",
    "FocusBookmark",
    "ClickAction",
    "Row",
    "Header",
    "ItemList",
    "MapTemplate",
]
