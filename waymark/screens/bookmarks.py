"""
The bookmarks browsing screen.

One `BookmarksScreen` shows one browse level for its whole lifetime:

- `CategoryBrowsing()`: the visible, non-empty collections
- `BookmarkBrowsing(collection_id)`: the bookmarks inside one collection

Selecting a collection pushes a *new* screen scoped to it onto the navigation
stack; selecting a bookmark asks the store to center the map on it. Every
collaborator is passed in through `ScreenContext`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union
import logging

from waymark.core.config import WaymarkConfig
from waymark.core.constraints import ConstraintProvider, ConstraintService
from waymark.core.filters import visible_categories
from waymark.core.formatter import RowFormatter
from waymark.core.icons import IconRasterizer, IconStyle, TextIconRasterizer
from waymark.core.location import LocationProvider
from waymark.core.map_surface import MapSurface
from waymark.core.strings import get_string
from waymark.screens.assembler import ListAssembler
from waymark.screens.navigation import NavigationStack
from waymark.screens.templates import (
    Action,
    ActionKind,
    ClickAction,
    DrillIntoCollection,
    FocusBookmark,
    Header,
    ItemList,
    MapTemplate,
)
from waymark.store import BookmarkStore
from waymark.utils.profiling import profile_operation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryBrowsing:
    pass


@dataclass(frozen=True)
class BookmarkBrowsing:
    collection_id: str


BrowseState = Union[CategoryBrowsing, BookmarkBrowsing]


@dataclass
class ScreenContext:
    """Collaborators shared by every screen on one navigation stack."""

    store: BookmarkStore
    navigation: NavigationStack
    location: LocationProvider
    constraints: Optional[ConstraintService] = None
    rasterizer: IconRasterizer = field(default_factory=TextIconRasterizer)
    map_surface: Optional[MapSurface] = None
    config: WaymarkConfig = field(default_factory=WaymarkConfig)


class BookmarksScreen:
    def __init__(self, context: ScreenContext, state: BrowseState = CategoryBrowsing()) -> None:
        self._context = context
        self._state = state
        self._disposed = False
        cfg = context.config
        self._max_items = ConstraintProvider(
            context.constraints, fallback=cfg.fallback_list_limit
        ).max_list_items()
        self._assembler = ListAssembler(
            context.store,
            dispatch=self._on_click,
            formatter=RowFormatter(units=cfg.units, distance_style=cfg.distance_style),
            rasterizer=context.rasterizer,
            icon_style=IconStyle(glyph=cfg.icon_glyph),
        )

    def __repr__(self) -> str:
        return f"BookmarksScreen({self._state!r})"

    @property
    def state(self) -> BrowseState:
        return self._state

    @property
    def context(self) -> ScreenContext:
        return self._context

    @property
    def max_list_items(self) -> int:
        return self._max_items

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        self._disposed = True

    def _label(self, key: str) -> str:
        return get_string(key, self._context.config.locale)

    def _collection_name(self, collection_id: str) -> str:
        for c in self._context.store.list_collections():
            if c.id == collection_id:
                return c.name
        return ""

    def header(self) -> Header:
        back = Action(ActionKind.BACK, self._label("back"))
        if isinstance(self._state, BookmarkBrowsing):
            return Header(title=self._collection_name(self._state.collection_id), start_action=back)
        return Header(title=self._label("bookmarks"), start_action=back)

    def item_list(self) -> ItemList:
        store = self._context.store
        if isinstance(self._state, BookmarkBrowsing):
            cid = self._state.collection_id
            rows = self._assembler.assemble_bookmark_rows(
                cid,
                store.member_count(cid),
                self._max_items,
                self._context.location.current_location(),
            )
        else:
            rows = self._assembler.assemble_category_rows(
                visible_categories(store.list_collections()),
                self._max_items,
            )
        return ItemList(rows=tuple(rows), no_items_message=self._label("no_items"))

    def map_actions(self) -> tuple[Action, ...]:
        return (
            Action(ActionKind.ZOOM_IN, self._label("zoom_in")),
            Action(ActionKind.ZOOM_OUT, self._label("zoom_out")),
            Action(ActionKind.RECENTER, self._label("recenter")),
        )

    def render(self) -> MapTemplate:
        name = "render_bookmarks" if isinstance(self._state, BookmarkBrowsing) else "render_categories"
        with profile_operation(name):
            return MapTemplate(
                header=self.header(),
                item_list=self.item_list(),
                map_actions=self.map_actions(),
            )

    def child(self, collection_id: str) -> "BookmarksScreen":
        return BookmarksScreen(self._context, BookmarkBrowsing(collection_id))

    def _on_click(self, action: ClickAction) -> None:
        if self._disposed:
            logger.debug("Ignoring %r on disposed %r", action, self)
            return
        if isinstance(action, DrillIntoCollection):
            self._context.navigation.push(self.child(action.collection_id))
        elif isinstance(action, FocusBookmark):
            self._context.store.focus_on_map(action.bookmark_id, action.collection_id)

    def on_map_action(self, action: Action) -> None:
        surface = self._context.map_surface
        if self._disposed or surface is None:
            return
        if action.kind == ActionKind.ZOOM_IN:
            surface.zoom_in()
        elif action.kind == ActionKind.ZOOM_OUT:
            surface.zoom_out()
        elif action.kind == ActionKind.RECENTER:
            here = self._context.location.current_location()
            if here is not None:
                surface.recenter(here)


__all__ = [
    "CategoryBrowsing",
    "BookmarkBrowsing",
    "BrowseState",
    "ScreenContext",
    "BookmarksScreen",
]
