from __future__ import annotations

from typing import Dict, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Static

from waymark.core.config import WaymarkConfig
from waymark.core.constraints import ConstraintService
from waymark.core.location import FixedLocationProvider, LocationProvider
from waymark.core.map_surface import MapFocus, MapSurface
from waymark.screens.bookmarks import BookmarksScreen, ScreenContext
from waymark.screens.navigation import ScreenStack
from waymark.screens.templates import Action, ActionKind, MapTemplate, Row
from waymark.store import BookmarkStore
from waymark.tui.models import ROW_COLUMNS, WidgetIds
from waymark.tui.widgets import MapPanel, ShortcutFooter
from waymark.utils.profiling import profile_operation


def _details(row: Row) -> Text:
    out = Text()
    for i, line in enumerate(row.texts):
        if i:
            out.append("\n")
        out.append(line if isinstance(line, Text) else Text(line))
    return out


class TextualNavigator:
    """
    Navigation stack backed by the Textual screen stack.

    Each browse screen gets its own Textual `Screen`; the mirrored
    `ScreenStack` disposes browse screens as they are popped.
    """

    def __init__(self, app: "WaymarkApp") -> None:
        self.app = app
        self.stack = ScreenStack()

    @property
    def depth(self) -> int:
        return len(self.stack)

    def push(self, screen: BookmarksScreen) -> None:
        self.stack.push(screen)
        self.app.push_screen(BrowseView(screen))

    def pop(self) -> Optional[BookmarksScreen]:
        top = self.stack.pop()
        if top is not None:
            self.app.pop_screen()
        return top

    def unwind(self) -> None:
        self.stack.unwind()


class BrowseView(Screen):
    """One browse screen rendered as a header, a row table and a map panel."""

    BINDINGS = [
        Binding("r", "refresh_rows", "Refresh"),
        Binding("plus,equals_sign", "map_action('zoom_in')", "Zoom in", key_display="+"),
        Binding("minus", "map_action('zoom_out')", "Zoom out", key_display="-"),
        Binding("c", "map_action('recenter')", "Recenter"),
    ]

    def __init__(self, browse: BookmarksScreen) -> None:
        super().__init__()
        self.browse = browse
        self.template: Optional[MapTemplate] = None
        self._rows: Dict[str, Row] = {}

    def compose(self) -> ComposeResult:
        yield Static("", id=WidgetIds.HEADER_TITLE, classes="title")
        yield DataTable(id=WidgetIds.ROWS_TABLE, cursor_type="row", zebra_stripes=True)
        yield Static("", id=WidgetIds.EMPTY_MESSAGE)
        yield Static("", id=WidgetIds.MAP_ACTIONS, classes="muted")
        yield MapPanel(self.browse.context.map_surface, id=WidgetIds.MAP_PANEL)
        yield ShortcutFooter(id=WidgetIds.FOOTER, classes="footer")

    def on_mount(self) -> None:
        self.refresh_rows()
        self.query_one(f"#{WidgetIds.ROWS_TABLE}", DataTable).focus()

    def on_screen_resume(self) -> None:
        # Coming back from a child screen: the store or location may have changed.
        if self.template is not None:
            self.refresh_rows()

    def refresh_rows(self) -> None:
        with profile_operation("tui_refresh_rows"):
            template = self.browse.render()
            self.template = template

            title = Text()
            if template.header.start_action is not None:
                title.append("← ", style="dim")
            title.append(template.header.title)
            self.query_one(f"#{WidgetIds.HEADER_TITLE}", Static).update(title)

            table = self.query_one(f"#{WidgetIds.ROWS_TABLE}", DataTable)
            if not table.columns:
                table.add_columns(*ROW_COLUMNS)
            table.clear()

            self._rows = {}
            for i, row in enumerate(template.item_list):
                key = str(i)
                self._rows[key] = row
                name = Text(row.title)
                if row.browsable:
                    name.append(" ›", style="dim")
                table.add_row(
                    row.image or "",
                    name,
                    _details(row),
                    height=max(1, len(row.texts)),
                    key=key,
                )

            empty = "" if len(template.item_list) else template.item_list.no_items_message
            self.query_one(f"#{WidgetIds.EMPTY_MESSAGE}", Static).update(empty)
            self.query_one(f"#{WidgetIds.MAP_ACTIONS}", Static).update(
                Text("  ".join(f"[{a.title}]" for a in template.map_actions))
            )
            self.query_one(f"#{WidgetIds.MAP_PANEL}", MapPanel).show()

    def row_for_key(self, key: str) -> Optional[Row]:
        return self._rows.get(key)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        key = getattr(event.row_key, "value", event.row_key)
        row = self._rows.get(str(key))
        if row is not None:
            row.click()

    def action_refresh_rows(self) -> None:
        self.refresh_rows()

    def action_map_action(self, kind: str) -> None:
        self.browse.on_map_action(Action(ActionKind(kind)))
        self.query_one(f"#{WidgetIds.MAP_PANEL}", MapPanel).show()

    def show_map_focus(self, focus: MapFocus) -> None:
        self.query_one(f"#{WidgetIds.MAP_PANEL}", MapPanel).show(focus)


class WaymarkApp(App):
    """
    Waymark - bookmark browser.

    Opens on the collections list. Enter drills into a collection or centers
    the map on a bookmark; Esc goes back and quits from the collections list.
    """

    CSS_PATH = "theme.tcss"
    TITLE = "Waymark"

    BINDINGS = [
        Binding("q", "close", "Quit"),
        # priority=True prevents the focused DataTable from consuming Esc.
        Binding("escape", "back", "Back", key_display="Esc", priority=True),
    ]

    def __init__(
        self,
        store: BookmarkStore,
        *,
        config: Optional[WaymarkConfig] = None,
        location: Optional[LocationProvider] = None,
        constraints: Optional[ConstraintService] = None,
        map_surface: Optional[MapSurface] = None,
    ) -> None:
        super().__init__()
        self.config = config or WaymarkConfig()
        self.map_surface = map_surface or getattr(store, "map_surface", None) or MapSurface()
        self.navigator = TextualNavigator(self)
        self.context = ScreenContext(
            store=store,
            navigation=self.navigator,
            location=location or FixedLocationProvider(self.config.here),
            constraints=constraints,
            map_surface=self.map_surface,
            config=self.config,
        )
        self.last_focus: Optional[MapFocus] = None

    def on_mount(self) -> None:
        self.map_surface.add_listener(self._on_map_focus)
        self.navigator.push(BookmarksScreen(self.context))

    def _on_map_focus(self, focus: MapFocus) -> None:
        self.last_focus = focus
        if isinstance(self.screen, BrowseView):
            self.screen.show_map_focus(focus)

    def action_close(self) -> None:
        self.navigator.unwind()
        self.exit()

    def action_back(self) -> None:
        if self.navigator.depth <= 1:
            self.action_close()
            return
        self.navigator.pop()


__all__ = ["WaymarkApp", "BrowseView", "TextualNavigator"]
