"""Tests for the two-level bookmarks screen."""

from __future__ import annotations

import dataclasses

from waymark.core.config import WaymarkConfig
from waymark.core.constraints import ListKind, StaticConstraintService
from waymark.model import Position
from waymark.screens.bookmarks import BookmarkBrowsing, BookmarksScreen, CategoryBrowsing
from waymark.screens.templates import Action, ActionKind, DrillIntoCollection
from waymark.utils.profiling import clear_profiling_data, get_operation_stats, set_profiling_enabled


def _root(context, stack):
    screen = BookmarksScreen(context)
    stack.push(screen)
    return screen


def test_initial_state_lists_visible_collections(context, stack):
    screen = _root(context, stack)
    template = screen.render()

    assert screen.state == CategoryBrowsing()
    assert template.header.title == "Bookmarks"
    assert template.header.start_action.kind == ActionKind.BACK
    assert [r.title for r in template.item_list] == ["Trails", "Water"]
    assert [r.action for r in template.item_list] == [DrillIntoCollection("trails"), DrillIntoCollection("water")]


def test_clicking_a_collection_pushes_a_scoped_screen(context, stack):
    root = _root(context, stack)
    root.render().item_list[0].click()

    assert len(stack) == 2
    child = stack.top
    assert isinstance(child, BookmarksScreen)
    assert child is not root
    assert child.state == BookmarkBrowsing("trails")
    assert root.state == CategoryBrowsing()

    template = child.render()
    assert template.header.title == "Trails"
    assert template.header.start_action is not None
    assert [r.title for r in template.item_list] == ["Ramona Falls", "McNeil Point", "Paradise Park"]


def test_clicking_a_bookmark_focuses_the_map(context, stack):
    child = _root(context, stack).child("trails")
    stack.push(child)

    child.render().item_list[1].click()

    focus = context.map_surface.focus
    assert focus.bookmark_id == "mcneil"
    assert focus.collection_id == "trails"
    assert len(stack) == 2


def test_clicks_after_pop_are_ignored(context, stack):
    root = _root(context, stack)
    root.render().item_list[0].click()
    child = stack.top
    rows = child.render().item_list

    stack.pop()
    assert child.disposed
    rows[0].click()

    assert context.map_surface.focus is None
    assert len(stack) == 1


def test_limit_is_read_once_per_screen(context, stack):
    ctx = dataclasses.replace(context, constraints=StaticConstraintService({ListKind.LIST: 1}))
    screen = _root(ctx, stack)
    assert screen.max_list_items == 1
    assert [r.title for r in screen.render().item_list] == ["Trails"]
    assert len(screen.child("trails").render().item_list) == 1


def test_fallback_limit_comes_from_config(context, stack):
    cfg = WaymarkConfig()
    cfg.fallback_list_limit = 2
    screen = BookmarksScreen(dataclasses.replace(context, config=cfg), BookmarkBrowsing("trails"))
    assert screen.max_list_items == 2
    assert len(screen.render().item_list) == 2


def test_location_is_read_at_render_time(context, location):
    screen = BookmarksScreen(context, BookmarkBrowsing("trails"))

    location.update(None)
    assert screen.render().item_list[1].plain_texts() == ()

    location.update(Position(45.5, -121.8))
    assert screen.render().item_list[1].plain_texts() == ("1.1 km",)


def test_render_is_idempotent(context):
    screen = BookmarksScreen(context, BookmarkBrowsing("trails"))
    assert screen.render() == screen.render()


def test_unknown_collection_renders_empty(context):
    template = BookmarksScreen(context, BookmarkBrowsing("gone")).render()
    assert template.header.title == ""
    assert len(template.item_list) == 0
    assert template.item_list.no_items_message == "No bookmarks"


def test_labels_follow_locale(context):
    cfg = WaymarkConfig()
    cfg.locale = "de"
    template = BookmarksScreen(dataclasses.replace(context, config=cfg)).render()
    assert template.header.title == "Lesezeichen"
    assert template.header.start_action.title == "Zurück"
    assert [a.title for a in template.map_actions] == ["Vergrößern", "Verkleinern", "Zentrieren"]


def test_map_actions(context, location):
    screen = BookmarksScreen(context)
    surface = context.map_surface
    start = surface.zoom

    screen.on_map_action(Action(ActionKind.ZOOM_IN))
    assert surface.zoom == start + 1
    screen.on_map_action(Action(ActionKind.ZOOM_OUT))
    screen.on_map_action(Action(ActionKind.ZOOM_OUT))
    assert surface.zoom == start - 1

    screen.on_map_action(Action(ActionKind.RECENTER))
    assert surface.center == location.current_location()

    screen.dispose()
    screen.on_map_action(Action(ActionKind.ZOOM_IN))
    assert surface.zoom == start - 1


def test_bookmark_click_dispatches_scoped_focus(context):
    calls = []

    class _RecordingStore:
        def __init__(self, inner):
            self.inner = inner

        def __getattr__(self, name):
            return getattr(self.inner, name)

        def focus_on_map(self, bookmark_id, collection_id=None):
            calls.append((bookmark_id, collection_id))

    ctx = dataclasses.replace(context, store=_RecordingStore(context.store))
    BookmarksScreen(ctx, BookmarkBrowsing("trails")).render().item_list[0].click()
    assert calls == [("ramona", "trails")]


def test_render_is_profiled_when_enabled(context):
    clear_profiling_data()
    set_profiling_enabled(True)
    try:
        BookmarksScreen(context).render()
        BookmarksScreen(context, BookmarkBrowsing("trails")).render()
    finally:
        set_profiling_enabled(False)
    assert get_operation_stats("render_categories")["count"] == 1
    assert get_operation_stats("render_bookmarks")["count"] == 1
    clear_profiling_data()
