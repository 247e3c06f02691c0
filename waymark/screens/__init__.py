"""Browse screens, list assembly and the template toolkit they render into."""

from waymark.screens.bookmarks import (
    BookmarkBrowsing,
    BookmarksScreen,
    BrowseState,
    CategoryBrowsing,
    ScreenContext,
)
from waymark.screens.navigation import NavigationStack, ScreenStack

__all__ = [
    "BookmarkBrowsing",
    "BookmarksScreen",
    "BrowseState",
    "CategoryBrowsing",
    "ScreenContext",
    "NavigationStack",
    "ScreenStack",
]
