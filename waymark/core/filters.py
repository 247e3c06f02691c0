"""Which bookmark collections are offered for browsing."""

from __future__ import annotations

from typing import Iterable, List

from waymark.model import BookmarkCollection


def is_browsable(collection: BookmarkCollection) -> bool:
    return collection.visible and collection.bookmark_count > 0


def visible_categories(collections: Iterable[BookmarkCollection]) -> List[BookmarkCollection]:
    """
    Drop hidden and empty collections, keeping the input order.

    Example:
        >>> a = BookmarkCollection("a", bookmark_count=0)
        >>> b = BookmarkCollection("b", bookmark_count=2)
        >>> c = BookmarkCollection("c", bookmark_count=1, visible=False)
        >>> [x.id for x in visible_categories([a, b, c])]
        ['b']
    """
    return [c for c in collections if is_browsable(c)]
