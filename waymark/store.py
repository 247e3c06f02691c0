"""
Bookmark store interface and an in-memory implementation.

Browsing screens read collections and bookmarks through `BookmarkStore` and
never mutate them; the only write-style call is `focus_on_map`, which
recenters the map surface on a bookmark.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol, Sequence
import logging

from waymark.core.map_surface import MapSurface
from waymark.model import Bookmark, BookmarkCollection

logger = logging.getLogger(__name__)


class BookmarkStore(Protocol):
    def list_collections(self) -> Sequence[BookmarkCollection]:
        ...

    def member_count(self, collection_id: str) -> int:
        ...

    def bookmark_id_at(self, collection_id: str, index: int) -> Optional[str]:
        ...

    def lookup_bookmark(self, collection_id: str, bookmark_id: str) -> Bookmark:
        ...

    def focus_on_map(self, bookmark_id: str, collection_id: Optional[str] = None) -> None:
        ...


class MemoryBookmarkStore:
    """
    Ordered collections of bookmarks held in memory.

    Bookmark order within a collection is insertion order and is the order
    `bookmark_id_at` resolves positions against.
    """

    def __init__(self, map_surface: Optional[MapSurface] = None) -> None:
        self.map_surface = map_surface or MapSurface()
        self._collections: Dict[str, BookmarkCollection] = {}
        self._members: Dict[str, List[Bookmark]] = {}

    def add_collection(self, collection: BookmarkCollection, bookmarks: Iterable[Bookmark] = ()) -> None:
        if collection.id in self._collections:
            raise ValueError(f"Duplicate collection id: {collection.id!r}")
        members: List[Bookmark] = []
        seen = set()
        for bm in bookmarks:
            if bm.collection_id != collection.id:
                raise ValueError(
                    f"Bookmark {bm.id!r} belongs to {bm.collection_id!r}, not {collection.id!r}"
                )
            if bm.id in seen:
                raise ValueError(f"Duplicate bookmark id {bm.id!r} in collection {collection.id!r}")
            seen.add(bm.id)
            members.append(bm)
        self._collections[collection.id] = collection
        self._members[collection.id] = members

    def remove_bookmark(self, collection_id: str, bookmark_id: str) -> bool:
        members = self._members.get(collection_id)
        if not members:
            return False
        for i, bm in enumerate(members):
            if bm.id == bookmark_id:
                del members[i]
                return True
        return False

    def _with_count(self, collection: BookmarkCollection) -> BookmarkCollection:
        count = len(self._members.get(collection.id, ()))
        if collection.bookmark_count == count:
            return collection
        return BookmarkCollection(
            id=collection.id,
            name=collection.name,
            description=collection.description,
            visible=collection.visible,
            bookmark_count=count,
            extra=collection.extra,
        )

    def list_collections(self) -> List[BookmarkCollection]:
        return [self._with_count(c) for c in self._collections.values()]

    def get_collection(self, collection_id: str) -> Optional[BookmarkCollection]:
        c = self._collections.get(collection_id)
        return self._with_count(c) if c is not None else None

    def member_count(self, collection_id: str) -> int:
        return len(self._members.get(collection_id, ()))

    def bookmark_id_at(self, collection_id: str, index: int) -> Optional[str]:
        members = self._members.get(collection_id, [])
        if index < 0 or index >= len(members):
            return None
        return members[index].id

    def lookup_bookmark(self, collection_id: str, bookmark_id: str) -> Bookmark:
        for bm in self._members.get(collection_id, ()):
            if bm.id == bookmark_id:
                return bm
        raise KeyError(f"No bookmark {bookmark_id!r} in collection {collection_id!r}")

    def find_bookmark(self, bookmark_id: str, collection_id: Optional[str] = None) -> Optional[Bookmark]:
        if collection_id is not None:
            scoped = [self._members.get(collection_id, [])]
        else:
            scoped = list(self._members.values())
        for members in scoped:
            for bm in members:
                if bm.id == bookmark_id:
                    return bm
        return None

    def focus_on_map(self, bookmark_id: str, collection_id: Optional[str] = None) -> None:
        bm = self.find_bookmark(bookmark_id, collection_id)
        if bm is None:
            logger.warning("Cannot focus unknown bookmark %r", bookmark_id)
            return
        self.map_surface.center_on(bm)


__all__ = ["BookmarkStore", "MemoryBookmarkStore"]
