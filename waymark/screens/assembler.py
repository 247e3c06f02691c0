"""
List assembly for the two browsing levels.

Both entry points truncate to the display limit before doing any per-row
work and keep source order. Click actions are bound through a single
`dispatch` callable supplied by the owning screen.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, List, Optional, Sequence
import logging

from waymark.core.formatter import RowFormatter
from waymark.core.icons import IconRasterizer, IconStyle, TextIconRasterizer
from waymark.model import Bookmark, BookmarkCollection, Position
from waymark.screens.templates import ClickAction, DrillIntoCollection, FocusBookmark, Row
from waymark.store import BookmarkStore

logger = logging.getLogger(__name__)


def _clamp(count: int, limit: int) -> int:
    return max(0, min(count, limit))


class ListAssembler:
    """Builds click-bound rows for collections and for bookmarks."""

    def __init__(
        self,
        store: BookmarkStore,
        *,
        dispatch: Callable[[ClickAction], None],
        formatter: Optional[RowFormatter] = None,
        rasterizer: Optional[IconRasterizer] = None,
        icon_style: IconStyle = IconStyle(),
    ) -> None:
        self.store = store
        self.dispatch = dispatch
        self.formatter = formatter or RowFormatter()
        self.rasterizer = rasterizer or TextIconRasterizer()
        self.icon_style = icon_style

    def _bind(self, action: ClickAction) -> Callable[[], None]:
        return partial(self.dispatch, action)

    def assemble_category_rows(self, collections: Sequence[BookmarkCollection], limit: int) -> List[Row]:
        rows: List[Row] = []
        for collection in collections[: _clamp(len(collections), limit)]:
            action = DrillIntoCollection(collection.id)
            rows.append(
                Row(
                    title=collection.name,
                    texts=(collection.description,),
                    browsable=True,
                    action=action,
                    on_click=self._bind(action),
                )
            )
        return rows

    def _resolve(self, collection_id: str, index: int) -> Optional[Bookmark]:
        try:
            bookmark_id = self.store.bookmark_id_at(collection_id, index)
            if bookmark_id is None:
                logger.debug("No bookmark at %s[%d]; skipping row", collection_id, index)
                return None
            return self.store.lookup_bookmark(collection_id, bookmark_id)
        except Exception as e:
            logger.debug("Bookmark %s[%d] could not be resolved (%s); skipping row", collection_id, index, e)
            return None

    def _icon(self, bookmark: Bookmark):
        try:
            return self.rasterizer.render_icon(bookmark.icon, self.icon_style)
        except Exception as e:
            logger.debug("Icon for %s failed to render (%s)", bookmark.id, e)
            return None

    def bookmark_row(self, bookmark: Bookmark, here: Optional[Position]) -> Row:
        text = self.formatter.describe(bookmark, here)
        action = FocusBookmark(bookmark.collection_id, bookmark.id)
        return Row(
            title=text.primary,
            texts=text.secondary,
            image=self._icon(bookmark),
            action=action,
            on_click=self._bind(action),
        )

    def assemble_bookmark_rows(
        self,
        collection_id: str,
        total_count: int,
        limit: int,
        here: Optional[Position],
    ) -> List[Row]:
        rows: List[Row] = []
        for index in range(_clamp(total_count, limit)):
            bookmark = self._resolve(collection_id, index)
            if bookmark is None:
                continue
            try:
                row = self.bookmark_row(bookmark, here)
            except Exception as e:
                logger.debug("Row for %s[%d] failed to build (%s); skipping row", collection_id, index, e)
                continue
            rows.append(row)
        return rows


__all__ = ["ListAssembler"]
