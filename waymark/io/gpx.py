"""
GPX adapter.

Reads one GPX file as one bookmark collection:

- collection id: file stem
- collection name/description: <metadata><name>/<desc>, else the file stem
- bookmark per <wpt>: <name>, <cmt> as address, <type> as feature label,
  <sym> as icon name

Both GPX 1.1 and 1.0 namespaces are accepted.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple
import xml.etree.ElementTree as ET

from waymark.core.color_mapper import ColorMapper
from waymark.io.library import LibraryError
from waymark.model import Bookmark, BookmarkCollection, IconRef, Position


_GPX_NAMESPACES = (
    "http://www.topografix.com/GPX/1/1",
    "http://www.topografix.com/GPX/1/0",
)


def _ns_of(root: ET.Element) -> str:
    tag = root.tag
    if tag.startswith("{"):
        return tag[1 : tag.index("}")]
    return ""


def _child_text(elem: Optional[ET.Element], name: str, ns: str) -> str:
    if elem is None:
        return ""
    child = elem.find(f"{{{ns}}}{name}" if ns else name)
    if child is not None and child.text:
        return child.text.strip()
    return ""


def read_gpx_collection(
    path: str | Path, *, default_color: str = ColorMapper.DEFAULT_COLOR
) -> Tuple[BookmarkCollection, List[Bookmark]]:
    """
    Read a GPX file into a collection and its bookmarks.

    Raises:
        LibraryError: The file is not readable GPX or has invalid coordinates
    """
    path = Path(path)
    try:
        root = ET.parse(path).getroot()
    except (ET.ParseError, OSError) as e:
        raise LibraryError(f"Cannot read GPX file {path}: {e}")

    ns = _ns_of(root)
    if ns and ns not in _GPX_NAMESPACES:
        raise LibraryError(f"{path} is not a GPX file (namespace {ns})")
    if root.tag.split("}")[-1] != "gpx":
        raise LibraryError(f"{path} is not a GPX file (root <{root.tag}>)")

    q = (lambda n: f"{{{ns}}}{n}") if ns else (lambda n: n)
    cid = path.stem
    metadata = root.find(q("metadata"))
    name = _child_text(metadata, "name", ns) or cid
    description = _child_text(metadata, "desc", ns)

    bookmarks: List[Bookmark] = []
    for i, wpt in enumerate(root.findall(q("wpt"))):
        try:
            lat = float(wpt.get("lat", ""))
            lon = float(wpt.get("lon", ""))
        except ValueError:
            raise LibraryError(f"{path}: waypoint {i} has invalid lat/lon")
        if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
            raise LibraryError(f"{path}: waypoint {i} coordinates out of range")
        sym = _child_text(wpt, "sym", ns)
        bookmarks.append(
            Bookmark(
                id=f"{cid}:{i}",
                collection_id=cid,
                name=_child_text(wpt, "name", ns),
                position=Position(lat, lon),
                address=_child_text(wpt, "cmt", ns),
                feature=_child_text(wpt, "type", ns),
                icon=IconRef(name=sym or "Location", color=default_color),
            )
        )

    collection = BookmarkCollection(
        id=cid,
        name=name,
        description=description,
        visible=True,
        bookmark_count=len(bookmarks),
    )
    return collection, bookmarks


__all__ = ["read_gpx_collection"]
