"""
Bookmark library loading.

A library is either:
- a YAML file (``version: 1`` with a ``collections`` list), or
- a GPX file (one collection), or
- a directory of GPX files (one collection per file, natural sort order).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from waymark.core.color_mapper import ColorMapper
from waymark.core.map_surface import MapSurface
from waymark.model import Bookmark, BookmarkCollection, IconRef, Position
from waymark.store import MemoryBookmarkStore
from waymark.utils.utils import natural_sort_key


LIBRARY_VERSION = 1

_YAML_SUFFIXES = {".yaml", ".yml"}
_GPX_SUFFIXES = {".gpx"}


class LibraryError(ValueError):
    """A bookmark library could not be read."""


def _as_dict(value: Any, *, label: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise LibraryError(f"{label} must be a mapping/dict")
    return value


def _as_list(value: Any, *, label: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise LibraryError(f"{label} must be a list")


def _coord(raw: Dict[str, Any], key: str, *, label: str, lo: float, hi: float) -> float:
    try:
        value = float(raw[key])
    except KeyError:
        raise LibraryError(f"{label} is missing {key}")
    except (TypeError, ValueError):
        raise LibraryError(f"{label}.{key} must be a number (got {raw.get(key)!r})")
    if not (lo <= value <= hi):
        raise LibraryError(f"{label}.{key} out of range: {value}")
    return value


def _icon(raw: Any, *, default_color: str, label: str) -> IconRef:
    if raw is None:
        return IconRef(color=default_color)
    if isinstance(raw, str):
        return IconRef(name=raw.strip() or "Location", color=default_color)
    d = _as_dict(raw, label=label)
    name = str(d.get("name") or "Location").strip() or "Location"
    color_raw = str(d.get("color") or "").strip()
    if color_raw:
        r, g, b = ColorMapper.parse_color(color_raw)
        color = f"rgba({r},{g},{b},1)"
    else:
        color = default_color
    return IconRef(name=name, color=color)


def parse_yaml_library(
    raw: Any, *, default_color: str = ColorMapper.DEFAULT_COLOR
) -> List[Tuple[BookmarkCollection, List[Bookmark]]]:
    """Turn a loaded YAML document into (collection, bookmarks) pairs."""
    doc = _as_dict(raw, label="library")
    version = doc.get("version", LIBRARY_VERSION)
    if version != LIBRARY_VERSION:
        raise LibraryError(f"Unsupported library version: {version!r} (expected {LIBRARY_VERSION})")

    out: List[Tuple[BookmarkCollection, List[Bookmark]]] = []
    for ci, c_raw in enumerate(_as_list(doc.get("collections"), label="collections"), 1):
        c_label = f"collections[{ci - 1}]"
        c = _as_dict(c_raw, label=c_label)
        cid = str(c.get("id") if c.get("id") is not None else ci)

        bookmarks: List[Bookmark] = []
        for bi, b_raw in enumerate(_as_list(c.get("bookmarks"), label=f"{c_label}.bookmarks")):
            b_label = f"{c_label}.bookmarks[{bi}]"
            b = _as_dict(b_raw, label=b_label)
            bookmarks.append(
                Bookmark(
                    id=str(b.get("id") if b.get("id") is not None else f"{cid}:{bi}"),
                    collection_id=cid,
                    name=b.get("name"),
                    position=Position(
                        _coord(b, "lat", label=b_label, lo=-90.0, hi=90.0),
                        _coord(b, "lon", label=b_label, lo=-180.0, hi=180.0),
                    ),
                    address=b.get("address"),
                    feature=b.get("feature"),
                    icon=_icon(b.get("icon"), default_color=default_color, label=f"{b_label}.icon"),
                )
            )

        visible = c.get("visible", True)
        collection = BookmarkCollection(
            id=cid,
            name=c.get("name"),
            description=c.get("description"),
            visible=True if visible is None else bool(visible),
            bookmark_count=len(bookmarks),
        )
        out.append((collection, bookmarks))
    return out


def load_yaml_library(path: Path, *, default_color: str = ColorMapper.DEFAULT_COLOR):
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise LibraryError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise LibraryError(f"Cannot read {path}: {e}")
    return parse_yaml_library(raw, default_color=default_color)


def load_library(
    path: Path,
    *,
    default_color: str = ColorMapper.DEFAULT_COLOR,
    map_surface: Optional[MapSurface] = None,
) -> MemoryBookmarkStore:
    """
    Load a YAML library, a GPX file or a directory of GPX files into a store.

    Raises:
        LibraryError: The path is missing, unsupported, or malformed
    """
    from waymark.io.gpx import read_gpx_collection

    path = Path(path)
    if not path.exists():
        raise LibraryError(f"Library not found: {path}")

    if path.is_dir():
        gpx_files = sorted(
            (p for p in path.iterdir() if p.is_file() and p.suffix.lower() in _GPX_SUFFIXES),
            key=lambda p: natural_sort_key(p.name),
        )
        if not gpx_files:
            raise LibraryError(f"No .gpx files in {path}")
        pairs = [read_gpx_collection(p, default_color=default_color) for p in gpx_files]
    elif path.suffix.lower() in _GPX_SUFFIXES:
        pairs = [read_gpx_collection(path, default_color=default_color)]
    elif path.suffix.lower() in _YAML_SUFFIXES:
        pairs = load_yaml_library(path, default_color=default_color)
    else:
        raise LibraryError(f"Unsupported library file type: {path.suffix or path.name}")

    store = MemoryBookmarkStore(map_surface=map_surface)
    for collection, bookmarks in pairs:
        try:
            store.add_collection(collection, bookmarks)
        except ValueError as e:
            raise LibraryError(str(e))
    return store


__all__ = ["LibraryError", "LIBRARY_VERSION", "parse_yaml_library", "load_yaml_library", "load_library"]
