"""
Icon rasterization for bookmark rows.

On a terminal the "image" for a row is a colored glyph chip: the icon color
as a filled circle followed by the first letter of the icon name, much like
a colored circle with a symbol drawn in it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from rich.text import Text

from waymark.core.color_mapper import ColorMapper
from waymark.core.config import DEFAULT_ICON_GLYPH
from waymark.model import IconRef


@dataclass(frozen=True)
class IconStyle:
    glyph: str = DEFAULT_ICON_GLYPH
    show_symbol: bool = True


class IconRasterizer(Protocol):
    def render_icon(self, icon: IconRef, style: IconStyle) -> Text:
        ...


class TextIconRasterizer:
    """Render icons as rich Text chips."""

    def render_icon(self, icon: IconRef, style: IconStyle) -> Text:
        chip = Text(style.glyph, style=ColorMapper.to_rich_style(icon.color))
        name = (icon.name or "").strip()
        if style.show_symbol and name:
            chip.append(" ")
            chip.append(name[0].upper(), style="bold")
        return chip
