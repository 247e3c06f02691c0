"""
Color parsing for bookmark icons.

Bookmark icon colors arrive as RGBA strings (``rgba(255,51,0,1)``), hex
(``#FF3300`` / ``FF3300``) or plain ``rgb(...)``. Everything is parsed to an
RGB tuple and rendered as a rich style string.
"""

from __future__ import annotations

from typing import Tuple

import re


_RGB_REGEX = re.compile(r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")


class ColorMapper:
    """Parse bookmark icon colors."""

    DEFAULT_COLOR = "rgba(8,122,255,1)"  # blue

    @classmethod
    def parse_color(cls, color_str: str) -> Tuple[int, int, int]:
        """
        Parse various color formats to RGB tuple.

        Supports:
        - Hex: #FF0000, #ff0000, FF0000
        - RGB: rgb(255, 0, 0)
        - RGBA: rgba(255, 0, 0, 1)

        Unparseable input falls back to the default blue.

        Example:
            >>> ColorMapper.parse_color("rgba(255,51,0,1)")
            (255, 51, 0)
            >>> ColorMapper.parse_color("#00ffff")
            (0, 255, 255)
        """
        if not color_str:
            return (8, 122, 255)

        color_str = color_str.strip()

        if color_str.startswith("#"):
            color_str = color_str.lstrip("#")

        if len(color_str) == 6 and all(
            c in "0123456789ABCDEFabcdef" for c in color_str
        ):
            try:
                return tuple(int(color_str[i : i + 2], 16) for i in (0, 2, 4))
            except ValueError:
                pass

        if color_str.startswith(("rgba", "rgb")):
            match = _RGB_REGEX.search(color_str)
            if match:
                return tuple(min(255, int(v)) for v in match.groups())

        return (8, 122, 255)

    @classmethod
    def to_rich_style(cls, color_str: str) -> str:
        """Return a rich color style for any supported color string."""
        r, g, b = cls.parse_color(color_str)
        return f"rgb({r},{g},{b})"
