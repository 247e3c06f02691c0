"""Custom Textual widgets for the TUI module."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from waymark.core.map_surface import MapFocus, MapSurface
from waymark.tui.models import BROWSE_SHORTCUTS


class MapPanel(Static):
    """Shows what the map is centered on and its zoom level."""

    def __init__(self, surface: Optional[MapSurface] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.surface = surface

    def show(self, focus: Optional[MapFocus] = None) -> None:
        self.update(self.describe(focus))

    def describe(self, focus: Optional[MapFocus] = None) -> Text:
        surface = self.surface
        if focus is None and surface is not None:
            focus = surface.focus
        out = Text("Map ", style="bold")
        if focus is not None:
            out.append(focus.name or "(unnamed)", style="bold cyan")
            out.append(f"  {focus.lat:.5f}, {focus.lon:.5f}", style="dim")
        elif surface is not None and surface.center is not None:
            out.append(f"{surface.center.lat:.5f}, {surface.center.lon:.5f}", style="dim")
        else:
            out.append("not centered", style="dim")
        if surface is not None:
            out.append(f"  zoom {surface.zoom}", style="dim")
        return out


class ShortcutFooter(Static):
    """Footer line with the browse screen key bindings."""

    def render(self) -> str:
        return "  ".join(f"[bold]{key}[/] {desc}" for key, desc in BROWSE_SHORTCUTS)


__all__ = ["MapPanel", "ShortcutFooter"]
