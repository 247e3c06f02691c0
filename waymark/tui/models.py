"""Widget ids and key hints for the TUI module.

Widget ids are defined here so tests can query widgets without depending
on layout details.
"""


class WidgetIds:
    """Widget ID constants for stable test API."""

    HEADER_TITLE = "header_title"
    ROWS_TABLE = "rows_table"
    EMPTY_MESSAGE = "empty_message"
    MAP_PANEL = "map_panel"
    MAP_ACTIONS = "map_actions"
    FOOTER = "footer"


# (key, description) pairs shown in the footer line of every browse screen.
BROWSE_SHORTCUTS = [
    ("↑↓", "Navigate"),
    ("Enter", "Open"),
    ("Esc", "Back"),
    ("r", "Refresh"),
    ("+/-", "Zoom"),
    ("c", "Recenter"),
    ("q", "Quit"),
]

ROW_COLUMNS = ("", "Name", "Details")


__all__ = ["WidgetIds", "BROWSE_SHORTCUTS", "ROW_COLUMNS"]
