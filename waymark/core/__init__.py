"""Core browsing logic for Waymark."""

__all__ = [
    "config",
    "constraints",
    "filters",
    "formatter",
    "distance",
    "icons",
    "location",
    "map_surface",
    "color_mapper",
    "strings",
]
