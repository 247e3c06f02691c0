"""
Utility functions for Waymark: natural sorting and per-user directories.
"""

from typing import List, Union
import os
import re
import sys
from pathlib import Path


def natural_sort_key(text: str) -> List[Union[str, int]]:
    """
    Generate a sort key for natural/human sorting.

    Natural sorting handles mixed alphanumeric strings correctly,
    sorting "Item 2" before "Item 10" (unlike lexicographic sorting).

    Examples:
        >>> sorted(["Day 10.gpx", "Day 2.gpx", "Day 1.gpx"], key=natural_sort_key)
        ['Day 1.gpx', 'Day 2.gpx', 'Day 10.gpx']
    """
    if not text:
        return ['']

    def convert(part: str) -> Union[str, int]:
        return int(part) if part.isdigit() else part.lower()

    return [convert(part) for part in re.split(r'(\d+)', text)]


def user_config_dir(app_name: str = "waymark") -> Path:
    """
    Return an OS-appropriate per-user config directory.

    - macOS: ~/Library/Application Support/<app_name>/
    - Linux/Unix: $XDG_CONFIG_HOME/<app_name>/ or ~/.config/<app_name>/
    - Windows: %APPDATA%\\<app_name>\\  (best-effort)
    """
    home = Path.home()
    plat = sys.platform.lower()

    if plat == "darwin":
        return home / "Library" / "Application Support" / app_name

    if plat.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / app_name
        return home / app_name

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else (home / ".config")
    return base / app_name
