"""Waymark - browse saved bookmarks on a constrained, template-driven display."""

__version__ = "1.0.0"
__description__ = "Two-level bookmark browser with distance hints and map focus"

from waymark.cli import app, main

__all__ = ["app", "main", "__version__"]
