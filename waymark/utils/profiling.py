"""Opt-in timing of render passes.

Set ``WAYMARK_PROFILE=1`` to record how long each named operation takes.
Operations slower than ``WAYMARK_PROFILE_THRESHOLD_MS`` (default 50) are
logged at WARNING.
"""

import logging
import os
import time
from contextlib import contextmanager
from typing import Dict, Optional

from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

_PROFILING_ENABLED = os.getenv("WAYMARK_PROFILE", "").lower() in ("1", "true", "yes")

_SLOW_OPERATION_THRESHOLD_MS = float(os.getenv("WAYMARK_PROFILE_THRESHOLD_MS", "50.0"))

_profiling_data: Dict[str, list[float]] = {}


def is_profiling_enabled() -> bool:
    return _PROFILING_ENABLED


def set_profiling_enabled(enabled: bool) -> None:
    global _PROFILING_ENABLED
    _PROFILING_ENABLED = enabled


def get_profiling_data() -> Dict[str, list[float]]:
    return {k: list(v) for k, v in _profiling_data.items()}


def clear_profiling_data() -> None:
    _profiling_data.clear()


@contextmanager
def profile_operation(name: str, threshold_ms: Optional[float] = None):
    """Time the enclosed block under `name` when profiling is enabled.

    Example:
        with profile_operation("render_bookmarks"):
            template = screen.render()
    """
    if not _PROFILING_ENABLED:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000.0
        _profiling_data.setdefault(name, []).append(duration_ms)
        threshold = threshold_ms if threshold_ms is not None else _SLOW_OPERATION_THRESHOLD_MS
        if duration_ms > threshold:
            logger.warning("Slow operation: %s took %.2fms", name, duration_ms)


def get_operation_stats(name: str) -> Optional[Dict[str, float]]:
    durations = _profiling_data.get(name)
    if not durations:
        return None
    return {
        "count": len(durations),
        "total_ms": sum(durations),
        "avg_ms": sum(durations) / len(durations),
        "min_ms": min(durations),
        "max_ms": max(durations),
    }


def print_profiling_summary(console: Optional[Console] = None) -> None:
    c = console or Console(stderr=True)
    if not _profiling_data:
        c.print("[dim]No profiling data collected.[/]")
        return

    table = Table(title="Profiling Summary", show_header=True, header_style="bold cyan")
    table.add_column("Operation")
    table.add_column("Count", justify="right")
    table.add_column("Avg ms", justify="right")
    table.add_column("Max ms", justify="right")
    for name in sorted(_profiling_data):
        stats = get_operation_stats(name)
        if stats:
            table.add_row(name, str(stats["count"]), f"{stats['avg_ms']:.2f}", f"{stats['max_ms']:.2f}")
    c.print(table)


__all__ = [
    "is_profiling_enabled",
    "set_profiling_enabled",
    "get_profiling_data",
    "clear_profiling_data",
    "profile_operation",
    "get_operation_stats",
    "print_profiling_summary",
]
