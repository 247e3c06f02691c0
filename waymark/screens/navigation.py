"""Navigation stack of browse screens."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol


class NavigationStack(Protocol):
    def push(self, screen: Any) -> None:
        ...

    def pop(self) -> Optional[Any]:
        ...


class ScreenStack:
    """
    In-memory navigation stack.

    Popped screens are disposed so click actions they bound become no-ops.
    The root screen is never popped by `pop()`; use `unwind()` to tear the
    whole stack down.
    """

    def __init__(self) -> None:
        self._stack: List[Any] = []

    def push(self, screen: Any) -> None:
        self._stack.append(screen)

    def pop(self) -> Optional[Any]:
        """Dispose the top screen and return the new top, or None at the root."""
        if len(self._stack) <= 1:
            return None
        _dispose(self._stack.pop())
        return self._stack[-1]

    def unwind(self) -> None:
        while self._stack:
            _dispose(self._stack.pop())

    @property
    def top(self) -> Optional[Any]:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self):
        return iter(list(self._stack))


def _dispose(screen: Any) -> None:
    dispose = getattr(screen, "dispose", None)
    if callable(dispose):
        dispose()


__all__ = ["NavigationStack", "ScreenStack"]
