"""
Display constraints: how many list rows the current surface may show.

The platform reports a content limit per list kind. The limit is read once
when a screen is built and treated as constant for that screen.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol
import logging

from waymark.core.config import DEFAULT_LIST_LIMIT

logger = logging.getLogger(__name__)


class ListKind(str, Enum):
    LIST = "list"
    GRID = "grid"
    PLACE_LIST = "place_list"
    ROUTE_LIST = "route_list"


class ConstraintService(Protocol):
    """Platform service that reports content limits."""

    def content_limit(self, list_kind: ListKind) -> int:
        ...


class StaticConstraintService:
    """Constraint service with fixed per-kind limits (e.g. from config)."""

    def __init__(self, limits: Optional[dict] = None, *, default: Optional[int] = None) -> None:
        self._limits = {ListKind(k): int(v) for k, v in (limits or {}).items()}
        self._default = default

    def content_limit(self, list_kind: ListKind) -> int:
        if list_kind in self._limits:
            return self._limits[list_kind]
        if self._default is None:
            raise LookupError(f"No content limit for {list_kind.value}")
        return self._default


class ConstraintProvider:
    """
    Resolves the maximum number of list rows for one screen.

    A missing service, a failing service, or a non-positive answer all fall
    back to `fallback`.
    """

    def __init__(
        self,
        service: Optional[ConstraintService] = None,
        *,
        fallback: int = DEFAULT_LIST_LIMIT,
        list_kind: ListKind = ListKind.LIST,
    ) -> None:
        if fallback <= 0:
            raise ValueError(f"fallback list limit must be positive (got {fallback})")
        self._max_items = self._resolve(service, fallback, list_kind)

    @staticmethod
    def _resolve(service: Optional[ConstraintService], fallback: int, list_kind: ListKind) -> int:
        if service is None:
            return fallback
        try:
            limit = service.content_limit(list_kind)
        except Exception as e:
            logger.warning("Content limit unavailable for %s (%s); using %d", list_kind.value, e, fallback)
            return fallback
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            logger.warning("Ignoring invalid content limit %r for %s; using %d", limit, list_kind.value, fallback)
            return fallback
        return limit

    def max_list_items(self) -> int:
        return self._max_items


__all__ = ["ListKind", "ConstraintService", "StaticConstraintService", "ConstraintProvider"]
