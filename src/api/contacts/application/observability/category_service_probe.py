"""Protocol for category service observability.

Tenant ids are not passed explicitly: the AccessGate binds the current
tenant into the structlog context for the whole request.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class CategoryServiceProbe(Protocol):
    """Domain probe for category service operations."""

    def category_created(self, category_id: str, category_name: str) -> None:
        """Record that a category was created."""
        ...

    def category_updated(self, category_id: str) -> None:
        """Record that a category was renamed."""
        ...

    def category_deleted(self, category_id: str, unlinked: int) -> None:
        """Record that a category and its links were deleted."""
        ...

    def category_not_found(self, category_id: str) -> None:
        """Record that a category was not found in the current tenant."""
        ...


class DefaultCategoryServiceProbe:
    """Default implementation of CategoryServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def category_created(self, category_id: str, category_name: str) -> None:
        """Record that a category was created."""
        self._logger.info(
            "category_created",
            category_id=category_id,
            category_name=category_name,
        )

    def category_updated(self, category_id: str) -> None:
        """Record that a category was renamed."""
        self._logger.info("category_updated", category_id=category_id)

    def category_deleted(self, category_id: str, unlinked: int) -> None:
        """Record that a category and its links were deleted."""
        self._logger.info(
            "category_deleted",
            category_id=category_id,
            unlinked=unlinked,
        )

    def category_not_found(self, category_id: str) -> None:
        """Record that a category was not found in the current tenant."""
        self._logger.debug("category_not_found", category_id=category_id)
