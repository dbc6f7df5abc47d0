"""Protocol for contact service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class ContactServiceProbe(Protocol):
    """Domain probe for contact service operations."""

    def contact_created(self, contact_id: str) -> None:
        """Record that a contact was created."""
        ...

    def contact_updated(self, contact_id: str) -> None:
        """Record that a contact was updated."""
        ...

    def contact_deleted(self, contact_id: str, unlinked: int) -> None:
        """Record that a contact and its links were deleted."""
        ...

    def contact_not_found(self, contact_id: str) -> None:
        """Record that a contact was not found in the current tenant."""
        ...

    def category_assigned(self, contact_id: str, category_id: str) -> None:
        """Record that a contact was placed in a category."""
        ...

    def category_removed(self, contact_id: str, category_id: str) -> None:
        """Record that a contact was taken out of a category."""
        ...


class DefaultContactServiceProbe:
    """Default implementation of ContactServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def contact_created(self, contact_id: str) -> None:
        """Record that a contact was created."""
        self._logger.info("contact_created", contact_id=contact_id)

    def contact_updated(self, contact_id: str) -> None:
        """Record that a contact was updated."""
        self._logger.info("contact_updated", contact_id=contact_id)

    def contact_deleted(self, contact_id: str, unlinked: int) -> None:
        """Record that a contact and its links were deleted."""
        self._logger.info("contact_deleted", contact_id=contact_id, unlinked=unlinked)

    def contact_not_found(self, contact_id: str) -> None:
        """Record that a contact was not found in the current tenant."""
        self._logger.debug("contact_not_found", contact_id=contact_id)

    def category_assigned(self, contact_id: str, category_id: str) -> None:
        """Record that a contact was placed in a category."""
        self._logger.info(
            "contact_category_assigned",
            contact_id=contact_id,
            category_id=category_id,
        )

    def category_removed(self, contact_id: str, category_id: str) -> None:
        """Record that a contact was taken out of a category."""
        self._logger.info(
            "contact_category_removed",
            contact_id=contact_id,
            category_id=category_id,
        )
