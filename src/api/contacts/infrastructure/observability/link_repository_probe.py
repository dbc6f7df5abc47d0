"""Domain probe for category/contact link storage and tenant purges."""

from __future__ import annotations

from typing import Protocol

import structlog


class LinkRepositoryProbe(Protocol):
    """Domain probe for link repository operations."""

    def link_created(self, category_id: str, contact_id: str) -> None:
        """Record that a new edge was stored."""
        ...

    def link_already_present(self, category_id: str, contact_id: str) -> None:
        """Record that linking found the edge already stored."""
        ...

    def link_removed(self, category_id: str, contact_id: str, removed: bool) -> None:
        """Record an unlink, whether or not an edge existed."""
        ...

    def links_cleared(self, entity_id: str, entity_kind: str, count: int) -> None:
        """Record that all edges of an entity were removed."""
        ...

    def tenant_data_purged(self, tenant_id: str, rows: int) -> None:
        """Record that a tenant's contacts data was purged."""
        ...


class DefaultLinkRepositoryProbe:
    """Default implementation of LinkRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def link_created(self, category_id: str, contact_id: str) -> None:
        """Record that a new edge was stored."""
        self._logger.info(
            "category_contact_linked",
            category_id=category_id,
            contact_id=contact_id,
        )

    def link_already_present(self, category_id: str, contact_id: str) -> None:
        """Record that linking found the edge already stored."""
        self._logger.debug(
            "category_contact_link_exists",
            category_id=category_id,
            contact_id=contact_id,
        )

    def link_removed(self, category_id: str, contact_id: str, removed: bool) -> None:
        """Record an unlink, whether or not an edge existed."""
        self._logger.info(
            "category_contact_unlinked",
            category_id=category_id,
            contact_id=contact_id,
            removed=removed,
        )

    def links_cleared(self, entity_id: str, entity_kind: str, count: int) -> None:
        """Record that all edges of an entity were removed."""
        self._logger.debug(
            "category_contact_links_cleared",
            entity_id=entity_id,
            entity_kind=entity_kind,
            count=count,
        )

    def tenant_data_purged(self, tenant_id: str, rows: int) -> None:
        """Record that a tenant's contacts data was purged."""
        self._logger.info("tenant_data_purged", tenant_id=tenant_id, rows=rows)
