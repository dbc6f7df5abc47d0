"""Domain probes for category and contact repository operations."""

from __future__ import annotations

from typing import Protocol

import structlog


class CategoryRepositoryProbe(Protocol):
    """Domain probe for category repository operations."""

    def category_saved(self, category_id: str, tenant_id: str) -> None: ...

    def categories_listed(self, tenant_id: str, count: int, total: int) -> None: ...

    def category_deleted(self, category_id: str, tenant_id: str) -> None: ...


class ContactRepositoryProbe(Protocol):
    """Domain probe for contact repository operations."""

    def contact_saved(self, contact_id: str, tenant_id: str) -> None: ...

    def contacts_listed(self, tenant_id: str, count: int, total: int) -> None: ...

    def contact_deleted(self, contact_id: str, tenant_id: str) -> None: ...


class DefaultCategoryRepositoryProbe:
    """Default implementation of CategoryRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def category_saved(self, category_id: str, tenant_id: str) -> None:
        self._logger.debug(
            "category_saved", category_id=category_id, tenant_id=tenant_id
        )

    def categories_listed(self, tenant_id: str, count: int, total: int) -> None:
        self._logger.debug(
            "categories_listed", tenant_id=tenant_id, count=count, total=total
        )

    def category_deleted(self, category_id: str, tenant_id: str) -> None:
        self._logger.debug(
            "category_deleted", category_id=category_id, tenant_id=tenant_id
        )


class DefaultContactRepositoryProbe:
    """Default implementation of ContactRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def contact_saved(self, contact_id: str, tenant_id: str) -> None:
        self._logger.debug("contact_saved", contact_id=contact_id, tenant_id=tenant_id)

    def contacts_listed(self, tenant_id: str, count: int, total: int) -> None:
        self._logger.debug(
            "contacts_listed", tenant_id=tenant_id, count=count, total=total
        )

    def contact_deleted(self, contact_id: str, tenant_id: str) -> None:
        self._logger.debug(
            "contact_deleted", contact_id=contact_id, tenant_id=tenant_id
        )
