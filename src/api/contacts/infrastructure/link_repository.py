"""SQLAlchemy implementation of ICategoryContactLinkRepository.

Each edge write is a single statement: linking is an INSERT that ignores
primary-key conflicts and unlinking is a DELETE, so concurrent callers
applying the same change never fail and never create duplicates.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from contacts.domain.value_objects import EntityKind
from contacts.infrastructure.models import CategoryContactLinkModel
from contacts.infrastructure.observability import (
    DefaultLinkRepositoryProbe,
    LinkRepositoryProbe,
)
from contacts.ports.repositories import ICategoryContactLinkRepository

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _columns(entity_kind: EntityKind):
    # (column holding the entity id, column holding the other side)
    if entity_kind is EntityKind.CATEGORY:
        return CategoryContactLinkModel.category_id, CategoryContactLinkModel.contact_id
    return CategoryContactLinkModel.contact_id, CategoryContactLinkModel.category_id


class CategoryContactLinkRepository(ICategoryContactLinkRepository):
    """Edge storage for the category/contact many-to-many relation."""

    def __init__(
        self,
        session: AsyncSession,
        probe: LinkRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultLinkRepositoryProbe()

    async def link(self, category_id: str, contact_id: str) -> bool:
        """Insert the edge, ignoring an existing one.

        Returns:
            True if a new edge was stored
        """
        dialect = self._session.get_bind().dialect.name
        try:
            insert = _INSERT_BY_DIALECT[dialect]
        except KeyError as e:
            raise RuntimeError(f"Unsupported database dialect: {dialect}") from e

        stmt = (
            insert(CategoryContactLinkModel)
            .values(category_id=category_id, contact_id=contact_id)
            .on_conflict_do_nothing(index_elements=["category_id", "contact_id"])
        )
        result = await self._session.execute(stmt)

        created = result.rowcount > 0
        if created:
            self._probe.link_created(category_id, contact_id)
        else:
            self._probe.link_already_present(category_id, contact_id)
        return created

    async def unlink(self, category_id: str, contact_id: str) -> bool:
        """Delete the edge if present.

        Returns:
            True if an edge was removed
        """
        stmt = (
            delete(CategoryContactLinkModel)
            .where(
                CategoryContactLinkModel.category_id == category_id,
                CategoryContactLinkModel.contact_id == contact_id,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        removed = result.rowcount > 0
        self._probe.link_removed(category_id, contact_id, removed=removed)
        return removed

    async def unlink_all_for(self, entity_id: str, entity_kind: EntityKind) -> int:
        """Delete every edge touching the entity.

        Returns:
            Number of edges removed
        """
        own_column, _ = _columns(entity_kind)
        stmt = (
            delete(CategoryContactLinkModel)
            .where(own_column == entity_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        self._probe.links_cleared(entity_id, entity_kind.value, count=result.rowcount)
        return result.rowcount

    async def linked_ids(self, entity_id: str, entity_kind: EntityKind) -> set[str]:
        """Return the ids on the other side of the entity's edges."""
        own_column, other_column = _columns(entity_kind)
        result = await self._session.execute(
            select(other_column).where(own_column == entity_id)
        )
        return set(result.scalars().all())
