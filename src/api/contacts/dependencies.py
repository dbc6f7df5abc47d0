"""Dependency injection for the contacts bounded context.

Composes the request database session with contacts-specific components
(repositories, services). All components of one request share a session
through FastAPI's dependency caching.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contacts.application.services import CategoryService, ContactService
from contacts.infrastructure.category_repository import CategoryRepository
from contacts.infrastructure.contact_repository import ContactRepository
from contacts.infrastructure.link_repository import CategoryContactLinkRepository
from contacts.infrastructure.tenant_data_purger import ContactsTenantDataPurger
from infrastructure.database.dependencies import get_session


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryRepository:
    """Get CategoryRepository instance."""
    return CategoryRepository(session=session)


def get_contact_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ContactRepository:
    """Get ContactRepository instance."""
    return ContactRepository(session=session)


def get_link_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryContactLinkRepository:
    """Get CategoryContactLinkRepository instance."""
    return CategoryContactLinkRepository(session=session)


def create_tenant_data_purger(session: AsyncSession) -> ContactsTenantDataPurger:
    """Build the purger IAM uses when deleting a tenant.

    Registered with IAM at application startup.
    """
    return ContactsTenantDataPurger(session=session)


def get_category_service(
    category_repo: Annotated[CategoryRepository, Depends(get_category_repository)],
    contact_repo: Annotated[ContactRepository, Depends(get_contact_repository)],
    link_repo: Annotated[
        CategoryContactLinkRepository, Depends(get_link_repository)
    ],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryService:
    """Get CategoryService instance.

    Args:
        category_repo: Category repository
        contact_repo: Contact repository for listing a category's contacts
        link_repo: Link repository for cascade on delete
        session: Database session for transaction management

    Returns:
        CategoryService instance
    """
    return CategoryService(
        category_repository=category_repo,
        contact_repository=contact_repo,
        link_repository=link_repo,
        session=session,
    )


def get_contact_service(
    contact_repo: Annotated[ContactRepository, Depends(get_contact_repository)],
    category_repo: Annotated[CategoryRepository, Depends(get_category_repository)],
    link_repo: Annotated[
        CategoryContactLinkRepository, Depends(get_link_repository)
    ],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ContactService:
    """Get ContactService instance.

    Args:
        contact_repo: Contact repository
        category_repo: Category repository for membership checks
        link_repo: Link repository for membership changes
        session: Database session for transaction management

    Returns:
        ContactService instance
    """
    return ContactService(
        contact_repository=contact_repo,
        category_repository=category_repo,
        link_repository=link_repo,
        session=session,
    )
