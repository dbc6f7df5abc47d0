"""Contacts presentation layer - aggregate-based organization.

Tenant-scoped routes; the AccessGate binds the caller's tenant before any
handler runs, and only USER principals may reach them.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from contacts.presentation import categories, contacts
from infrastructure.web import require_role
from shared_kernel.auth.principal import Role

router = APIRouter(dependencies=[Depends(require_role(Role.USER))])

router.include_router(categories.router)
router.include_router(contacts.router)

__all__ = ["router"]
