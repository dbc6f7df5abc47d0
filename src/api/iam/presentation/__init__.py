"""IAM presentation layer - aggregate-based organization.

Everything here is tenant administration and lives under ``/admin``.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation import tenants

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
)

router.include_router(tenants.router)

__all__ = ["router"]
