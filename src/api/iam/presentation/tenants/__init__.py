"""Tenant administration routes and models."""

from iam.presentation.tenants.routes import router

__all__ = ["router"]
