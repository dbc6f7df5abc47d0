"""SQLAlchemy ORM models for IAM bounded context."""

from iam.infrastructure.models.tenant import TenantModel

__all__ = ["TenantModel"]
