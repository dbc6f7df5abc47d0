"""Application services for IAM bounded context.

Application services orchestrate domain aggregates, repositories, and
other infrastructure to fulfill use cases. They are the "front door" to
the IAM context.
"""

from iam.application.services.tenant_admin_service import TenantAdminService
from iam.application.services.tenant_bootstrap_service import TenantBootstrapService

__all__ = [
    "TenantAdminService",
    "TenantBootstrapService",
]
