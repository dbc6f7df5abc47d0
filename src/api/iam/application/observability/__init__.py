"""Domain-Oriented Observability for IAM application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from iam.application.observability.tenant_admin_service_probe import (
    DefaultTenantAdminServiceProbe,
    TenantAdminServiceProbe,
)

__all__ = [
    "TenantAdminServiceProbe",
    "DefaultTenantAdminServiceProbe",
]
