"""Domain-Oriented Observability for IAM infrastructure.

Probes for repository and authentication operations following
Domain-Oriented Observability patterns.
"""

from iam.infrastructure.observability.repository_probe import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from iam.infrastructure.observability.principal_resolver_probe import (
    DefaultPrincipalResolverProbe,
    PrincipalResolverProbe,
)

__all__ = [
    "DefaultPrincipalResolverProbe",
    "DefaultTenantRepositoryProbe",
    "PrincipalResolverProbe",
    "TenantRepositoryProbe",
]
