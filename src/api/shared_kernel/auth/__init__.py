"""Authentication shared kernel module.

Defines the authenticated principal handed to the AccessGate and the port
through which the request pipeline resolves it.
"""

from shared_kernel.auth.principal import ANONYMOUS_PRINCIPAL, Principal, Role
from shared_kernel.auth.protocols import PrincipalResolver

__all__ = [
    "ANONYMOUS_PRINCIPAL",
    "Principal",
    "PrincipalResolver",
    "Role",
]
