"""Application services for the contacts bounded context.

Every operation runs against the tenant bound to the current request by
the AccessGate; callers never pass a tenant id.
"""

from contacts.application.services.category_service import CategoryService
from contacts.application.services.contact_service import ContactService

__all__ = [
    "CategoryService",
    "ContactService",
]
