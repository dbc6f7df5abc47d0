"""Domain-Oriented Observability for the contacts application layer."""

from contacts.application.observability.category_service_probe import (
    CategoryServiceProbe,
    DefaultCategoryServiceProbe,
)
from contacts.application.observability.contact_service_probe import (
    ContactServiceProbe,
    DefaultContactServiceProbe,
)

__all__ = [
    "CategoryServiceProbe",
    "ContactServiceProbe",
    "DefaultCategoryServiceProbe",
    "DefaultContactServiceProbe",
]
