"""Domain probes for contacts infrastructure."""

from contacts.infrastructure.observability.link_repository_probe import (
    DefaultLinkRepositoryProbe,
    LinkRepositoryProbe,
)
from contacts.infrastructure.observability.repository_probe import (
    CategoryRepositoryProbe,
    ContactRepositoryProbe,
    DefaultCategoryRepositoryProbe,
    DefaultContactRepositoryProbe,
)

__all__ = [
    "CategoryRepositoryProbe",
    "ContactRepositoryProbe",
    "DefaultCategoryRepositoryProbe",
    "DefaultContactRepositoryProbe",
    "DefaultLinkRepositoryProbe",
    "LinkRepositoryProbe",
]
