"""SQLAlchemy ORM model for the category/contact link table.

The composite primary key makes each edge unique, which is what lets
link creation be an insert that ignores conflicts.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base


class CategoryContactLinkModel(Base):
    """ORM model for category_contacts table."""

    __tablename__ = "category_contacts"

    category_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )
    contact_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("contacts.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<CategoryContactLinkModel(category_id={self.category_id}, "
            f"contact_id={self.contact_id})>"
        )
