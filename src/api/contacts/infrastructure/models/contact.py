"""SQLAlchemy ORM model for the contacts table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ContactModel(Base, TimestampMixin):
    """ORM model for contacts table."""

    __tablename__ = "contacts"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    contact_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ContactModel(id={self.id}, tenant_id={self.tenant_id})>"
