"""SQLAlchemy ORM model for the categories table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class CategoryModel(Base, TimestampMixin):
    """ORM model for categories table."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    category_name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<CategoryModel(id={self.id}, tenant_id={self.tenant_id})>"
