"""Business model, the tenant that owns users."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from timetrack_admin.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from timetrack_admin.models.user import User


class Business(Base, TimestampMixin):
    """
    Tenant organization.

    Created exactly once per registration, in the same database
    transaction as its first ADMIN user. Never deleted through the API.
    """

    __tablename__ = "businesses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    employees_count: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    users: Mapped[list["User"]] = relationship("User", back_populates="business")

    def __repr__(self) -> str:
        return f"<Business(id={self.id}, name='{self.name}')>"
