"""Employee group model and its membership association table."""

from sqlalchemy import Column, String, Text, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from timetrack_admin.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from timetrack_admin.models.department import Department
    from timetrack_admin.models.employee import Employee


employee_group_members = Table(
    "employee_group_members",
    Base.metadata,
    Column(
        "employee_group_id",
        String(36),
        ForeignKey("employee_groups.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "employee_id",
        String(36),
        ForeignKey("employees.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class EmployeeGroup(Base, TimestampMixin):
    """
    Named collection of employees, optionally scoped to a department.

    Membership is always written as a whole set: updates replace the
    member list instead of merging into it.
    """

    __tablename__ = "employee_groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    department_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    department: Mapped[Optional["Department"]] = relationship(
        "Department", back_populates="employee_groups"
    )
    members: Mapped[list["Employee"]] = relationship(
        "Employee",
        secondary=employee_group_members,
        back_populates="groups",
    )

    @property
    def member_ids(self) -> list[str]:
        return [member.id for member in self.members]

    def __repr__(self) -> str:
        return f"<EmployeeGroup(id={self.id}, name='{self.name}')>"
