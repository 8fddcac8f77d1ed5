from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from timetrack_admin.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from timetrack_admin.models.employee import Employee
    from timetrack_admin.models.employee_group import EmployeeGroup


class Department(Base, TimestampMixin):
    """
    Organizational unit that employees work in.

    employees_count is the advisory headcount entered by an admin;
    counts["employees"] is the number of Employee rows actually assigned.
    """

    __tablename__ = "departments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    post_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    employees_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Relationships
    # No delete cascade: a department with employees cannot be deleted
    employees: Mapped[list["Employee"]] = relationship("Employee", back_populates="department")
    # Groups are detached (department_id set to NULL) when the department goes away
    employee_groups: Mapped[list["EmployeeGroup"]] = relationship(
        "EmployeeGroup", back_populates="department"
    )

    @property
    def counts(self) -> dict[str, int]:
        return {"employees": len(self.employees)}

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name='{self.name}')>"
