from datetime import date
from enum import Enum as PyEnum
from sqlalchemy import String, Numeric, ForeignKey, Date, Boolean, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from timetrack_admin.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from timetrack_admin.models.user import User
    from timetrack_admin.models.department import Department
    from timetrack_admin.models.employee_group import EmployeeGroup


class Sex(str, PyEnum):
    """Sex enumeration"""

    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Employee(Base, TimestampMixin):
    """
    Work record of a user inside one department.

    One-to-one with User (user_id is unique), many-to-one with Department,
    many-to-many with EmployeeGroup.
    """

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    department_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)
    sex: Mapped[Sex | None] = mapped_column(Enum(Sex, native_enum=False), nullable=True)
    social_security_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mobile: Mapped[str | None] = mapped_column(String(50), nullable=True)
    employee_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    bank_account: Mapped[str | None] = mapped_column(String(100), nullable=True)
    hours_per_month: Mapped[float | None] = mapped_column(
        Numeric(precision=6, scale=2), nullable=True
    )
    date_of_hire: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_team_leader: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="employee")
    department: Mapped["Department"] = relationship("Department", back_populates="employees")
    groups: Mapped[list["EmployeeGroup"]] = relationship(
        "EmployeeGroup",
        secondary="employee_group_members",
        back_populates="members",
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, user_id={self.user_id}, department_id={self.department_id})>"
