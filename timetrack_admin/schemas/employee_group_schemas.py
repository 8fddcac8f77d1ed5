from datetime import datetime
from pydantic import Field
from timetrack_admin.schemas.common import CamelModel


class EmployeeGroupCreate(CamelModel):
    """Schema for creating an employee group"""

    name: str = Field(..., max_length=255)
    description: str | None = None
    department_id: str | None = None
    member_ids: list[str] | None = None


class EmployeeGroupUpdate(CamelModel):
    """
    Schema for replacing an employee group.

    Omitted department_id detaches the department and omitted member_ids
    clears the membership.
    """

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    department_id: str | None = None
    member_ids: list[str] | None = None


class EmployeeGroupDepartment(CamelModel):
    id: str
    name: str


class EmployeeGroupResponse(CamelModel):
    """Schema for employee group response"""

    id: str
    name: str
    description: str | None
    department_id: str | None
    department: EmployeeGroupDepartment | None
    member_ids: list[str]
    created_at: datetime
    updated_at: datetime
