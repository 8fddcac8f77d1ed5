from datetime import datetime
from pydantic import BaseModel, Field
from timetrack_admin.schemas.common import CamelModel


class DepartmentCreate(CamelModel):
    """Schema for creating a new department"""

    name: str = Field(..., min_length=1, max_length=255)
    number: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=255)
    address2: str | None = Field(None, max_length=255)
    post_code: str | None = Field(None, max_length=20)
    city: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=50)
    country: str | None = Field(None, max_length=100)
    employees_count: int | None = Field(None, ge=0)
    type: str | None = Field(None, max_length=100)


class DepartmentUpdate(CamelModel):
    """Schema for updating a department (only fields sent are written)"""

    name: str | None = Field(None, min_length=1, max_length=255)
    number: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=255)
    address2: str | None = Field(None, max_length=255)
    post_code: str | None = Field(None, max_length=20)
    city: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=50)
    country: str | None = Field(None, max_length=100)
    employees_count: int | None = Field(None, ge=0)
    type: str | None = Field(None, max_length=100)


class DepartmentCounts(BaseModel):
    """Counts computed from related rows"""

    employees: int = 0


class DepartmentEmployee(CamelModel):
    """Employee as listed inside a department"""

    id: str
    user_id: str
    first_name: str
    last_name: str
    employee_no: str | None
    is_team_leader: bool


class DepartmentResponse(CamelModel):
    """Schema for department response"""

    id: str
    name: str
    number: str | None
    address: str | None
    address2: str | None
    post_code: str | None
    city: str | None
    phone: str | None
    country: str | None
    employees_count: int | None
    type: str | None
    counts: DepartmentCounts
    created_at: datetime
    updated_at: datetime


class DepartmentDetailResponse(DepartmentResponse):
    """Department with its employees"""

    employees: list[DepartmentEmployee]
