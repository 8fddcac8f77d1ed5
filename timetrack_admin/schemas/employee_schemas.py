from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator
from timetrack_admin.models.employee import Sex
from timetrack_admin.schemas.common import CamelModel


class EmployeeWrite(CamelModel):
    """
    Full set of writable employee fields.

    Every field is optional at the schema level so that the service can
    report missing relations with a specific message.
    """

    user_id: Optional[str] = None
    department_id: Optional[str] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    birthday: Optional[date] = None
    sex: Optional[Sex] = None
    social_security_no: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=255)
    mobile: Optional[str] = Field(None, max_length=50)
    employee_no: Optional[str] = Field(None, max_length=50)
    bank_account: Optional[str] = Field(None, max_length=100)
    # At most 31 days x 24 hours
    hours_per_month: Optional[float] = Field(None, ge=0, le=744, allow_inf_nan=False)
    date_of_hire: Optional[date] = None
    is_team_leader: Optional[bool] = None

    @field_validator("birthday", "date_of_hire", "hours_per_month", "sex", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        # Form inputs send "" for untouched fields
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EmployeeCreate(EmployeeWrite):
    """Schema for creating a new employee"""


class EmployeeUpdate(EmployeeWrite):
    """Schema for updating an employee (all fields are rewritten)"""


class EmployeeUserSummary(CamelModel):
    email: str
    first_name: Optional[str]
    last_name: Optional[str]


class EmployeeDepartmentSummary(CamelModel):
    name: str


class EmployeeResponse(CamelModel):
    """Schema for employee response"""

    id: str
    user_id: str
    department_id: str
    first_name: str
    last_name: str
    birthday: Optional[date]
    sex: Optional[Sex]
    social_security_no: Optional[str]
    address: Optional[str]
    mobile: Optional[str]
    employee_no: Optional[str]
    bank_account: Optional[str]
    hours_per_month: Optional[float]
    date_of_hire: Optional[date]
    is_team_leader: bool
    user: Optional[EmployeeUserSummary]
    department: Optional[EmployeeDepartmentSummary]
    created_at: datetime
    updated_at: datetime
