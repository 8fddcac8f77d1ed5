from pydantic import BaseModel
from timetrack_admin.models.role import UserRole
from timetrack_admin.schemas.common import CamelModel


class RegisterUserData(CamelModel):
    """User part of the registration payload (required fields checked by the service)"""

    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class RegisterBusinessData(CamelModel):
    """Business part of the registration payload"""

    business_name: str | None = None
    address: str | None = None
    type_of_business: str | None = None
    employees_qty: int | None = None


class RegisterRequest(BaseModel):
    """Schema for registering a business together with its admin user"""

    user: RegisterUserData | None = None
    business: RegisterBusinessData | None = None


class RegisteredUserResponse(CamelModel):
    """Public fields of the created user (never the password hash)"""

    id: str
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole


class RegisterResponse(BaseModel):
    success: bool
    user: RegisteredUserResponse
