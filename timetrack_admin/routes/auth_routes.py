from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from timetrack_admin.database import get_db
from timetrack_admin.services.registration_service import RegistrationService
from timetrack_admin.schemas.auth_schemas import (
    RegisterRequest,
    RegisterResponse,
    RegisteredUserResponse,
)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a business and its first admin user.

    - Business and user are created atomically (both or neither)
    - The user is always created with role ADMIN
    - Returns 400 if email, password or businessName is missing
    - Returns 400 if the email is already registered
    """
    service = RegistrationService(db)
    user = service.register(data)
    return RegisterResponse(success=True, user=RegisteredUserResponse.model_validate(user))
