from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from timetrack_admin.database import get_db
from timetrack_admin.services.user_service import UserService
from timetrack_admin.schemas.user_schemas import UserSearchResponse

router = APIRouter()


@router.get("", response_model=list[UserSearchResponse])
def search_users(
    name: Optional[str] = Query(None, description="Case-insensitive first/last name filter"),
    db: Session = Depends(get_db),
):
    """List users ordered by first name, optionally filtered by name"""
    service = UserService(db)
    return service.search_users(name)
