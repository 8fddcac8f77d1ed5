from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from timetrack_admin.database import get_db
from timetrack_admin.services.department_service import DepartmentService
from timetrack_admin.schemas.common import MessageResponse
from timetrack_admin.schemas.department_schemas import (
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentResponse,
    DepartmentDetailResponse,
)

router = APIRouter()


@router.get("", response_model=list[DepartmentResponse])
def list_departments(db: Session = Depends(get_db)):
    """Get all departments with their employee counts"""
    service = DepartmentService(db)
    return service.list_departments()


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
def create_department(data: DepartmentCreate, db: Session = Depends(get_db)):
    """Create a new department"""
    service = DepartmentService(db)
    return service.create_department(data)


@router.get("/{department_id}", response_model=DepartmentDetailResponse)
def get_department(department_id: str, db: Session = Depends(get_db)):
    """Get department details including its employees"""
    service = DepartmentService(db)
    return service.get_department(department_id)


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(department_id: str, data: DepartmentUpdate, db: Session = Depends(get_db)):
    """
    Update a department.

    - Only provided fields are updated (partial update)
    - Returns 404 if department doesn't exist
    """
    service = DepartmentService(db)
    return service.update_department(department_id, data)


@router.delete("/{department_id}", response_model=MessageResponse)
def delete_department(department_id: str, db: Session = Depends(get_db)):
    """
    Delete a department.

    - Returns 400 while employees are still assigned to it
    - Returns 404 if department doesn't exist
    """
    service = DepartmentService(db)
    service.delete_department(department_id)
    return {"message": "Department deleted successfully"}
