from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from timetrack_admin.database import get_db
from timetrack_admin.services.employee_group_service import EmployeeGroupService
from timetrack_admin.schemas.employee_group_schemas import (
    EmployeeGroupCreate,
    EmployeeGroupUpdate,
    EmployeeGroupResponse,
)

router = APIRouter()


@router.get("", response_model=list[EmployeeGroupResponse])
def list_groups(db: Session = Depends(get_db)):
    """Get all employee groups with department and member IDs"""
    service = EmployeeGroupService(db)
    return service.list_groups()


@router.post("", response_model=EmployeeGroupResponse, status_code=status.HTTP_201_CREATED)
def create_group(data: EmployeeGroupCreate, db: Session = Depends(get_db)):
    """
    Create an employee group.

    - name is required
    - departmentId and memberIds are optional
    """
    service = EmployeeGroupService(db)
    return service.create_group(data)


@router.get("/{group_id}", response_model=EmployeeGroupResponse)
def get_group(group_id: str, db: Session = Depends(get_db)):
    """Get an employee group by ID"""
    service = EmployeeGroupService(db)
    return service.get_group(group_id)


@router.put("/{group_id}", response_model=EmployeeGroupResponse)
def update_group(group_id: str, data: EmployeeGroupUpdate, db: Session = Depends(get_db)):
    """
    Replace an employee group.

    - Omitting departmentId detaches the department
    - memberIds replaces the member set; omitting it clears the members
    - Any unknown member ID rejects the whole update with 400
    - Returns 404 if group doesn't exist
    """
    service = EmployeeGroupService(db)
    return service.update_group(group_id, data)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(group_id: str, db: Session = Depends(get_db)):
    """
    Delete an employee group.

    - Member employees are not deleted
    - Returns 404 if group doesn't exist
    """
    service = EmployeeGroupService(db)
    service.delete_group(group_id)
