from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from timetrack_admin.database import get_db
from timetrack_admin.services.employee_service import EmployeeService
from timetrack_admin.schemas.common import MessageResponse
from timetrack_admin.schemas.employee_schemas import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
)

router = APIRouter()


@router.get("", response_model=list[EmployeeResponse])
def list_employees(db: Session = Depends(get_db)):
    """Get all employees with user and department summaries"""
    service = EmployeeService(db)
    return service.list_employees()


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(data: EmployeeCreate, db: Session = Depends(get_db)):
    """
    Create a new employee.

    - Requires userId and departmentId of existing rows
    - isTeamLeader defaults to false
    - A user can be linked to only one employee
    """
    service = EmployeeService(db)
    return service.create_employee(data)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    """
    Get a specific employee by ID.

    - Returns 404 if employee doesn't exist
    """
    service = EmployeeService(db)
    return service.get_employee(employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(employee_id: str, data: EmployeeUpdate, db: Session = Depends(get_db)):
    """
    Update an employee.

    - Every field is rewritten; omitted optional fields are cleared
    - Returns 404 if employee doesn't exist
    """
    service = EmployeeService(db)
    return service.update_employee(employee_id, data)


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(employee_id: str, db: Session = Depends(get_db)):
    """
    Delete an employee.

    - Returns 404 if employee doesn't exist
    """
    service = EmployeeService(db)
    service.delete_employee(employee_id)
    return {"message": "Employee deleted successfully"}
