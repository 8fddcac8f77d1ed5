import logging
from sqlalchemy.orm import Session
from timetrack_admin.models.department import Department
from timetrack_admin.repositories.department_repository import DepartmentRepository
from timetrack_admin.schemas.department_schemas import DepartmentCreate, DepartmentUpdate
from timetrack_admin.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class DepartmentService:
    """Service for department business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = DepartmentRepository(db)

    def list_departments(self) -> list[Department]:
        """Get all departments (each exposes its computed employee count)"""
        return self.repo.get_all()

    def get_department(self, department_id: str) -> Department:
        """
        Get department with its employees.

        Raises:
            NotFoundException: If department not found
        """
        department = self.repo.get_by_id(department_id)
        if not department:
            raise NotFoundException("Department not found")
        return department

    def create_department(self, data: DepartmentCreate) -> Department:
        """Create new department"""
        name = data.name.strip()
        if not name:
            raise ValidationException("Department name is required")

        department = Department(**data.model_dump(exclude={"name"}), name=name)
        department = self.repo.create(department)
        logger.info("Created department %s", department.id)
        return department

    def update_department(self, department_id: str, data: DepartmentUpdate) -> Department:
        """
        Partially update a department.

        Only fields present in the request body are written; omitted
        fields keep their stored value.

        Raises:
            NotFoundException: If department not found
            ValidationException: If name is sent empty or null
        """
        department = self.get_department(department_id)
        changes = data.model_dump(exclude_unset=True)

        if "name" in changes:
            name = (changes["name"] or "").strip()
            if not name:
                raise ValidationException("Department name is required")
            changes["name"] = name

        for field, value in changes.items():
            setattr(department, field, value)

        department = self.repo.update(department)
        logger.info("Updated department %s (%s)", department.id, ", ".join(sorted(changes)))
        return department

    def delete_department(self, department_id: str) -> None:
        """
        Delete a department.

        Deletion is refused while employees are assigned to it. Employee
        groups scoped to the department lose their department link.

        Raises:
            NotFoundException: If department not found
            ConflictException: If employees still reference the department
        """
        department = self.get_department(department_id)

        if department.employees:
            logger.warning(
                "Refused to delete department %s with %d employees",
                department.id,
                len(department.employees),
            )
            raise ConflictException("Department has employees and cannot be deleted")

        self.repo.delete(department)
        logger.info("Deleted department %s", department_id)
