import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from timetrack_admin.models.employee import Employee
from timetrack_admin.repositories.employee_repository import EmployeeRepository
from timetrack_admin.repositories.user_repository import UserRepository
from timetrack_admin.repositories.department_repository import DepartmentRepository
from timetrack_admin.schemas.employee_schemas import EmployeeCreate, EmployeeUpdate, EmployeeWrite
from timetrack_admin.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service layer for employee business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.employee_repo = EmployeeRepository(db)
        self.user_repo = UserRepository(db)
        self.department_repo = DepartmentRepository(db)

    def list_employees(self) -> list[Employee]:
        """Get all employees with user and department summaries"""
        return self.employee_repo.get_all()

    def get_employee(self, employee_id: str) -> Employee:
        """
        Get employee by ID.

        Raises:
            NotFoundException: If employee doesn't exist
        """
        employee = self.employee_repo.get_by_id(employee_id)
        if not employee:
            raise NotFoundException("Employee not found")
        return employee

    def create_employee(self, data: EmployeeCreate) -> Employee:
        """
        Create a new employee linked to a user and a department.

        Args:
            data: Employee fields including user_id and department_id

        Returns:
            Created employee

        Raises:
            ValidationException: If user_id/department_id are missing or
                reference rows that don't exist, or names are missing
            ConflictException: If the user already has an employee record
        """
        self._validate(data)

        employee = Employee()
        self._apply(employee, data)

        try:
            employee = self.employee_repo.create(employee)
        except IntegrityError:
            self.db.rollback()
            logger.warning("Employee write rejected at commit by a database constraint")
            raise ConflictException("Employee conflicts with existing data")

        logger.info("Created employee %s for user %s", employee.id, employee.user_id)
        return employee

    def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Employee:
        """
        Rewrite every field of an existing employee.

        Args:
            employee_id: Employee ID
            data: Complete employee fields (omitted optional fields are cleared)

        Returns:
            Updated employee

        Raises:
            NotFoundException: If employee doesn't exist
            ValidationException: Same rules as create
            ConflictException: If the new user already has another employee record
        """
        employee = self.get_employee(employee_id)
        self._validate(data, employee_id=employee.id)

        self._apply(employee, data)

        try:
            employee = self.employee_repo.update(employee)
        except IntegrityError:
            self.db.rollback()
            logger.warning("Employee write rejected at commit by a database constraint")
            raise ConflictException("Employee conflicts with existing data")

        logger.info("Updated employee %s", employee.id)
        return employee

    def delete_employee(self, employee_id: str) -> None:
        """
        Delete employee (removes it from every group it belongs to).

        Raises:
            NotFoundException: If employee doesn't exist
        """
        employee = self.get_employee(employee_id)
        self.employee_repo.delete(employee)
        logger.info("Deleted employee %s", employee_id)

    def _validate(self, data: EmployeeWrite, employee_id: str | None = None) -> None:
        if not data.user_id or not data.department_id:
            logger.warning("Employee write rejected: missing user or department")
            raise ValidationException("User ID and Department ID are required")

        if not data.first_name or not data.last_name:
            raise ValidationException("First name and last name are required")

        if not self.user_repo.get_by_id(data.user_id):
            raise ValidationException(f"User {data.user_id} not found")

        if not self.department_repo.exists(data.department_id):
            raise ValidationException(f"Department {data.department_id} not found")

        linked = self.employee_repo.get_by_user_id(data.user_id)
        if linked and linked.id != employee_id:
            logger.warning("Employee write rejected: user %s already linked", data.user_id)
            raise ConflictException("User is already linked to an employee")

    @staticmethod
    def _apply(employee: Employee, data: EmployeeWrite) -> None:
        employee.user_id = data.user_id
        employee.department_id = data.department_id
        employee.first_name = data.first_name
        employee.last_name = data.last_name
        employee.birthday = data.birthday
        employee.sex = data.sex
        employee.social_security_no = data.social_security_no
        employee.address = data.address
        employee.mobile = data.mobile
        employee.employee_no = data.employee_no
        employee.bank_account = data.bank_account
        employee.hours_per_month = data.hours_per_month
        employee.date_of_hire = data.date_of_hire
        employee.is_team_leader = bool(data.is_team_leader)
