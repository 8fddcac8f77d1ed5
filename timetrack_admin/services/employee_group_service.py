import logging
from sqlalchemy.orm import Session

from timetrack_admin.models.department import Department
from timetrack_admin.models.employee import Employee
from timetrack_admin.models.employee_group import EmployeeGroup
from timetrack_admin.repositories.employee_group_repository import EmployeeGroupRepository
from timetrack_admin.repositories.employee_repository import EmployeeRepository
from timetrack_admin.repositories.department_repository import DepartmentRepository
from timetrack_admin.schemas.employee_group_schemas import (
    EmployeeGroupCreate,
    EmployeeGroupUpdate,
)
from timetrack_admin.core.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)


class EmployeeGroupService:
    """Service layer for employee group management"""

    def __init__(self, db: Session):
        self.db = db
        self.group_repo = EmployeeGroupRepository(db)
        self.employee_repo = EmployeeRepository(db)
        self.department_repo = DepartmentRepository(db)

    def list_groups(self) -> list[EmployeeGroup]:
        """Get all groups with department and member IDs"""
        return self.group_repo.get_all()

    def get_group(self, group_id: str) -> EmployeeGroup:
        """
        Get a group by ID.

        Raises:
            NotFoundException: If group not found
        """
        group = self.group_repo.get_by_id(group_id)
        if not group:
            raise NotFoundException("Employee group not found")
        return group

    def create_group(self, data: EmployeeGroupCreate) -> EmployeeGroup:
        """
        Create a group.

        Omitted department_id leaves the group unscoped and omitted or
        empty member_ids creates it without members.

        Raises:
            ValidationException: If the name is blank, or the department or
                any member ID doesn't exist
        """
        name = self._clean_name(data.name)
        department = self._resolve_department(data.department_id)
        members = self._resolve_members(data.member_ids)

        group = EmployeeGroup(
            name=name,
            description=data.description or None,
            department=department,
            members=members,
        )
        group = self.group_repo.create(group)
        logger.info("Created employee group %s with %d members", group.id, len(members))
        return group

    def update_group(self, group_id: str, data: EmployeeGroupUpdate) -> EmployeeGroup:
        """
        Replace a group's fields, department link and member set.

        All input is validated before anything is changed, so a rejected
        update leaves the stored group untouched.

        - department_id present: connect; absent: disconnect
        - member_ids present: replace the member set; absent: clear it

        Raises:
            NotFoundException: If group not found
            ValidationException: If the name is blank, or the department or
                any member ID doesn't exist
        """
        group = self.get_group(group_id)

        name = self._clean_name(data.name)
        department = self._resolve_department(data.department_id)
        members = self._resolve_members(data.member_ids)

        group.name = name
        group.description = data.description or None
        group.department = department
        group.members = members

        group = self.group_repo.update(group)
        logger.info("Updated employee group %s with %d members", group.id, len(members))
        return group

    def delete_group(self, group_id: str) -> None:
        """
        Delete a group (its employees are kept).

        Raises:
            NotFoundException: If group not found
        """
        group = self.get_group(group_id)
        self.group_repo.delete(group)
        logger.info("Deleted employee group %s", group_id)

    @staticmethod
    def _clean_name(name: str | None) -> str:
        cleaned = name.strip() if name else ""
        if not cleaned:
            logger.warning("Employee group rejected: blank name")
            raise ValidationException("Name is required and must be a non-empty string")
        return cleaned

    def _resolve_department(self, department_id: str | None) -> Department | None:
        if not department_id:
            return None

        department = self.department_repo.get_by_id(department_id)
        if not department:
            logger.warning("Employee group rejected: department %s not found", department_id)
            raise ValidationException("Invalid department ID")
        return department

    def _resolve_members(self, member_ids: list[str] | None) -> list[Employee]:
        if not member_ids:
            return []

        requested = set(member_ids)
        employees = self.employee_repo.get_by_ids(list(requested))
        if len(employees) != len(requested):
            missing = requested - {employee.id for employee in employees}
            logger.warning("Employee group rejected: unknown employees %s", sorted(missing))
            raise ValidationException("One or more invalid employee IDs")
        return employees
