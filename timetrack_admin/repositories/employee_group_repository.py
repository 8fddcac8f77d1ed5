"""Repository for EmployeeGroup model operations."""

from sqlalchemy.orm import Session, joinedload, selectinload
from timetrack_admin.models.employee_group import EmployeeGroup


class EmployeeGroupRepository:
    """Repository for EmployeeGroup model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[EmployeeGroup]:
        """
        Get all employee groups.

        Returns:
            Groups ordered by name, with department and members loaded
        """
        return (
            self.db.query(EmployeeGroup)
            .options(joinedload(EmployeeGroup.department), selectinload(EmployeeGroup.members))
            .order_by(EmployeeGroup.name.asc())
            .all()
        )

    def get_by_id(self, group_id: str) -> EmployeeGroup | None:
        """
        Get employee group by ID.

        Args:
            group_id: EmployeeGroup ID

        Returns:
            EmployeeGroup object or None if not found
        """
        return (
            self.db.query(EmployeeGroup)
            .options(joinedload(EmployeeGroup.department), selectinload(EmployeeGroup.members))
            .filter(EmployeeGroup.id == group_id)
            .first()
        )

    def create(self, group: EmployeeGroup) -> EmployeeGroup:
        """
        Create a new employee group.

        Args:
            group: EmployeeGroup object to create (members already attached)

        Returns:
            Created EmployeeGroup object with ID populated
        """
        self.db.add(group)
        self.db.commit()
        self.db.refresh(group)
        return group

    def update(self, group: EmployeeGroup) -> EmployeeGroup:
        """
        Update an employee group.

        Args:
            group: EmployeeGroup object with updated fields and member set

        Returns:
            Updated EmployeeGroup object
        """
        self.db.commit()
        self.db.refresh(group)
        return group

    def delete(self, group: EmployeeGroup) -> None:
        """
        Delete an employee group and its membership rows.

        Args:
            group: EmployeeGroup object to delete
        """
        self.db.delete(group)
        self.db.commit()
