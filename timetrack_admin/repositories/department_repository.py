from sqlalchemy.orm import Session, selectinload
from timetrack_admin.models.department import Department


class DepartmentRepository:
    """Repository for Department model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Department]:
        """
        Get all departments ordered by name.

        Employees are loaded in one extra query so per-department
        counts do not trigger a lazy load per row.
        """
        return (
            self.db.query(Department)
            .options(selectinload(Department.employees))
            .order_by(Department.name.asc())
            .all()
        )

    def get_by_id(self, department_id: str) -> Department | None:
        """Get department by ID with its employees"""
        return (
            self.db.query(Department)
            .options(selectinload(Department.employees))
            .filter(Department.id == department_id)
            .first()
        )

    def exists(self, department_id: str) -> bool:
        return (
            self.db.query(Department.id).filter(Department.id == department_id).first()
            is not None
        )

    def create(self, department: Department) -> Department:
        """Create new department"""
        self.db.add(department)
        self.db.commit()
        self.db.refresh(department)
        return department

    def update(self, department: Department) -> Department:
        """Update existing department"""
        self.db.commit()
        self.db.refresh(department)
        return department

    def delete(self, department: Department) -> None:
        """Delete department (employee groups pointing at it are detached)"""
        self.db.delete(department)
        self.db.commit()
