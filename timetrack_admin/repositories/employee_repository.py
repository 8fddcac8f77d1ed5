from sqlalchemy.orm import Session, joinedload
from timetrack_admin.models.employee import Employee


class EmployeeRepository:
    """Repository for Employee data access"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Employee]:
        """Get all employees with their user and department joined"""
        return (
            self.db.query(Employee)
            .options(joinedload(Employee.user), joinedload(Employee.department))
            .order_by(Employee.last_name.asc(), Employee.first_name.asc())
            .all()
        )

    def get_by_id(self, employee_id: str) -> Employee | None:
        """Get employee by ID"""
        return (
            self.db.query(Employee)
            .options(joinedload(Employee.user), joinedload(Employee.department))
            .filter(Employee.id == employee_id)
            .first()
        )

    def get_by_user_id(self, user_id: str) -> Employee | None:
        """Get the employee record linked to a user, if any"""
        return self.db.query(Employee).filter(Employee.user_id == user_id).first()

    def get_by_ids(self, employee_ids: list[str]) -> list[Employee]:
        """Get every employee whose ID is in employee_ids (unknown IDs are skipped)"""
        if not employee_ids:
            return []
        return self.db.query(Employee).filter(Employee.id.in_(employee_ids)).all()

    def create(self, employee: Employee) -> Employee:
        """Create a new employee"""
        self.db.add(employee)
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def update(self, employee: Employee) -> Employee:
        """Update existing employee"""
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def delete(self, employee: Employee) -> None:
        """Delete employee (group memberships are removed with it)"""
        self.db.delete(employee)
        self.db.commit()
