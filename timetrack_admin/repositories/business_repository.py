"""Repository for Business model operations."""

from sqlalchemy.orm import Session
from timetrack_admin.models.business import Business


class BusinessRepository:
    """Repository for Business model operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_no_commit(self, business: Business) -> Business:
        """
        Add a business without committing.

        Flushes so the generated ID is available to rows created later
        in the same transaction. Caller is responsible for commit/rollback.
        """
        self.db.add(business)
        self.db.flush()
        return business
