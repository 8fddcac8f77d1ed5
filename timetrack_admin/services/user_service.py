from sqlalchemy.orm import Session
from timetrack_admin.models.user import User
from timetrack_admin.repositories.user_repository import UserRepository


class UserService:
    """Service for user lookup"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)

    def search_users(self, name: str | None = None) -> list[User]:
        """Users whose first or last name contains name (all users when blank)"""
        name_query = name.strip() if name else None
        return self.repo.search(name_query or None)
