from sqlalchemy import or_
from sqlalchemy.orm import Session
from timetrack_admin.models.user import User


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> User | None:
        """Get user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        """Get user by email (emails are unique system-wide)"""
        return self.db.query(User).filter(User.email == email).first()

    def create_no_commit(self, user: User) -> User:
        """Add user without committing (for atomic ops)"""
        self.db.add(user)
        self.db.flush()
        return user

    def search(self, name_query: str | None = None) -> list[User]:
        """
        List users ordered by first name.

        Args:
            name_query: Optional case-insensitive substring matched against
                first_name OR last_name

        Returns:
            Matching users (empty list when nothing matches)
        """
        query = self.db.query(User)

        if name_query:
            # autoescape: % and _ in the query match literally
            query = query.filter(
                or_(
                    User.first_name.icontains(name_query, autoescape=True),
                    User.last_name.icontains(name_query, autoescape=True),
                )
            )

        return query.order_by(User.first_name.asc()).all()
