import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from timetrack_admin.core.exceptions import ConflictException, ValidationException
from timetrack_admin.core.security import hash_password
from timetrack_admin.models.business import Business
from timetrack_admin.models.role import UserRole
from timetrack_admin.models.user import User
from timetrack_admin.repositories.business_repository import BusinessRepository
from timetrack_admin.repositories.user_repository import UserRepository
from timetrack_admin.schemas.auth_schemas import RegisterRequest

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for bootstrapping a business and its first admin user"""

    def __init__(self, db: Session):
        self.db = db
        self.business_repo = BusinessRepository(db)
        self.user_repo = UserRepository(db)

    def register(self, data: RegisterRequest) -> User:
        """
        Create a business and its ADMIN user in a single transaction.

        Args:
            data: Registration payload with user and business parts

        Returns:
            The created admin user

        Raises:
            ValidationException: If email, password or business name is missing
            ConflictException: If the email is already registered, including
                when a concurrent registration wins the race at commit time
        """
        user_data = data.user
        business_data = data.business

        if (
            user_data is None
            or business_data is None
            or not user_data.email
            or not user_data.password
            or not business_data.business_name
        ):
            logger.warning("Registration rejected: missing required fields")
            raise ValidationException("Missing required fields")

        if self.user_repo.get_by_email(user_data.email):
            logger.warning("Registration rejected: email already exists")
            raise ConflictException("Email already exists")

        hashed_password = hash_password(user_data.password)

        try:
            business = self.business_repo.create_no_commit(
                Business(
                    name=business_data.business_name,
                    address=business_data.address,
                    type=business_data.type_of_business,
                    employees_count=business_data.employees_qty,
                )
            )
            user = self.user_repo.create_no_commit(
                User(
                    email=user_data.email,
                    password=hashed_password,
                    first_name=user_data.first_name,
                    last_name=user_data.last_name,
                    role=UserRole.ADMIN,
                    business_id=business.id,
                )
            )
            self.db.commit()
        except IntegrityError:
            # Unique email violated between the lookup above and the commit
            self.db.rollback()
            logger.warning("Registration rejected at commit: email already exists")
            raise ConflictException("Email already exists")

        self.db.refresh(user)
        logger.info("Registered business %s with admin user %s", business.id, user.id)
        return user
