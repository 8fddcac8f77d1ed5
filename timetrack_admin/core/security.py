from passlib.context import CryptContext
from timetrack_admin.config import settings

pwd_context = CryptContext(schemes=settings.password_hash_schemes_list, deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plaintext password with a per-hash random salt.

    Args:
        password: Plaintext password from the registration payload

    Returns:
        Encoded hash string (scheme, parameters, salt and digest)
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored hash"""
    return pwd_context.verify(plain_password, hashed_password)
