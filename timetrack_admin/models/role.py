"""User role enum."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Roles a user can hold within their business.

    - ADMIN - created by registration, manages the whole business
    - MANAGER - manages departments and employees
    - EMPLOYEE - regular staff account linked to an Employee record
    """

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"
