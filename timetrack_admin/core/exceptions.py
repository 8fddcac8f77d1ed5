class TimetrackException(Exception):
    """Base exception for the admin API"""

    pass


class ValidationException(TimetrackException):
    """Raised when request input is missing or malformed"""

    pass


class ConflictException(TimetrackException):
    """Raised when a write would violate a uniqueness or reference rule"""

    pass


class NotFoundException(TimetrackException):
    """Raised when resource not found"""

    pass
