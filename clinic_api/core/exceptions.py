"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class UnauthenticatedException(AppException):
    """No credentials were supplied."""

    def __init__(self, message: str = "Access denied"):
        """Initialize with 401 status code."""
        super().__init__(message, status_code=401)


class InvalidTokenException(AppException):
    """Credentials were supplied but failed verification."""

    def __init__(self, message: str = "Invalid token"):
        """Initialize with 403 status code."""
        super().__init__(message, status_code=403)


class ForbiddenException(AppException):
    """Forbidden access exception."""

    def __init__(self, message: str = "Forbidden: You do not have access to this resource"):
        """Initialize with 403 status code."""
        super().__init__(message, status_code=403)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str = "Bad request"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class AppointmentNotFoundException(BadRequestException):
    """Referenced appointment does not exist.

    The appointment API reports this as a 400, not a 404.
    """

    def __init__(self, message: str = "Appointment not found"):
        """Initialize with 400 status code."""
        super().__init__(message)

