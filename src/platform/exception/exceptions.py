from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def extra(self) -> dict[str, Any]:
        """Additional keys merged into the JSON error body."""
        return {}


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InsufficientInventoryError(DomainError):
    def __init__(self, available: int, message: str = 'Not enough tickets available') -> None:
        self.available = available
        super().__init__(message, 400)

    @property
    def extra(self) -> dict[str, Any]:
        return {'available': self.available}


class AlreadyCancelledError(DomainError):
    def __init__(self, message: str = 'Booking already cancelled') -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Unauthorized') -> None:
        super().__init__(message, 401)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__('Invalid credentials')
