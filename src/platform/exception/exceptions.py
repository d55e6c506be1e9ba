from typing import Literal


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    code: str = 'ERROR'

    def __init__(self, message: str, status_code: int, code: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        if code:
            self.code = code
        super().__init__(message)


class ValidationError(CustomBaseError):
    code = 'VALIDATION_ERROR'

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class MissingFieldsError(ValidationError):
    code = 'MISSING_FIELDS'

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__('Missing required fields')


class DuplicateUserError(CustomBaseError):
    code = 'DUPLICATE_USER'

    def __init__(self, message: str = 'User already exists with this email') -> None:
        super().__init__(message, 400)


class InvalidCredentialsError(CustomBaseError):
    """Same error for unknown email and wrong password."""

    code = 'INVALID_CREDENTIALS'

    def __init__(self) -> None:
        super().__init__('Invalid email or password', 401)


class TokenError(CustomBaseError):
    code = 'INVALID_TOKEN'

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class InvalidTokenError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    code = 'EXPIRED_TOKEN'


UnauthorizedReason = Literal['unauthorized', 'token_error', 'invalid_user']


class UnauthorizedError(CustomBaseError):
    code = 'UNAUTHORIZED'

    def __init__(self, reason: UnauthorizedReason) -> None:
        self.reason = reason
        super().__init__('Unauthorized', 401)


class PersistenceError(CustomBaseError):
    """Store failure. The message is what the client sees; detail stays in the logs."""

    code = 'PERSISTENCE_ERROR'

    def __init__(self, detail: str, message: str = 'Server error. Please try again.') -> None:
        self.detail = detail
        super().__init__(message, 500)


class NotificationError(CustomBaseError):
    code = 'NOTIFICATION_ERROR'

    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
