"""
Error taxonomy shared by the services and the request gateway.

Services raise these; the gateway turns them into ``{"msg": ...}`` responses
using ``status_code``.
"""

from fastapi import status


class ReminderAppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ReminderAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation Error"


class ConflictError(ReminderAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class AuthError(ReminderAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token is not valid"


class InvalidCredentialsError(AuthError):
    # Same message for unknown email and wrong password.
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class ForbiddenError(ReminderAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "User not authorized"


class NotFoundError(ReminderAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(ReminderAppError):
    pass
