# server/core/errors.py

from fastapi import status


class AppError(Exception):
    """
    Base class for errors that map onto an HTTP response.
    The message is returned to the caller as the response ``detail``.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    # duplicate resources share the 400 used for validation failures
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidTokenError(AuthError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(AuthError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class UnauthorizedError(AuthError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
