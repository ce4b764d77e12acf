"""
Application error taxonomy.

Each error is an HTTPException so routes and services can raise them the
same way FastAPI's own exceptions are raised; main.py renders them into the
standard response envelope.
"""
import enum
from typing import Any, List, Optional
from fastapi import HTTPException, status
from journal_api.core.constants import ERROR_MESSAGES


class AppError(HTTPException):
    """Base class for errors with a fixed status code."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = ERROR_MESSAGES["SERVER_ERROR"]

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Any]] = None):
        super().__init__(status_code=self.status_code, detail=message or self.default_message)
        self.errors = errors

    @property
    def message(self) -> str:
        return self.detail


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input data"


class AuthFailure(str, enum.Enum):
    """Why a credential was rejected. Logged, never sent to the client."""
    MISSING = "missing"
    INVALID = "invalid"
    EXPIRED = "expired"
    ACCOUNT_NOT_FOUND = "account_not_found"


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = ERROR_MESSAGES["UNAUTHORIZED"]

    def __init__(self, reason: AuthFailure = AuthFailure.INVALID, message: Optional[str] = None):
        super().__init__(message)
        self.reason = reason
        self.headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = ERROR_MESSAGES["UNAUTHORIZED"]


class AccountInactiveError(ForbiddenError):
    default_message = ERROR_MESSAGES["ACCOUNT_INACTIVE"]


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class InternalError(AppError):
    pass
