"""
Identity guard: resolves the calling account from a bearer credential.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session, defer
from journal_api.core.exceptions import (
    AccountInactiveError, AuthFailure, ForbiddenError, UnauthenticatedError
)
from journal_api.core.constants import ERROR_MESSAGES
from journal_api.core.security import decode_access_token
from journal_api.models.user import User

logger = logging.getLogger(__name__)


def extract_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    """
    Pick the credential.

    A present Authorization header is authoritative: it must be
    "Bearer <token>", otherwise the request is rejected without looking at
    the cookie. The cookie is only consulted when no header was sent.
    """
    if authorization is not None:
        scheme, _, credentials = authorization.strip().partition(" ")
        if scheme.lower() != "bearer" or not credentials.strip():
            raise UnauthenticatedError(AuthFailure.INVALID)
        return credentials.strip()
    return cookie_token or None


def authenticate(
    db: Session,
    authorization: Optional[str] = None,
    cookie_token: Optional[str] = None
) -> User:
    """
    Resolve the caller's account.

    Missing, invalid and expired credentials, and tokens for accounts that no
    longer exist, all raise UnauthenticatedError with the same client-facing
    message; only the logged reason differs. Inactive accounts raise
    AccountInactiveError.
    """
    try:
        token = extract_token(authorization, cookie_token)
        if not token:
            raise UnauthenticatedError(AuthFailure.MISSING)

        payload = decode_access_token(token)
        try:
            user_id = int(payload.get("user_id"))
        except (TypeError, ValueError):
            raise UnauthenticatedError(AuthFailure.INVALID)

        user = db.query(User).options(defer(User.hashed_password)).filter(User.id == user_id).first()
        if user is None:
            raise UnauthenticatedError(AuthFailure.ACCOUNT_NOT_FOUND)
    except UnauthenticatedError as e:
        logger.info(f"Rejected credential: {e.reason.value}")
        raise

    if not user.is_active:
        logger.info(f"Rejected inactive account {user.id}")
        raise AccountInactiveError()

    return user


def require_admin(user: User) -> User:
    """Admin guard; runs after authenticate."""
    if not user.is_admin:
        logger.warning(f"User {user.id} attempted an admin operation")
        raise ForbiddenError(ERROR_MESSAGES["ADMIN_REQUIRED"])
    return user
