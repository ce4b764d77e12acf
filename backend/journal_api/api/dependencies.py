"""
Request dependencies for resolving the caller.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from journal_api.core.config import settings
from journal_api.db.session import get_db
from journal_api.models.user import User
from journal_api.services.auth_service import authenticate, require_admin


async def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """Resolve the caller from the Authorization header or the login cookie."""
    return authenticate(
        db,
        authorization=request.headers.get("Authorization"),
        cookie_token=request.cookies.get(settings.COOKIE_NAME),
    )


async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Resolve the caller and require the admin role."""
    return require_admin(current_user)
