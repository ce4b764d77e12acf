"""
Authentication routes for registration, login, and logout.
"""
import logging
from urllib.parse import quote_plus
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from journal_api.core.config import settings
from journal_api.core.constants import ERROR_MESSAGES, SUCCESS_MESSAGES
from journal_api.core.exceptions import (
    AccountInactiveError, AuthFailure, ConflictError, UnauthenticatedError
)
from journal_api.core.security import verify_password, get_password_hash, create_access_token
from journal_api.core.utils import format_response
from journal_api.db.session import get_db
from journal_api.models.user import User
from journal_api.schemas.common import ApiResponse, MessageResponse
from journal_api.schemas.user import AuthPayload, UserCreate, UserLogin
from journal_api.api.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def issue_token(user: User) -> str:
    return create_access_token(data={"sub": user.username, "user_id": user.id})


def default_avatar(first_name: str, last_name: str = None) -> str:
    name = f"{first_name} {last_name}" if last_name else first_name
    return f"https://ui-avatars.com/api/?name={quote_plus(name)}"


@router.post("/register", response_model=ApiResponse[AuthPayload], status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return a token for immediate use."""
    username = user_data.username.lower()
    email = user_data.email.lower()

    # Check if username already exists
    if db.query(User).filter(User.username == username).first():
        raise ConflictError(ERROR_MESSAGES["USERNAME_EXISTS"])

    # Check if email already exists
    if db.query(User).filter(User.email == email).first():
        raise ConflictError(ERROR_MESSAGES["EMAIL_EXISTS"])

    new_user = User(
        username=username,
        email=email,
        hashed_password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        avatar=default_avatar(user_data.first_name, user_data.last_name),
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        raise ConflictError("User already exists")
    db.refresh(new_user)
    logger.info(f"Registered user {new_user.id}")

    return format_response(
        {"access_token": issue_token(new_user), "token_type": "bearer", "user": new_user},
        SUCCESS_MESSAGES["REGISTERED"],
    )


@router.post("/login", response_model=ApiResponse[AuthPayload])
async def login(credentials: UserLogin, response: Response, db: Session = Depends(get_db)):
    """Login with email or username; returns a token and sets the login cookie."""
    identifier = credentials.identifier.strip().lower()
    if "@" in identifier:
        user = db.query(User).filter(User.email == identifier).first()
    else:
        user = db.query(User).filter(User.username == identifier).first()

    if not user or not verify_password(credentials.password, user.hashed_password):
        raise UnauthenticatedError(AuthFailure.INVALID, ERROR_MESSAGES["INVALID_CREDENTIALS"])

    if not user.is_active:
        raise AccountInactiveError()

    access_token = issue_token(user)
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=access_token,
        max_age=settings.COOKIE_EXPIRE_HOURS * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )

    return format_response(
        {"access_token": access_token, "token_type": "bearer", "user": user},
        SUCCESS_MESSAGES["LOGGED_IN"],
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response, current_user: User = Depends(get_current_user)):
    """Clear the login cookie. Bearer tokens are discarded client-side."""
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )
    return format_response(message=SUCCESS_MESSAGES["LOGGED_OUT"])
