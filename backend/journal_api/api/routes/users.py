"""
Current-user routes: profile, preferences and password.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from journal_api.core.constants import ERROR_MESSAGES, SUCCESS_MESSAGES
from journal_api.core.exceptions import AuthFailure, UnauthenticatedError
from journal_api.core.security import get_password_hash, verify_password
from journal_api.core.utils import format_response
from journal_api.db.session import get_db
from journal_api.models.user import User
from journal_api.schemas.common import ApiResponse, MessageResponse
from journal_api.schemas.user import (
    PasswordChange, PreferencesUpdate, ProfileUpdate, UserResponse
)
from journal_api.api.dependencies import get_current_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return format_response(current_user)


@router.put("/me/profile", response_model=ApiResponse[UserResponse])
async def update_profile(
    profile: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace the profile block."""
    current_user.first_name = profile.first_name
    current_user.last_name = profile.last_name
    current_user.bio = profile.bio
    if profile.avatar is not None:
        current_user.avatar = profile.avatar
    db.commit()
    db.refresh(current_user)
    return format_response(current_user, SUCCESS_MESSAGES["PROFILE_UPDATED"])


@router.put("/me/preferences", response_model=ApiResponse[UserResponse])
async def update_preferences(
    preferences: PreferencesUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the provided preference fields."""
    for name, value in preferences.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(current_user, name, value)
    db.commit()
    db.refresh(current_user)
    return format_response(current_user, SUCCESS_MESSAGES["PREFERENCES_UPDATED"])


@router.put("/me/password", response_model=MessageResponse)
async def change_password(
    passwords: PasswordChange,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change password after verifying the current one."""
    if not verify_password(passwords.current_password, current_user.hashed_password):
        raise UnauthenticatedError(AuthFailure.INVALID, ERROR_MESSAGES["INVALID_CREDENTIALS"])
    current_user.hashed_password = get_password_hash(passwords.new_password)
    db.commit()
    return format_response(message=SUCCESS_MESSAGES["PASSWORD_CHANGED"])
