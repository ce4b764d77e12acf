"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from journal_api.core.constants import (
    VALIDATION, USERNAME_PATTERN, REMINDER_TIME_PATTERN, URL_PATTERN, Role, Theme
)


class UserCreate(BaseModel):
    """Schema for user registration."""
    username: str = Field(
        min_length=VALIDATION.username.min_length,
        max_length=VALIDATION.username.max_length,
        pattern=USERNAME_PATTERN,
    )
    email: EmailStr
    password: str = Field(
        min_length=VALIDATION.password.min_length,
        max_length=VALIDATION.password.max_length,
    )
    first_name: str = Field(min_length=1, max_length=VALIDATION.first_name_max)
    last_name: Optional[str] = Field(None, max_length=VALIDATION.last_name_max)

    @field_validator("username", "first_name", "last_name", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserLogin(BaseModel):
    """Schema for user login. identifier is an email or a username."""
    identifier: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ProfileUpdate(BaseModel):
    """Schema for profile update."""
    first_name: str = Field(min_length=1, max_length=VALIDATION.first_name_max)
    last_name: Optional[str] = Field(None, max_length=VALIDATION.last_name_max)
    bio: Optional[str] = Field(None, max_length=VALIDATION.bio_max)
    avatar: Optional[str] = Field(None, pattern=URL_PATTERN)


class PreferencesUpdate(BaseModel):
    """Schema for preferences update."""
    theme: Optional[Theme] = None
    timezone: Optional[str] = Field(None, min_length=1, max_length=64)
    reminder_time: Optional[str] = Field(None, pattern=REMINDER_TIME_PATTERN)


class PasswordChange(BaseModel):
    """Schema for password change."""
    current_password: str = Field(min_length=1)
    new_password: str = Field(
        min_length=VALIDATION.password.min_length,
        max_length=VALIDATION.password.max_length,
    )


class ProfileResponse(BaseModel):
    first_name: str
    last_name: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None


class PreferencesResponse(BaseModel):
    theme: Theme
    timezone: str
    reminder_time: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response. The password hash is never included."""
    id: int
    username: str
    email: EmailStr
    role: Role
    is_active: bool
    profile: ProfileResponse
    preferences: PreferencesResponse
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AuthPayload(BaseModel):
    """Token plus the account it was issued for."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
