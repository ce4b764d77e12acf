"""
User model for authentication, profile and preferences.
"""
from sqlalchemy import Column, String, Boolean, Enum as SQLEnum
from sqlalchemy.orm import relationship
from journal_api.core.constants import DEFAULTS, Role, Theme
from journal_api.db.base import BaseModel


class User(BaseModel):
    """Account model. Username and email are stored lowercased."""
    __tablename__ = "users"

    username = Column(String(30), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    role = Column(SQLEnum(Role), default=Role.USER, nullable=False)

    # Profile
    first_name = Column(String(20), nullable=False)
    last_name = Column(String(20), nullable=True)
    bio = Column(String(500), nullable=True)
    avatar = Column(String(500), nullable=True)

    # Preferences
    theme = Column(SQLEnum(Theme), default=DEFAULTS.theme, nullable=False)
    timezone = Column(String(64), default=DEFAULTS.timezone, nullable=False)
    reminder_time = Column(String(5), nullable=True)  # HH:MM

    # Relationships
    journal_entries = relationship("JournalEntry", back_populates="user", cascade="all, delete-orphan")
    categories = relationship("Category", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def profile(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "bio": self.bio,
            "avatar": self.avatar,
        }

    @property
    def preferences(self) -> dict:
        return {
            "theme": self.theme,
            "timezone": self.timezone,
            "reminder_time": self.reminder_time,
        }
