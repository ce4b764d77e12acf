"""
Journal prompt model.
"""
from sqlalchemy import Column, String, Boolean, Enum as SQLEnum
from journal_api.core.constants import PromptCategory
from journal_api.db.base import BaseModel


class JournalPrompt(BaseModel):
    """Writing prompt shared by all users and managed by admins."""
    __tablename__ = "journal_prompts"

    text = Column(String(500), unique=True, nullable=False)
    category = Column(SQLEnum(PromptCategory), nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
