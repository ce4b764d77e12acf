"""Models package - Import all models for SQLAlchemy registration."""
from journal_api.models.user import User
from journal_api.models.journal import JournalEntry, JournalTag, JournalAttachment
from journal_api.models.category import Category
from journal_api.models.prompt import JournalPrompt

__all__ = [
    "User",
    "JournalEntry",
    "JournalTag",
    "JournalAttachment",
    "Category",
    "JournalPrompt",
]
